"""Calling point domain model."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from rail_announcements.domain.models.portion import Formation


class SplitType(StrEnum):
    """How the train changes formation at a calling point."""

    NONE = "none"
    SPLIT_TERMINATES = "splitTerminates"  # Part of the train detaches and terminates here
    SPLITS = "splits"  # The train divides and both portions continue


class CallingPoint(BaseModel):
    """One scheduled stop of a service.

    Accepts the camelCase field names used by announcement presets and live
    data adapters (``crsCode``, ``shortPlatform``...) as well as snake_case,
    and a bare CRS code string as shorthand.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    crs_code: str
    short_platform: str | None = None  # "<position>.<count>", e.g. "front.4"
    request_stop: bool = False
    split_type: SplitType = SplitType.NONE
    split_form: str | None = None  # Formation of the detaching portion, defaults to "front.1"
    split_calling_points: tuple["CallingPoint", ...] = ()

    @model_validator(mode="before")
    @classmethod
    def accept_crs_shorthand(cls, data: Any) -> Any:
        """Allow a bare station code in place of a full calling point."""
        if isinstance(data, str):
            return {"crs_code": data}
        return data

    @field_validator("crs_code")
    @classmethod
    def validate_crs_code(cls, v: str) -> str:
        """Validate the CRS code is a three character station code."""
        v = v.strip().upper()
        if len(v) != 3 or not v.isalnum():
            raise ValueError(f"crs_code must be a 3-character station code, got {v!r}")
        return v

    @field_validator("short_platform", "split_form")
    @classmethod
    def validate_formation(cls, v: str | None) -> str | None:
        """Validate formation markers, treating empty strings as absent."""
        if not v:
            return None
        Formation.parse(v)
        return v

    @model_validator(mode="after")
    def validate_no_nested_splits(self) -> "CallingPoint":
        """Split portions are flat lists: nested divides are not supported."""
        for point in self.split_calling_points:
            if point.is_divide:
                raise ValueError(
                    f"Calling point {point.crs_code} in the split portion of {self.crs_code} "
                    "cannot itself divide"
                )
        return self

    @property
    def is_divide(self) -> bool:
        return self.split_type is not SplitType.NONE
