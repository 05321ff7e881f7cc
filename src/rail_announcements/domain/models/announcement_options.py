"""Announcement option records.

These are built by the caller (presets, command line, live data adapters)
and treated as immutable input for one announcement build.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from rail_announcements.domain.models.calling_point import CallingPoint


class ChimeType(StrEnum):
    THREE = "three"
    FOUR = "four"
    NONE = "none"


class DisruptionType(StrEnum):
    DELAY = "delay"  # Delayed by an unknown amount
    DELAYED_BY = "delayedBy"  # Delayed by a known number of minutes
    CANCEL = "cancel"


# Platforms with recordings: 1-12 with optional a-d suffix, 13-20, and lettered a and b
PLATFORMS: tuple[str, ...] = (
    *(f"{n}{suffix}" for n in range(1, 13) for suffix in ("", "a", "b", "c", "d")),
    *(str(n) for n in range(13, 21)),
    "a",
    "b",
)


class _AnnouncementOptions(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    chime: ChimeType = ChimeType.FOUR
    platform: str

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, v: str) -> str:
        """Validate the platform is one with recordings."""
        v = v.strip().lower()
        if not v:
            raise ValueError("platform must not be empty")
        if v not in PLATFORMS:
            raise ValueError(f"platform {v!r} has no recording")
        return v


class _ServiceAnnouncementOptions(_AnnouncementOptions):
    hour: str
    min: str
    toc: str = ""  # Empty for an unnamed operator
    terminating_station_code: str
    vias: tuple[CallingPoint, ...] = ()

    @field_validator("hour", "min")
    @classmethod
    def validate_time_part(cls, v: str) -> str:
        """Validate hour and minute start with two digits.

        Some recordings carry a variant suffix, e.g. "00 - midnight".
        """
        v = v.strip()
        if len(v) < 2 or not v[:2].isdigit():
            raise ValueError(f"time parts must start with two digits, got {v!r}")
        return v

    @field_validator("terminating_station_code")
    @classmethod
    def validate_terminating_station(cls, v: str) -> str:
        """Validate the terminating station is a three character station code."""
        v = v.strip().upper()
        if len(v) != 3:
            raise ValueError(f"terminating_station_code must be a 3-character code, got {v!r}")
        return v

    @property
    def via_codes(self) -> list[str]:
        return [via.crs_code for via in self.vias]


class NextTrainAnnouncementOptions(_ServiceAnnouncementOptions):
    """Options for a "the next train to depart from platform..." announcement."""

    is_delayed: bool = False
    calling_at: tuple[CallingPoint, ...] = ()
    coaches: str | None = None  # e.g. "8 coaches"; None when the length is unknown

    @field_validator("coaches")
    @classmethod
    def validate_coaches(cls, v: str | None) -> str | None:
        """Validate the coach description starts with a coach count."""
        if v is None or not v.strip():
            return None
        count = v.split(" ")[0]
        if not count.isdigit() or int(count) < 1:
            raise ValueError(f"coaches must start with a positive coach count, got {v!r}")
        return v.strip()

    @property
    def coach_count(self) -> str | None:
        if self.coaches is None:
            return None
        return self.coaches.split(" ")[0]

    @property
    def overall_length(self) -> int | None:
        count = self.coach_count
        return int(count) if count is not None else None


class DisruptedTrainAnnouncementOptions(_ServiceAnnouncementOptions):
    """Options for a delayed or cancelled train announcement."""

    disruption_type: DisruptionType = DisruptionType.DELAYED_BY
    disruption_reason: str = ""  # Empty when no reason is given
    delay_time: str = Field(default="10", description="Delay length in minutes")

    @field_validator("delay_time")
    @classmethod
    def validate_delay_time(cls, v: str) -> str:
        """Validate the delay is a positive whole number of minutes."""
        v = v.strip()
        if not v.isdigit() or int(v) < 1:
            raise ValueError(f"delay_time must be a positive number of minutes, got {v!r}")
        return v


class ThroughTrainAnnouncementOptions(_AnnouncementOptions):
    """Options for a non-stopping train announcement."""
