"""Announcement preset domain model."""

from pydantic import BaseModel, ConfigDict

from rail_announcements.domain.models.announcement_options import (
    DisruptedTrainAnnouncementOptions,
    NextTrainAnnouncementOptions,
)


class NextTrainPreset(BaseModel):
    """A named, ready-made next train announcement."""

    model_config = ConfigDict(frozen=True)

    name: str
    state: NextTrainAnnouncementOptions


class DisruptedTrainPreset(BaseModel):
    """A named, ready-made disrupted train announcement."""

    model_config = ConfigDict(frozen=True)

    name: str
    state: DisruptedTrainAnnouncementOptions
