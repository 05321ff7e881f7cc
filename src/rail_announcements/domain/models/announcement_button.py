"""Announcement button domain model."""

from dataclasses import dataclass

from rail_announcements.domain.models.audio_item import AudioItem


@dataclass(frozen=True)
class AnnouncementButton:
    """A fixed clip sequence played on demand, e.g. a chime or an emergency message."""

    name: str  # Command line identifier, e.g. "castleford-chemical-emergency"
    label: str
    section: str
    files: tuple[AudioItem, ...]
