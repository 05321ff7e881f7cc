"""Domain layer - announcement models and collaborator contracts."""

from rail_announcements.domain.contracts import (
    AudioPlayerProtocol,
    ClipCatalogueProtocol,
    ErrorReporterProtocol,
)
from rail_announcements.domain.models import (
    AudioClip,
    AudioItem,
    CallingPoint,
    SplitInfo,
)

__all__ = [
    "AudioClip",
    "AudioItem",
    "AudioPlayerProtocol",
    "CallingPoint",
    "ClipCatalogueProtocol",
    "ErrorReporterProtocol",
    "SplitInfo",
]
