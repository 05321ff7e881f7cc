"""Domain models for rail announcements."""

from rail_announcements.domain.models.announcement_button import AnnouncementButton
from rail_announcements.domain.models.announcement_options import (
    ChimeType,
    DisruptedTrainAnnouncementOptions,
    DisruptionType,
    NextTrainAnnouncementOptions,
    ThroughTrainAnnouncementOptions,
)
from rail_announcements.domain.models.announcement_preset import (
    DisruptedTrainPreset,
    NextTrainPreset,
)
from rail_announcements.domain.models.audio_item import AudioClip, AudioItem
from rail_announcements.domain.models.calling_point import CallingPoint, SplitType
from rail_announcements.domain.models.clips import Inflection
from rail_announcements.domain.models.errors import (
    AnnouncementError,
    InvalidTrainConfigurationError,
    MissingAudioAssetError,
    UnknownDisruptionReasonError,
)
from rail_announcements.domain.models.operator_catalogue import OperatorCatalogue
from rail_announcements.domain.models.portion import Formation, Portion, PortionPosition
from rail_announcements.domain.models.split_info import SplitInfo, SplitInfoStop, SplitPortion

__all__ = [
    "AnnouncementButton",
    "AnnouncementError",
    "AudioClip",
    "AudioItem",
    "CallingPoint",
    "ChimeType",
    "DisruptedTrainAnnouncementOptions",
    "DisruptedTrainPreset",
    "DisruptionType",
    "Formation",
    "Inflection",
    "InvalidTrainConfigurationError",
    "MissingAudioAssetError",
    "NextTrainAnnouncementOptions",
    "NextTrainPreset",
    "OperatorCatalogue",
    "Portion",
    "PortionPosition",
    "SplitInfo",
    "SplitInfoStop",
    "SplitPortion",
    "SplitType",
    "ThroughTrainAnnouncementOptions",
    "UnknownDisruptionReasonError",
]
