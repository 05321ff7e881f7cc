"""Application services."""

from rail_announcements.application.services.advisories import (
    get_request_stops,
    get_short_platforms,
)
from rail_announcements.application.services.announcement_service import AnnouncementService
from rail_announcements.application.services.calling_points import (
    get_calling_points,
    get_calling_points_with_splits,
)
from rail_announcements.application.services.list_formatter import (
    PluraliseOptions,
    pluralise_audio,
)
from rail_announcements.application.services.split_resolver import get_split_info
from rail_announcements.application.services.train_info import TrainInfoBuilder

__all__ = [
    "AnnouncementService",
    "PluraliseOptions",
    "TrainInfoBuilder",
    "get_calling_points",
    "get_calling_points_with_splits",
    "get_request_stops",
    "get_short_platforms",
    "get_split_info",
    "pluralise_audio",
]
