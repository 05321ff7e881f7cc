"""Protocols for the collaborators of the announcement builders."""

from rail_announcements.domain.contracts.audio_player import AudioPlayerProtocol
from rail_announcements.domain.contracts.clip_catalogue import ClipCatalogueProtocol
from rail_announcements.domain.contracts.error_reporter import ErrorReporterProtocol

__all__ = [
    "AudioPlayerProtocol",
    "ClipCatalogueProtocol",
    "ErrorReporterProtocol",
]
