"""Audio adapters."""

from rail_announcements.adapters.audio.clip_catalogue import StaticClipCatalogue
from rail_announcements.adapters.audio.clip_sources import (
    ClipSource,
    HttpClipSource,
    LocalClipSource,
)
from rail_announcements.adapters.audio.pydub_audio_player import PydubAudioPlayer

__all__ = [
    "ClipSource",
    "HttpClipSource",
    "LocalClipSource",
    "PydubAudioPlayer",
    "StaticClipCatalogue",
]
