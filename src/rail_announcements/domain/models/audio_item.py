"""Audio item domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AudioClip:
    """A clip reference carrying a playback delay hint."""

    id: str
    delay_start: int | None = None  # Silence in milliseconds before the clip starts


AudioItem = str | AudioClip


def clip_id(item: AudioItem) -> str:
    """Return the clip identifier of an audio item."""
    if isinstance(item, AudioClip):
        return item.id
    return item


def delay_of(item: AudioItem) -> int:
    """Return the delay hint of an audio item in milliseconds (0 when absent)."""
    if isinstance(item, AudioClip) and item.delay_start:
        return item.delay_start
    return 0


def with_delay(item_id: str, delay_start: int | None) -> AudioItem:
    """Wrap a clip id with a delay hint, or return the bare id when no delay is set."""
    if delay_start:
        return AudioClip(item_id, delay_start)
    return item_id
