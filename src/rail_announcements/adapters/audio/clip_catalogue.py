"""Clip catalogue adapters."""

from collections.abc import Iterable

from rail_announcements.domain.contracts.clip_catalogue import ClipCatalogueProtocol


class StaticClipCatalogue(ClipCatalogueProtocol):
    """A fixed set of available clip ids, e.g. from the [clips] config table."""

    def __init__(self, clip_ids: Iterable[str]) -> None:
        """Initialize with the available clip ids."""
        self._clip_ids = frozenset(clip_ids)

    def has_clip(self, clip_id: str) -> bool:
        return clip_id in self._clip_ids

    def __len__(self) -> int:
        return len(self._clip_ids)
