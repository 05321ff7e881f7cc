"""Protocol for the set of recorded clips."""

from typing import Protocol


class ClipCatalogueProtocol(Protocol):
    """Protocol for looking up which clip identifiers have audio."""

    def has_clip(self, clip_id: str) -> bool:
        """Check whether a recording exists for a clip id.

        Args:
            clip_id: Dotted clip identifier, e.g. "station.m.BTN".

        Returns:
            True if the clip can be played.
        """
        ...
