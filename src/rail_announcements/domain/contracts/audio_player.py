"""Protocol for playing or downloading an announcement."""

from collections.abc import Sequence
from typing import Protocol

from rail_announcements.domain.models.audio_item import AudioItem


class AudioPlayerProtocol(Protocol):
    """Protocol for the audio player that receives a finished clip sequence."""

    async def play(self, items: Sequence[AudioItem], as_download: bool = False) -> None:
        """Play the clips back-to-back, honouring each item's delay hint.

        Args:
            items: Ordered clip sequence of a complete announcement.
            as_download: Render the announcement to a file instead of playing it.
        """
        ...
