"""Audio player that renders clip sequences with pydub."""

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from pydub import AudioSegment
from pydub.playback import play as play_segment

from rail_announcements.adapters.audio.clip_sources import ClipSource
from rail_announcements.domain.contracts.audio_player import AudioPlayerProtocol
from rail_announcements.domain.models.audio_item import AudioItem, clip_id, delay_of

logger = logging.getLogger(__name__)


def _matching_silence(segment: AudioSegment, duration_ms: int) -> AudioSegment:
    silence = AudioSegment.silent(duration=duration_ms, frame_rate=segment.frame_rate)
    silence = silence.set_channels(segment.channels)
    silence = silence.set_sample_width(segment.sample_width)
    return silence


class PydubAudioPlayer(AudioPlayerProtocol):
    """Joins clips back-to-back, inserting each item's delay as leading silence."""

    def __init__(
        self,
        clip_source: ClipSource,
        output_dir: Path,
        output_format: str = "wav",
    ) -> None:
        """Initialize the player.

        Args:
            clip_source: Where clip recordings are loaded from.
            output_dir: Directory for downloaded announcements.
            output_format: Format of downloaded announcements.
        """
        self._clip_source = clip_source
        self._output_dir = output_dir
        self._output_format = output_format
        self.last_output_path: Path | None = None

    async def render(self, items: Sequence[AudioItem]) -> AudioSegment:
        """Load every clip and join them into one segment.

        All clips are loaded before anything is returned, so a missing clip
        fails the whole announcement.

        Raises:
            ValueError: If there are no items.
            MissingAudioAssetError: If a clip has no recording.
        """
        if not items:
            raise ValueError("No clips provided for the announcement.")

        segments = [await self._clip_source.load(clip_id(item)) for item in items]

        merged: AudioSegment | None = None
        for item, segment in zip(items, segments, strict=True):
            delay = delay_of(item)
            if delay > 0:
                segment = _matching_silence(segment, delay) + segment
            merged = segment if merged is None else merged + segment

        logger.debug(f"Rendered {len(items)} clips into {len(merged)} ms of audio")
        return merged

    async def play(self, items: Sequence[AudioItem], as_download: bool = False) -> None:
        """Play the announcement, or export it to the output directory."""
        merged = await self.render(items)

        if as_download:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
            output_path = self._output_dir / f"announcement-{timestamp}.{self._output_format}"
            merged.export(output_path, format=self._output_format)
            self.last_output_path = output_path
            logger.info(f"Saved announcement to {output_path}")
            return

        await asyncio.to_thread(play_segment, merged)
