"""Sources of recorded clips.

A clip id such as ``station.m.BTN`` maps to the file
``<file_prefix>/station/m/BTN.<extension>``.
"""

import asyncio
import io
import logging
from pathlib import Path
from typing import Protocol

import aiohttp
from pydub import AudioSegment

from rail_announcements.domain.models.errors import MissingAudioAssetError

logger = logging.getLogger(__name__)


def clip_path(clip_id: str, extension: str) -> str:
    """Relative path of a clip's recording."""
    return f"{clip_id.replace('.', '/')}.{extension}"


class ClipSource(Protocol):
    """Loads the recording of a clip."""

    async def load(self, clip_id: str) -> AudioSegment:
        """Load a clip's audio.

        Raises:
            MissingAudioAssetError: If the clip has no recording.
        """
        ...


class LocalClipSource:
    """Loads clips from a directory of recordings."""

    def __init__(self, asset_dir: Path, file_prefix: str, extension: str = "mp3") -> None:
        """Initialize the clip source.

        Args:
            asset_dir: Root directory of the audio assets.
            file_prefix: Path of the voice's clips below asset_dir.
            extension: Audio file extension.
        """
        self._root = asset_dir / file_prefix
        self._extension = extension

    def path_for(self, clip_id: str) -> Path:
        return self._root / clip_path(clip_id, self._extension)

    def has_clip(self, clip_id: str) -> bool:
        return self.path_for(clip_id).is_file()

    async def load(self, clip_id: str) -> AudioSegment:
        """Load a clip from disk."""
        path = self.path_for(clip_id)
        if not path.is_file():
            raise MissingAudioAssetError(clip_id)
        return await asyncio.to_thread(AudioSegment.from_file, path, format=self._extension)


class HttpClipSource:
    """Downloads clips from an asset server."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        file_prefix: str,
        extension: str = "mp3",
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize with an aiohttp session shared across downloads."""
        self._session = session
        self._base_url = f"{base_url.rstrip('/')}/{file_prefix.strip('/')}"
        self._extension = extension
        self._timeout_seconds = timeout_seconds

    def url_for(self, clip_id: str) -> str:
        return f"{self._base_url}/{clip_path(clip_id, self._extension)}"

    async def load(self, clip_id: str) -> AudioSegment:
        """Download a clip.

        Raises:
            MissingAudioAssetError: If the server has no recording for the clip.
        """
        url = self.url_for(clip_id)
        timeout = aiohttp.ClientTimeout(total=self._timeout_seconds)
        async with self._session.get(url, timeout=timeout) as response:
            if response.status == 404:
                raise MissingAudioAssetError(clip_id)
            response.raise_for_status()
            data = await response.read()

        logger.debug(f"Downloaded {clip_id} ({len(data)} bytes)")
        return await asyncio.to_thread(
            AudioSegment.from_file, io.BytesIO(data), format=self._extension
        )
