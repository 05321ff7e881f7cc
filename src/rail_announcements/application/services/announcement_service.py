"""Announcement orchestration service."""

import logging
import re
from collections.abc import Callable, Collection, Sequence

from rail_announcements.application.services.advisories import (
    get_request_stops,
    get_short_platforms,
)
from rail_announcements.application.services.calling_points import get_calling_points
from rail_announcements.application.services.train_info import TrainInfoBuilder
from rail_announcements.domain.contracts.audio_player import AudioPlayerProtocol
from rail_announcements.domain.contracts.clip_catalogue import ClipCatalogueProtocol
from rail_announcements.domain.contracts.error_reporter import ErrorReporterProtocol
from rail_announcements.domain.models import clips
from rail_announcements.domain.models.announcement_options import (
    ChimeType,
    DisruptedTrainAnnouncementOptions,
    DisruptionType,
    NextTrainAnnouncementOptions,
    ThroughTrainAnnouncementOptions,
)
from rail_announcements.domain.models.audio_item import AudioClip, AudioItem, clip_id
from rail_announcements.domain.models.clips import Inflection
from rail_announcements.domain.models.errors import (
    AnnouncementError,
    MissingAudioAssetError,
    UnknownDisruptionReasonError,
)
from rail_announcements.domain.models.operator_catalogue import OperatorCatalogue

logger = logging.getLogger(__name__)

# Platforms up to this number have a combined "platform N for the" recording
MAX_COMBINED_PLATFORM = 12
COMBINED_LETTER_PLATFORMS = ("a", "b")

_LEADING_NUMBER = re.compile(r"^\d+")


def _has_combined_platform_clip(platform: str) -> bool:
    match = _LEADING_NUMBER.match(platform)
    if match is not None:
        return int(match.group()) <= MAX_COMBINED_PLATFORM
    return platform.lower() in COMBINED_LETTER_PLATFORMS


def _chime_files(chime: ChimeType) -> list[AudioItem]:
    if chime is ChimeType.NONE:
        return []
    return [clips.chime(chime)]


class AnnouncementService:
    """Builds announcement scripts and hands them to the audio player."""

    def __init__(
        self,
        operator_catalogue: OperatorCatalogue,
        player: AudioPlayerProtocol,
        error_reporter: ErrorReporterProtocol,
        clip_catalogue: ClipCatalogueProtocol | None = None,
        disruption_reasons: Collection[str] | None = None,
    ) -> None:
        """Initialize the announcement service.

        Args:
            operator_catalogue: Operator names with recorded audio.
            player: Receives finished clip sequences.
            error_reporter: Shows build failures to the user.
            clip_catalogue: When set, every clip is checked before playback.
            disruption_reasons: When set, the disruption reasons with a recording.
        """
        self._train_info = TrainInfoBuilder(operator_catalogue)
        self._player = player
        self._error_reporter = error_reporter
        self._clip_catalogue = clip_catalogue
        self._disruption_reasons = (
            frozenset(disruption_reasons) if disruption_reasons is not None else None
        )

    def platform_files(self, platform: str, is_delayed: bool = False) -> list[AudioItem]:
        """Render "platform N for the (delayed)"."""
        if _has_combined_platform_clip(platform):
            files: list[AudioItem] = [AudioClip(f"s.platform {platform} for the", 250)]
            if is_delayed:
                files.append("m.delayed")
            return files

        return [
            AudioClip("s.platform", 250),
            clips.platform_number(platform),
            "m.for the delayed" if is_delayed else "m.for the",
        ]

    def build_next_train(self, options: NextTrainAnnouncementOptions) -> list[AudioItem]:
        """Build the script for the next train to depart.

        Raises:
            InvalidTrainConfigurationError: If the calling pattern cannot be announced.
            MissingAudioAssetError: If a clip is not in the clip catalogue.
        """
        overall_length = options.overall_length
        platform_files = self.platform_files(options.platform, options.is_delayed)
        train_info = self._train_info.build(
            options.hour,
            options.min,
            options.toc,
            options.via_codes,
            options.terminating_station_code,
            options.calling_at,
        )

        files = _chime_files(options.chime)
        files.extend(platform_files)
        files.extend(train_info)
        files.extend(
            get_calling_points(
                options.calling_at, options.terminating_station_code, overall_length
            )
        )
        files.extend(
            get_short_platforms(
                options.calling_at, options.terminating_station_code, overall_length
            )
        )
        files.extend(
            get_request_stops(options.calling_at, options.terminating_station_code, overall_length)
        )

        coaches = options.coach_count
        if coaches is not None:
            files.extend(
                [
                    AudioClip("s.this train is formed of", 250),
                    clips.platform_number(coaches),
                    "e.coach" if coaches == "1" else "e.coaches",
                ]
            )

        # Platform and train details are repeated to close the announcement
        files.extend(platform_files)
        files.extend(train_info)

        self.validate_clips(files)
        return files

    def build_disrupted_train(self, options: DisruptedTrainAnnouncementOptions) -> list[AudioItem]:
        """Build the script for a delayed or cancelled train.

        Raises:
            UnknownDisruptionReasonError: If the reason has no recording.
            MissingAudioAssetError: If a clip is not in the clip catalogue.
        """
        reason = options.disruption_reason
        if (
            reason
            and self._disruption_reasons is not None
            and reason not in self._disruption_reasons
        ):
            raise UnknownDisruptionReasonError(reason)

        files = _chime_files(options.chime)
        files.append("s.were sorry to announce that the")
        files.extend(
            self._train_info.build(
                options.hour,
                options.min,
                options.toc,
                [],
                options.terminating_station_code,
                [],
                stations_always_middle=True,
            )
        )

        end = Inflection.MID if options.disruption_reason else Inflection.END

        if options.disruption_type is DisruptionType.DELAYED_BY:
            delay = int(options.delay_time)
            files.append("m.is delayed by approximately")
            if delay < 10:
                files.append(clips.platform_number(delay, Inflection.MID))
            else:
                files.append(clips.minute(delay))
            files.append(clips.phrase(end, "minutes" if delay != 1 else "minute"))
        elif options.disruption_type is DisruptionType.DELAY:
            files.append(clips.phrase(end, "is being delayed"))
        else:
            files.append(clips.phrase(end, "has been cancelled"))

        if options.disruption_reason:
            files.extend(["m.due to", clips.disruption_reason(options.disruption_reason)])

        files.append(AudioClip("w.were sorry for the delay this will cause to your journey", 250))

        self.validate_clips(files)
        return files

    def build_through_train(self, options: ThroughTrainAnnouncementOptions) -> list[AudioItem]:
        """Build the script warning of a train that does not stop.

        Raises:
            MissingAudioAssetError: If a clip is not in the clip catalogue.
        """
        files = _chime_files(options.chime)
        files.extend(
            [
                AudioClip("s.the train now approaching platform", 250),
                clips.platform_number(options.platform, Inflection.MID),
                "e.does not stop here",
                AudioClip("w.please stand well clear of the edge of the platform", 400),
            ]
        )

        self.validate_clips(files)
        return files

    def validate_clips(self, files: Sequence[AudioItem]) -> None:
        """Check every clip has a recording, when a clip catalogue is configured.

        Raises:
            MissingAudioAssetError: For the first clip without a recording.
        """
        if self._clip_catalogue is None:
            return
        for item in files:
            if not self._clip_catalogue.has_clip(clip_id(item)):
                raise MissingAudioAssetError(clip_id(item))

    async def play_next_train(
        self, options: NextTrainAnnouncementOptions, as_download: bool = False
    ) -> bool:
        """Build and play a next train announcement.

        Returns:
            True if the announcement was played, False if building or playback failed.
        """
        return await self._build_and_play(
            "next train", lambda: self.build_next_train(options), as_download
        )

    async def play_disrupted_train(
        self, options: DisruptedTrainAnnouncementOptions, as_download: bool = False
    ) -> bool:
        """Build and play a disrupted train announcement."""
        return await self._build_and_play(
            "disrupted train", lambda: self.build_disrupted_train(options), as_download
        )

    async def play_through_train(
        self, options: ThroughTrainAnnouncementOptions, as_download: bool = False
    ) -> bool:
        """Build and play a through train announcement."""
        return await self._build_and_play(
            "through train", lambda: self.build_through_train(options), as_download
        )

    async def play_clips(self, files: Sequence[AudioItem], as_download: bool = False) -> bool:
        """Play a fixed clip sequence, such as a chime."""
        return await self._build_and_play("fixed", lambda: self._checked(files), as_download)

    def _checked(self, files: Sequence[AudioItem]) -> list[AudioItem]:
        self.validate_clips(files)
        return list(files)

    async def _build_and_play(
        self,
        announcement_type: str,
        build: Callable[[], list[AudioItem]],
        as_download: bool,
    ) -> bool:
        # The player loads every clip before any audio is output
        try:
            files = build()
        except AnnouncementError as e:
            logger.error(f"Failed to build {announcement_type} announcement: {e}")
            self._error_reporter.report(str(e))
            return False
        except Exception as e:
            logger.exception(f"Unexpected error building {announcement_type} announcement")
            self._error_reporter.report(f"Could not build announcement: {e}")
            return False

        logger.info(f"Playing {announcement_type} announcement ({len(files)} clips)")
        try:
            await self._player.play(files, as_download)
        except AnnouncementError as e:
            logger.error(f"Failed to play {announcement_type} announcement: {e}")
            self._error_reporter.report(str(e))
            return False
        except Exception as e:
            logger.exception(f"Unexpected error playing {announcement_type} announcement")
            self._error_reporter.report(f"Could not play announcement: {e}")
            return False
        return True
