"""Command line interface for building and playing announcements."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import aiohttp
from pydantic import ValidationError

from rail_announcements.adapters.audio import (
    ClipSource,
    HttpClipSource,
    LocalClipSource,
    PydubAudioPlayer,
    StaticClipCatalogue,
)
from rail_announcements.adapters.config import AppConfig, OperatorCatalogueLoader, PresetLoader
from rail_announcements.adapters.config.announcement_buttons import (
    ANNOUNCEMENT_BUTTONS,
    find_button,
)
from rail_announcements.adapters.config.static_tables import DISRUPTION_REASONS
from rail_announcements.application.services import AnnouncementService
from rail_announcements.domain.contracts.audio_player import AudioPlayerProtocol
from rail_announcements.domain.models import (
    AnnouncementError,
    AudioClip,
    AudioItem,
    ChimeType,
    DisruptedTrainAnnouncementOptions,
    NextTrainAnnouncementOptions,
    ThroughTrainAnnouncementOptions,
    clips,
)

logger = logging.getLogger(__name__)

ANNOUNCEMENT_TYPES = ("next-train", "disrupted", "through")

AnnouncementOptions = (
    NextTrainAnnouncementOptions
    | DisruptedTrainAnnouncementOptions
    | ThroughTrainAnnouncementOptions
)


class ConsoleErrorReporter:
    """Shows announcement failures on stderr."""

    def report(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)


def serialise_item(item: AudioItem) -> str | dict[str, Any]:
    """Convert an audio item to its JSON form."""
    if isinstance(item, AudioClip):
        if item.delay_start is None:
            return {"id": item.id, "opts": {}}
        return {"id": item.id, "opts": {"delayStart": item.delay_start}}
    return item


def _find_preset(presets: list[Any], name: str) -> Any:
    """Find a preset by exact name, or by 1-based index."""
    for preset in presets:
        if preset.name == name:
            return preset
    if name.isdigit() and 1 <= int(name) <= len(presets):
        return presets[int(name) - 1]
    raise ValueError(f"No preset named {name!r}")


def load_options(args: argparse.Namespace, config: AppConfig) -> AnnouncementOptions:
    """Load announcement options from a preset, a JSON file or command line flags.

    Raises:
        ValueError: If the options cannot be found or are invalid.
    """
    announcement_type = args.announcement_type

    if announcement_type == "through":
        return ThroughTrainAnnouncementOptions(
            platform=args.platform or "1", chime=ChimeType(args.chime)
        )

    if args.preset:
        if announcement_type == "next-train":
            return _find_preset(PresetLoader.load_next_train(config), args.preset).state
        return _find_preset(PresetLoader.load_disrupted_train(config), args.preset).state

    if not args.options:
        raise ValueError("Either --preset or --options is required")

    options_path = Path(args.options)
    if not options_path.exists():
        raise ValueError(f"Options file not found: {options_path}")
    data = json.loads(options_path.read_text(encoding="utf-8"))

    try:
        if announcement_type == "next-train":
            return NextTrainAnnouncementOptions.model_validate(data)
        return DisruptedTrainAnnouncementOptions.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid announcement options in {options_path}: {e}") from e


def build_script(service: AnnouncementService, options: AnnouncementOptions) -> list[AudioItem]:
    """Build the clip sequence for any announcement type."""
    if isinstance(options, NextTrainAnnouncementOptions):
        return service.build_next_train(options)
    if isinstance(options, DisruptedTrainAnnouncementOptions):
        return service.build_disrupted_train(options)
    return service.build_through_train(options)


async def play_announcement(
    service: AnnouncementService, options: AnnouncementOptions, as_download: bool
) -> bool:
    """Build and play (or download) any announcement type."""
    if isinstance(options, NextTrainAnnouncementOptions):
        return await service.play_next_train(options, as_download)
    if isinstance(options, DisruptedTrainAnnouncementOptions):
        return await service.play_disrupted_train(options, as_download)
    return await service.play_through_train(options, as_download)


def create_service(config: AppConfig, player: AudioPlayerProtocol) -> AnnouncementService:
    """Wire the announcement service from configuration."""
    clip_catalogue = None
    if config.validate_clips:
        available = config.get_available_clips()
        if available is None:
            raise ValueError(
                "validate_clips is enabled but no [clips] available list is configured"
            )
        clip_catalogue = StaticClipCatalogue(available)
        logger.info(f"Validating clips against {len(clip_catalogue)} available clip(s)")

    return AnnouncementService(
        operator_catalogue=OperatorCatalogueLoader.load(config),
        player=player,
        error_reporter=ConsoleErrorReporter(),
        clip_catalogue=clip_catalogue,
        disruption_reasons=DISRUPTION_REASONS,
    )


def create_player(config: AppConfig, session: aiohttp.ClientSession | None) -> PydubAudioPlayer:
    """Create the audio player, reading clips over HTTP when a base URL is configured."""
    clip_source: ClipSource
    if config.audio_base_url and session is not None:
        clip_source = HttpClipSource(
            session,
            config.audio_base_url,
            config.file_prefix,
            config.clip_extension,
            config.http_timeout_seconds,
        )
    else:
        clip_source = LocalClipSource(
            Path(config.audio_asset_dir), config.file_prefix, config.clip_extension
        )
    return PydubAudioPlayer(clip_source, Path(config.output_dir))


def _print_presets(config: AppConfig, as_json: bool) -> None:
    next_train = PresetLoader.load_next_train(config)
    disrupted = PresetLoader.load_disrupted_train(config)

    if as_json:
        print(
            json.dumps(
                {
                    "next-train": [p.model_dump(mode="json", by_alias=True) for p in next_train],
                    "disrupted": [p.model_dump(mode="json", by_alias=True) for p in disrupted],
                },
                indent=2,
            )
        )
        return

    for title, presets in (("Next train", next_train), ("Disrupted train", disrupted)):
        print(f"{title}:")
        for i, preset in enumerate(presets, start=1):
            print(f"  {i}. {preset.name}")


def _print_operators(config: AppConfig) -> None:
    catalogue = OperatorCatalogueLoader.load(config)
    for name in catalogue.all_operators():
        suffix = " (standalone)" if catalogue.is_standalone_only(name) else ""
        print(f"{name}{suffix}")


def _print_buttons() -> None:
    section = None
    for button in ANNOUNCEMENT_BUTTONS:
        if button.section != section:
            section = button.section
            print(f"{section}:")
        print(f"  {button.name}: {button.label}")


def _print_reasons() -> None:
    for reason in DISRUPTION_REASONS:
        print(reason)


def _add_announcement_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("announcement_type", choices=ANNOUNCEMENT_TYPES, help="Announcement type")
    parser.add_argument("--preset", help="Preset name or 1-based index")
    parser.add_argument("--options", help="JSON file with announcement options")
    parser.add_argument("--platform", help="Platform (through train only)")
    parser.add_argument(
        "--chime",
        choices=[c.value for c in ChimeType],
        default=ChimeType.FOUR.value,
        help="Chime (through train only)",
    )


def setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Rail station announcement builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s presets
  %(prog)s script next-train --preset 1
  %(prog)s script disrupted --options delayed.json
  %(prog)s play next-train --preset "12:28 | SN Littlehampton to Brighton"
  %(prog)s download through --platform 2
  %(prog)s chime four
  %(prog)s button castleford-chemical-emergency
  %(prog)s reasons
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    script_parser = subparsers.add_parser("script", help="Print the clip sequence as JSON")
    _add_announcement_arguments(script_parser)

    play_parser = subparsers.add_parser("play", help="Play an announcement")
    _add_announcement_arguments(play_parser)

    download_parser = subparsers.add_parser("download", help="Save an announcement to a file")
    _add_announcement_arguments(download_parser)

    chime_parser = subparsers.add_parser("chime", help="Play a chime")
    chime_parser.add_argument("count", choices=["three", "four"], help="Number of chimes")
    chime_parser.add_argument("--download", action="store_true", help="Save to a file instead")

    button_parser = subparsers.add_parser("button", help="Play a fixed announcement")
    button_parser.add_argument(
        "name", choices=[b.name for b in ANNOUNCEMENT_BUTTONS], help="Announcement name"
    )
    button_parser.add_argument("--download", action="store_true", help="Save to a file instead")

    subparsers.add_parser("buttons", help="List fixed announcements")

    presets_parser = subparsers.add_parser("presets", help="List announcement presets")
    presets_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("operators", help="List operators with recorded audio")
    subparsers.add_parser("reasons", help="List disruption reasons with recorded audio")

    return parser


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Run a parsed command. Returns the process exit code."""
    if args.command == "presets":
        _print_presets(config, args.json)
        return 0

    if args.command == "operators":
        _print_operators(config)
        return 0

    if args.command == "buttons":
        _print_buttons()
        return 0

    if args.command == "reasons":
        _print_reasons()
        return 0

    async with aiohttp.ClientSession() as session:
        service = create_service(config, create_player(config, session))

        if args.command == "chime":
            played = await service.play_clips([clips.chime(args.count)], args.download)
            return 0 if played else 1

        if args.command == "button":
            played = await service.play_clips(find_button(args.name).files, args.download)
            return 0 if played else 1

        options = load_options(args, config)

        if args.command == "script":
            try:
                script = build_script(service, options)
            except AnnouncementError as e:
                logger.error(f"Failed to build announcement: {e}")
                return 1
            print(json.dumps([serialise_item(item) for item in script], indent=2))
            return 0

        played = await play_announcement(service, options, args.command == "download")
        return 0 if played else 1


async def main(argv: list[str] | None = None, config: AppConfig | None = None) -> int:
    """Main CLI entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return await run(args, config or AppConfig())
    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1
