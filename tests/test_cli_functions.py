"""Tests for CLI helper functions and commands."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rail_announcements.adapters.audio import HttpClipSource, LocalClipSource
from rail_announcements.adapters.config import AppConfig, PresetLoader
from rail_announcements.cli import (
    _find_preset,
    create_player,
    create_service,
    load_options,
    main,
    serialise_item,
    setup_argparse,
)
from rail_announcements.domain.models import (
    AudioClip,
    ChimeType,
    DisruptedTrainAnnouncementOptions,
    NextTrainAnnouncementOptions,
    ThroughTrainAnnouncementOptions,
)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(config_file=None)


def _write_options(tmp_path: Path, data: dict) -> str:
    path = tmp_path / "options.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_serialise_item() -> None:
    """Given bare and delayed items, when serialising, then the JSON shapes match."""
    assert serialise_item("m.and") == "m.and"
    assert serialise_item(AudioClip("m.and", 100)) == {"id": "m.and", "opts": {"delayStart": 100}}
    assert serialise_item(AudioClip("m.and")) == {"id": "m.and", "opts": {}}


def test_find_preset_by_name_or_index(config: AppConfig) -> None:
    """Given presets, when looking one up, then name and 1-based index both work."""
    presets = PresetLoader.load_next_train(config)

    assert _find_preset(presets, "17:15 | GX Brighton to London Victoria") is presets[2]
    assert _find_preset(presets, "2") is presets[1]
    with pytest.raises(ValueError, match="No preset named '9'"):
        _find_preset(presets, "9")


def test_load_options_from_preset(config: AppConfig) -> None:
    """Given a preset index, when loading options, then the preset state is returned."""
    args = setup_argparse().parse_args(["script", "disrupted", "--preset", "1"])

    options = load_options(args, config)

    assert isinstance(options, DisruptedTrainAnnouncementOptions)
    assert options.disruption_reason == "a failure of signalling equipment"


def test_load_options_for_through_train(config: AppConfig) -> None:
    """Given through train flags, when loading options, then they are used directly."""
    args = setup_argparse().parse_args(
        ["play", "through", "--platform", "5", "--chime", "three"]
    )

    options = load_options(args, config)

    assert options == ThroughTrainAnnouncementOptions(platform="5", chime=ChimeType.THREE)


def test_load_options_from_file(config: AppConfig, tmp_path: Path) -> None:
    """Given an options JSON file, when loading options, then it is validated."""
    path = _write_options(
        tmp_path,
        {"platform": "1", "hour": "10", "min": "00", "terminatingStationCode": "LIT"},
    )
    args = setup_argparse().parse_args(["script", "next-train", "--options", path])

    options = load_options(args, config)

    assert isinstance(options, NextTrainAnnouncementOptions)
    assert options.terminating_station_code == "LIT"


def test_load_options_rejects_invalid_file(config: AppConfig, tmp_path: Path) -> None:
    """Given invalid options in a file, when loading options, then ValueError is raised."""
    path = _write_options(tmp_path, {"platform": "1"})
    args = setup_argparse().parse_args(["script", "next-train", "--options", path])

    with pytest.raises(ValueError, match="Invalid announcement options"):
        load_options(args, config)


def test_load_options_requires_source(config: AppConfig) -> None:
    """Given neither preset nor options file, when loading options, then ValueError is raised."""
    args = setup_argparse().parse_args(["script", "next-train"])

    with pytest.raises(ValueError, match="Either --preset or --options is required"):
        load_options(args, config)


def test_create_player_uses_local_files_by_default(config: AppConfig) -> None:
    """Given no base URL, when creating the player, then clips are read from disk."""
    player = create_player(config, None)

    assert isinstance(player._clip_source, LocalClipSource)


def test_create_player_uses_http_with_base_url() -> None:
    """Given a base URL and a session, when creating the player, then clips are downloaded."""
    config = AppConfig(config_file=None, audio_base_url="https://example.org/audio")

    player = create_player(config, MagicMock())

    assert isinstance(player._clip_source, HttpClipSource)


def test_create_service_requires_clip_catalogue_for_validation() -> None:
    """Given clip validation without a catalogue, when creating the service, then ValueError is raised."""
    config = AppConfig(config_file=None, validate_clips=True)

    with pytest.raises(ValueError, match="no \\[clips\\] available list"):
        create_service(config, MagicMock())


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running the CLI, then help is printed and it fails."""
    assert await main([]) == 1
    assert "usage" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_script_prints_clip_sequence(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a preset, when running the script command, then the clips are printed as JSON."""
    exit_code = await main(["script", "next-train", "--preset", "1"], config)

    assert exit_code == 0
    script = json.loads(capsys.readouterr().out)
    assert script[0] == "sfx - four chimes"
    assert script[1] == {"id": "s.platform 2 for the", "opts": {"delayStart": 250}}
    assert "station.e.BTN" in script


@pytest.mark.asyncio
async def test_main_script_through_train(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a through train, when running the script command, then the platform is announced."""
    exit_code = await main(["script", "through", "--platform", "4", "--chime", "none"], config)

    assert exit_code == 0
    script = json.loads(capsys.readouterr().out)
    assert script[1] == "platform.m.4"


@pytest.mark.asyncio
async def test_main_script_invalid_train_fails(config: AppConfig, tmp_path: Path) -> None:
    """Given a split with no stops, when running the script command, then it fails."""
    path = _write_options(
        tmp_path,
        {
            "platform": "1",
            "hour": "10",
            "min": "00",
            "terminatingStationCode": "PMS",
            "callingAt": [{"crsCode": "HRH", "splitType": "splits"}],
        },
    )

    assert await main(["script", "next-train", "--options", path], config) == 1


@pytest.mark.asyncio
async def test_main_unknown_preset_fails(config: AppConfig) -> None:
    """Given an unknown preset, when running the CLI, then it fails."""
    assert await main(["script", "next-train", "--preset", "Nowhere"], config) == 1


@pytest.mark.asyncio
async def test_main_download_hands_clips_to_player(config: AppConfig) -> None:
    """Given the download command, when running, then the player receives a download request."""
    player = MagicMock()
    player.play = AsyncMock()

    with patch("rail_announcements.cli.create_player", return_value=player):
        exit_code = await main(["download", "through", "--platform", "2"], config)

    assert exit_code == 0
    player.play.assert_awaited_once()
    files, as_download = player.play.call_args[0]
    assert files[0] == "sfx - four chimes"
    assert as_download is True


@pytest.mark.asyncio
async def test_main_chime(config: AppConfig) -> None:
    """Given the chime command, when running, then only the chime is played."""
    player = MagicMock()
    player.play = AsyncMock()

    with patch("rail_announcements.cli.create_player", return_value=player):
        exit_code = await main(["chime", "three"], config)

    assert exit_code == 0
    player.play.assert_awaited_once_with(["sfx - three chimes"], False)


@pytest.mark.asyncio
async def test_main_download_without_audio_files_fails(tmp_path: Path) -> None:
    """Given an empty audio directory, when downloading a preset, then the CLI fails."""
    config = AppConfig(
        config_file=None, audio_asset_dir=str(tmp_path), output_dir=str(tmp_path / "out")
    )

    assert await main(["download", "next-train", "--preset", "1"], config) == 1
    assert not (tmp_path / "out").exists()


@pytest.mark.asyncio
async def test_main_button_plays_emergency_announcement(config: AppConfig) -> None:
    """Given the button command, when running, then the fixed sequence keeps its pauses."""
    player = MagicMock()
    player.play = AsyncMock()

    with patch("rail_announcements.cli.create_player", return_value=player):
        exit_code = await main(["button", "castleford-chemical-emergency", "--download"], config)

    assert exit_code == 0
    player.play.assert_awaited_once_with(
        [
            "s.this is an emergency announcement",
            "e.for customers at castleford station",
            AudioClip("s.there is an emergency at a nearby chemical works", 300),
            AudioClip("m.please leave the station by the main exit", 300),
            "e.and proceed to the town centre",
            AudioClip("e.listen for announcement by the emergency services", 300),
        ],
        True,
    )


def test_unknown_button_is_rejected() -> None:
    """Given an unknown button name, when parsing arguments, then argparse exits."""
    with pytest.raises(SystemExit):
        setup_argparse().parse_args(["button", "nowhere-emergency"])


@pytest.mark.asyncio
async def test_main_script_rejects_unrecorded_disruption_reason(
    config: AppConfig, tmp_path: Path
) -> None:
    """Given a reason with no recording, when printing the script, then the CLI fails."""
    options = _write_options(
        tmp_path,
        {
            "platform": "1",
            "hour": "07",
            "min": "33",
            "toc": "southern",
            "terminatingStationCode": "BTN",
            "disruptionType": "delay",
            "disruptionReason": "a swarm of bees",
        },
    )

    assert await main(["script", "disrupted", "--options", options], config) == 1


@pytest.mark.asyncio
async def test_main_lists_presets(config: AppConfig, capsys: pytest.CaptureFixture[str]) -> None:
    """Given the presets command, when running, then preset names are listed."""
    assert await main(["presets"], config) == 0

    out = capsys.readouterr().out
    assert "Next train:" in out
    assert "  1. 12:28 | SN Littlehampton to Brighton" in out
    assert "Disrupted train:" in out


@pytest.mark.asyncio
async def test_main_lists_presets_as_json(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given the presets command with --json, when running, then presets are printed as JSON."""
    assert await main(["presets", "--json"], config) == 0

    data = json.loads(capsys.readouterr().out)
    assert len(data["next-train"]) == 8
    assert data["next-train"][0]["state"]["terminatingStationCode"] == "BTN"


@pytest.mark.asyncio
async def test_main_lists_operators(config: AppConfig, capsys: pytest.CaptureFixture[str]) -> None:
    """Given the operators command, when running, then standalone operators are marked."""
    assert await main(["operators"], config) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "South Western Railway (standalone)" in lines
    assert "Southern" in lines


@pytest.mark.asyncio
async def test_main_lists_buttons(capsys: pytest.CaptureFixture[str]) -> None:
    """Given the buttons command, when running, then buttons are listed by section."""
    assert await main(["buttons"], AppConfig(config_file=None)) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "General:"
    assert "Emergency:" in lines
    assert "  newton-aycliffe-chemical-emergency: Newton Aycliffe chemical emergency" in lines


@pytest.mark.asyncio
async def test_main_lists_disruption_reasons(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given the reasons command, when running, then recorded reasons are listed."""
    assert await main(["reasons"], config) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "a failure of signalling equipment" in lines
    assert "congestion" in lines


@pytest.mark.asyncio
async def test_main_script_builds_every_built_in_preset(config: AppConfig) -> None:
    """Given the built-in presets, when printing each script, then every one builds."""
    presets = {
        "next-train": PresetLoader.load_next_train(config),
        "disrupted": PresetLoader.load_disrupted_train(config),
    }

    for announcement_type, loaded in presets.items():
        for preset in loaded:
            argv = ["script", announcement_type, "--preset", preset.name]
            assert await main(argv, config) == 0, preset.name
