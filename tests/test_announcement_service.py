"""Tests for the announcement service."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rail_announcements.adapters.audio import StaticClipCatalogue
from rail_announcements.application.services import AnnouncementService
from rail_announcements.domain.models import (
    AudioClip,
    ChimeType,
    DisruptedTrainAnnouncementOptions,
    DisruptionType,
    MissingAudioAssetError,
    NextTrainAnnouncementOptions,
    OperatorCatalogue,
    ThroughTrainAnnouncementOptions,
    UnknownDisruptionReasonError,
)

CATALOGUE = OperatorCatalogue(standalone_only=(), with_service_to_from=("Southern",))


@pytest.fixture
def player() -> MagicMock:
    player = MagicMock()
    player.play = AsyncMock()
    return player


@pytest.fixture
def reporter() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(player: MagicMock, reporter: MagicMock) -> AnnouncementService:
    return AnnouncementService(CATALOGUE, player, reporter)


def _next_train(**overrides: object) -> NextTrainAnnouncementOptions:
    data: dict[str, object] = {
        "chime": "four",
        "platform": "2",
        "hour": "12",
        "min": "28",
        "toc": "Southern",
        "terminatingStationCode": "BTN",
        "callingAt": ["HSK", "PRP"],
        "coaches": "8 coaches",
    }
    data.update(overrides)
    return NextTrainAnnouncementOptions.model_validate(data)


def _disrupted(**overrides: object) -> DisruptedTrainAnnouncementOptions:
    data: dict[str, object] = {
        "chime": "four",
        "platform": "2",
        "hour": "07",
        "min": "33",
        "toc": "Southern",
        "terminatingStationCode": "BTN",
        "disruptionType": "delayedBy",
        "delayTime": "7",
    }
    data.update(overrides)
    return DisruptedTrainAnnouncementOptions.model_validate(data)


def test_build_next_train(service: AnnouncementService) -> None:
    """Given a simple service, when building, then the full announcement is returned in order."""
    result = service.build_next_train(_next_train())

    train_info = [
        AudioClip("s.platform 2 for the", 250),
        "hour.s.12",
        "mins.m.28",
        AudioClip("toc.m.southern service to", 150),
        "station.e.BTN",
    ]
    assert result == [
        "sfx - four chimes",
        *train_info,
        AudioClip("m.calling at", 750),
        "station.m.HSK",
        AudioClip("station.m.PRP", 200),
        AudioClip("m.and", 100),
        AudioClip("station.e.BTN", 100),
        AudioClip("s.this train is formed of", 250),
        "platform.s.8",
        "e.coaches",
        *train_info,
    ]


def test_build_next_train_without_chime_or_length(service: AnnouncementService) -> None:
    """Given no chime and unknown length, when building, then neither is announced."""
    result = service.build_next_train(_next_train(chime="none", coaches=None))

    assert result[0] == AudioClip("s.platform 2 for the", 250)
    assert AudioClip("s.this train is formed of", 250) not in result


def test_build_next_train_single_coach(service: AnnouncementService) -> None:
    """Given a one coach train, when building, then the singular is used."""
    result = service.build_next_train(_next_train(coaches="1 coach"))

    index = result.index(AudioClip("s.this train is formed of", 250))
    assert result[index + 1 : index + 3] == ["platform.s.1", "e.coach"]


def test_build_next_train_includes_advisories(service: AnnouncementService) -> None:
    """Given short platforms and request stops, when building, then both advisories are included."""
    options = _next_train(
        callingAt=[
            {"crsCode": "HSK", "requestStop": True},
            {"crsCode": "PRP", "shortPlatform": "front.4"},
        ]
    )

    result = service.build_next_train(options)

    assert AudioClip("m.due to a short platform at", 400) in result
    assert AudioClip("s.customers may request to stop at", 400) in result
    short_index = result.index(AudioClip("m.due to a short platform at", 400))
    request_index = result.index(AudioClip("s.customers may request to stop at", 400))
    assert short_index < request_index


@pytest.mark.parametrize(
    ("platform", "is_delayed", "expected"),
    [
        ("2", False, [AudioClip("s.platform 2 for the", 250)]),
        ("2", True, [AudioClip("s.platform 2 for the", 250), "m.delayed"]),
        ("12", False, [AudioClip("s.platform 12 for the", 250)]),
        ("3a", False, [AudioClip("s.platform 3a for the", 250)]),
        ("b", False, [AudioClip("s.platform b for the", 250)]),
        ("13", False, [AudioClip("s.platform", 250), "platform.s.13", "m.for the"]),
        ("13", True, [AudioClip("s.platform", 250), "platform.s.13", "m.for the delayed"]),
        ("20", False, [AudioClip("s.platform", 250), "platform.s.20", "m.for the"]),
    ],
)
def test_platform_files(
    service: AnnouncementService, platform: str, is_delayed: bool, expected: list
) -> None:
    """Given a platform, when rendering it, then combined recordings are used where they exist."""
    assert service.platform_files(platform, is_delayed) == expected


def test_build_disrupted_delayed_by_minutes(service: AnnouncementService) -> None:
    """Given a 7 minute delay with no reason, when building, then the delay ends the sentence."""
    result = service.build_disrupted_train(_disrupted())

    assert result == [
        "sfx - four chimes",
        "s.were sorry to announce that the",
        "hour.s.07",
        "mins.m.33",
        AudioClip("toc.m.southern service to", 150),
        "station.m.BTN",
        "m.is delayed by approximately",
        "platform.m.7",
        "e.minutes",
        AudioClip("w.were sorry for the delay this will cause to your journey", 250),
    ]


def test_build_disrupted_delayed_by_one_minute_with_reason(service: AnnouncementService) -> None:
    """Given a one minute delay with a reason, when building, then the reason follows the delay."""
    options = _disrupted(delayTime="1", disruptionReason="a failure of signalling equipment")

    result = service.build_disrupted_train(options)

    assert result[6:11] == [
        "m.is delayed by approximately",
        "platform.m.1",
        "m.minute",
        "m.due to",
        "disruption-reason.e.a failure of signalling equipment",
    ]


def test_build_disrupted_long_delay_uses_minute_recordings(service: AnnouncementService) -> None:
    """Given a delay of ten minutes or more, when building, then the minutes clip is used."""
    result = service.build_disrupted_train(_disrupted(delayTime="15"))

    assert result[7] == "mins.m.15"


def test_build_disrupted_ignores_vias(service: AnnouncementService) -> None:
    """Given via points, when building a disruption, then only the destination is named."""
    result = service.build_disrupted_train(_disrupted(vias=["GTW"]))

    assert "m.via" not in result
    assert "station.m.GTW" not in result


def test_build_cancelled(service: AnnouncementService) -> None:
    """Given a cancellation with no reason, when building, then it ends the sentence."""
    result = service.build_disrupted_train(_disrupted(disruptionType=DisruptionType.CANCEL))

    assert result[6:] == [
        "e.has been cancelled",
        AudioClip("w.were sorry for the delay this will cause to your journey", 250),
    ]


def test_build_delayed_with_reason(service: AnnouncementService) -> None:
    """Given an unquantified delay with a reason, when building, then the mid clip is used."""
    options = _disrupted(disruptionType="delay", disruptionReason="congestion")

    result = service.build_disrupted_train(options)

    assert result[6:9] == ["m.is being delayed", "m.due to", "disruption-reason.e.congestion"]


def test_build_disrupted_rejects_unrecorded_reason(player: MagicMock, reporter: MagicMock) -> None:
    """Given a reason outside the recorded list, when building, then it is rejected."""
    service = AnnouncementService(
        CATALOGUE, player, reporter, disruption_reasons=["congestion", "a points failure"]
    )

    with pytest.raises(UnknownDisruptionReasonError, match="a swarm of bees"):
        service.build_disrupted_train(_disrupted(disruptionReason="a swarm of bees"))

    result = service.build_disrupted_train(_disrupted(disruptionReason="congestion"))
    assert "disruption-reason.e.congestion" in result


def test_build_disrupted_without_reason_skips_reason_check(
    player: MagicMock, reporter: MagicMock
) -> None:
    """Given no reason and a recorded list, when building, then the announcement is built."""
    service = AnnouncementService(CATALOGUE, player, reporter, disruption_reasons=[])

    result = service.build_disrupted_train(_disrupted())

    assert "m.due to" not in result


def test_build_through_train(service: AnnouncementService) -> None:
    """Given a through train, when building, then the stand-clear warning is returned."""
    options = ThroughTrainAnnouncementOptions(platform="2", chime=ChimeType.THREE)

    result = service.build_through_train(options)

    assert result == [
        "sfx - three chimes",
        AudioClip("s.the train now approaching platform", 250),
        "platform.m.2",
        "e.does not stop here",
        AudioClip("w.please stand well clear of the edge of the platform", 400),
    ]


def test_clip_validation_rejects_missing_clips(player: MagicMock, reporter: MagicMock) -> None:
    """Given a clip catalogue without a needed clip, when building, then the clip is reported missing."""
    service = AnnouncementService(
        CATALOGUE, player, reporter, clip_catalogue=StaticClipCatalogue(["sfx - four chimes"])
    )

    with pytest.raises(MissingAudioAssetError, match="s.platform 2 for the") as exc_info:
        service.build_next_train(_next_train())

    assert exc_info.value.clip_id == "s.platform 2 for the"


def test_clip_validation_accepts_known_clips(player: MagicMock, reporter: MagicMock) -> None:
    """Given a clip catalogue with every clip, when building, then the announcement is returned."""
    options = ThroughTrainAnnouncementOptions(platform="2", chime=ChimeType.NONE)
    available = [
        "s.the train now approaching platform",
        "platform.m.2",
        "e.does not stop here",
        "w.please stand well clear of the edge of the platform",
    ]
    service = AnnouncementService(
        CATALOGUE, player, reporter, clip_catalogue=StaticClipCatalogue(available)
    )

    assert len(service.build_through_train(options)) == 4


@pytest.mark.asyncio
async def test_play_next_train(
    service: AnnouncementService, player: MagicMock, reporter: MagicMock
) -> None:
    """Given valid options, when playing, then the built clips are handed to the player."""
    options = _next_train()

    played = await service.play_next_train(options, as_download=True)

    assert played is True
    player.play.assert_awaited_once_with(service.build_next_train(options), True)
    reporter.report.assert_not_called()


@pytest.mark.asyncio
async def test_play_invalid_split_reports_error(
    service: AnnouncementService, player: MagicMock, reporter: MagicMock
) -> None:
    """Given a split without stops, when playing, then the error is reported and nothing is played."""
    options = _next_train(
        callingAt=["CLJ", {"crsCode": "HRH", "splitType": "splits", "splitForm": "rear.4"}]
    )

    played = await service.play_next_train(options)

    assert played is False
    player.play.assert_not_awaited()
    reporter.report.assert_called_once()
    assert "HRH" in reporter.report.call_args[0][0]


@pytest.mark.asyncio
async def test_play_unexpected_error_reports_generic_message(
    service: AnnouncementService, player: MagicMock, reporter: MagicMock
) -> None:
    """Given an unexpected build failure, when playing, then a generic error is reported."""
    with patch(
        "rail_announcements.application.services.announcement_service.get_calling_points",
        side_effect=RuntimeError("boom"),
    ):
        played = await service.play_next_train(_next_train())

    assert played is False
    player.play.assert_not_awaited()
    reporter.report.assert_called_once_with("Could not build announcement: boom")


@pytest.mark.asyncio
async def test_play_disrupted_train(service: AnnouncementService, player: MagicMock) -> None:
    """Given disruption options, when playing, then the player receives the script."""
    options = _disrupted()

    assert await service.play_disrupted_train(options) is True
    player.play.assert_awaited_once_with(service.build_disrupted_train(options), False)


@pytest.mark.asyncio
async def test_play_through_train(service: AnnouncementService, player: MagicMock) -> None:
    """Given through train options, when playing, then the player receives the script."""
    options = ThroughTrainAnnouncementOptions(platform="4")

    assert await service.play_through_train(options) is True
    player.play.assert_awaited_once_with(service.build_through_train(options), False)


@pytest.mark.asyncio
async def test_play_clips(service: AnnouncementService, player: MagicMock) -> None:
    """Given a fixed clip sequence, when playing, then it is passed through unchanged."""
    assert await service.play_clips(["sfx - three chimes"]) is True
    player.play.assert_awaited_once_with(["sfx - three chimes"], False)


@pytest.mark.asyncio
async def test_play_clips_missing_from_catalogue(player: MagicMock, reporter: MagicMock) -> None:
    """Given a chime missing from the clip catalogue, when playing, then it is reported."""
    service = AnnouncementService(
        CATALOGUE, player, reporter, clip_catalogue=StaticClipCatalogue([])
    )

    assert await service.play_clips(["sfx - four chimes"]) is False
    player.play.assert_not_awaited()
    reporter.report.assert_called_once_with("Audio clip does not exist: sfx - four chimes")


@pytest.mark.asyncio
async def test_play_disrupted_unrecorded_reason_reports_error(
    player: MagicMock, reporter: MagicMock
) -> None:
    """Given a reason outside the recorded list, when playing, then the error is reported."""
    service = AnnouncementService(CATALOGUE, player, reporter, disruption_reasons=["congestion"])

    played = await service.play_disrupted_train(_disrupted(disruptionReason="a swarm of bees"))

    assert played is False
    player.play.assert_not_awaited()
    reporter.report.assert_called_once_with("Unknown disruption reason: a swarm of bees")


@pytest.mark.asyncio
async def test_play_reports_missing_clip_from_player(
    service: AnnouncementService, player: MagicMock, reporter: MagicMock
) -> None:
    """Given the player cannot load a clip, when playing, then the error is reported."""
    player.play = AsyncMock(side_effect=MissingAudioAssetError("station.m.BTN"))

    played = await service.play_next_train(_next_train())

    assert played is False
    player.play.assert_awaited_once()
    reporter.report.assert_called_once_with("Audio clip does not exist: station.m.BTN")


@pytest.mark.asyncio
async def test_play_reports_unexpected_player_failure(
    service: AnnouncementService, player: MagicMock, reporter: MagicMock
) -> None:
    """Given the player fails unexpectedly, when playing, then a generic error is reported."""
    player.play = AsyncMock(side_effect=RuntimeError("connection reset"))

    played = await service.play_clips(["sfx - three chimes"])

    assert played is False
    reporter.report.assert_called_once_with("Could not play announcement: connection reset")
