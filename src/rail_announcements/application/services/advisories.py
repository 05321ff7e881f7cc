"""Short platform and request stop advisories."""

import logging
from collections.abc import Sequence

from rail_announcements.application.services.calling_points import (
    CALLING_POINT_AND_DELAY,
    CALLING_POINT_DELAY,
)
from rail_announcements.application.services.list_formatter import (
    PluraliseOptions,
    pluralise_audio,
)
from rail_announcements.application.services.split_resolver import get_split_info
from rail_announcements.domain.models import clips
from rail_announcements.domain.models.audio_item import AudioClip, AudioItem
from rail_announcements.domain.models.calling_point import CallingPoint
from rail_announcements.domain.models.portion import Formation, Portion, PortionPosition

logger = logging.getLogger(__name__)

STATION_LIST = PluraliseOptions(
    prefix="station.m.",
    final_prefix="station.m.",
    and_id=clips.AND,
    before_and_delay=CALLING_POINT_AND_DELAY,
    before_item_delay=CALLING_POINT_DELAY,
    after_and_delay=CALLING_POINT_AND_DELAY,
)

REQUEST_STOP_LIST = PluraliseOptions(
    prefix="station.m.",
    final_prefix="station.m.",
    and_id=clips.OR,
    before_and_delay=CALLING_POINT_AND_DELAY,
    before_item_delay=CALLING_POINT_DELAY,
    after_and_delay=CALLING_POINT_AND_DELAY,
)


def short_platform_to_audio(short_platform: str, portion: Portion) -> list[str]:
    """Render where customers for a short platform should sit.

    When the short platform is in a different part of the train than the
    portion serving the stop, both are named. A portion whose position is not
    known is never named.
    """
    form = Formation.parse(short_platform)
    pos, length = form.position, form.count

    if portion.position in (PortionPosition.ANY, PortionPosition.UNKNOWN, pos):
        if length == 1:
            return [f"e.should travel in the {pos} coach of the train"]
        return [
            f"m.should travel in the {pos}",
            clips.platform_number(length),
            "e.coaches of the train",
        ]

    files = [f"m.should travel in the {pos}"]
    if length == 1:
        files.append("m.coach")
    else:
        files.extend([clips.platform_number(length), "m.coaches"])

    files.extend(["m.of", "m.the", f"m.{portion.position}"])
    if portion.length == 1:
        files.append("e.coach of this train")
    else:
        files.extend([clips.platform_number(portion.length), "e.coaches of the train"])

    return files


def get_short_platforms(
    calling_points: Sequence[CallingPoint],
    terminating_station: str,
    overall_length: int | None,
) -> list[AudioItem]:
    """Build advisories for stops with short platforms, grouped by instruction."""
    split_data = get_split_info(calling_points, terminating_station, overall_length)

    groups: dict[str, tuple[list[str], list[str]]] = {}
    for stop in split_data.all_stops():
        if not stop.short_platform:
            continue

        instruction = short_platform_to_audio(stop.short_platform, stop.portion)
        key = ",".join(instruction)
        if key not in groups:
            groups[key] = (instruction, [])
        groups[key][1].append(stop.crs_code)

    files: list[AudioItem] = []
    order = sorted(groups)

    for i, key in enumerate(order):
        instruction, stations = groups[key]

        if i > 0:
            files.append(AudioClip("s.customers for", 200))
            files.extend(pluralise_audio(stations, STATION_LIST))
        elif len(order) == 1 and len(stations) == 1:
            files.extend(
                [
                    AudioClip("m.due to a short platform at", 400),
                    clips.station(stations[0]),
                    "m.customers for this station",
                ]
            )
        else:
            files.append(AudioClip("s.due to short platforms customers for", 400))
            files.extend(pluralise_audio(stations, STATION_LIST))

        files.extend(instruction)

    if order:
        logger.debug(f"Built {len(order)} short platform advisory group(s)")
    return files


def get_request_stops(
    calling_points: Sequence[CallingPoint],
    terminating_station: str,
    overall_length: int | None,
) -> list[AudioItem]:
    """Build the advisory listing request stops, or nothing when there are none."""
    split_data = get_split_info(calling_points, terminating_station, overall_length)

    # Sorted so the advisory does not depend on stop order
    request_stops = sorted({stop.crs_code for stop in split_data.all_stops() if stop.request_stop})
    if not request_stops:
        return []

    return [
        AudioClip("s.customers may request to stop at", 400),
        *pluralise_audio(request_stops, REQUEST_STOP_LIST),
        "e.by contacting the conductor on board the train",
    ]
