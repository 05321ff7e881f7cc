"""Build the "calling at..." part of an announcement."""

import logging
from collections.abc import Sequence

from rail_announcements.application.services.list_formatter import (
    PluraliseOptions,
    pluralise_audio,
)
from rail_announcements.application.services.split_resolver import get_split_info
from rail_announcements.domain.models import clips
from rail_announcements.domain.models.audio_item import AudioClip, AudioItem
from rail_announcements.domain.models.calling_point import CallingPoint, SplitType
from rail_announcements.domain.models.clips import Inflection
from rail_announcements.domain.models.errors import InvalidTrainConfigurationError
from rail_announcements.domain.models.portion import PortionPosition
from rail_announcements.domain.models.split_info import SplitPortion

logger = logging.getLogger(__name__)

CALLING_POINT_DELAY = 200
CALLING_POINT_AND_DELAY = 100

CALLING_POINT_LIST = PluraliseOptions(
    and_id=clips.AND,
    before_item_delay=CALLING_POINT_DELAY,
    before_and_delay=CALLING_POINT_AND_DELAY,
    after_and_delay=CALLING_POINT_AND_DELAY,
)


def _customers_for(stops: Sequence[str]) -> list[AudioItem]:
    return [
        AudioClip("s.customers for", 400),
        *pluralise_audio([clips.station(s) for s in stops], CALLING_POINT_LIST),
    ]


def _portion_files(stops: Sequence[str], portion: SplitPortion) -> list[AudioItem]:
    """Stops served only by one portion, followed by where to sit."""
    if not stops:
        return []

    files = _customers_for(stops)
    if portion.position is PortionPosition.UNKNOWN:
        files.append("w.please listen for announcements on board the train")
        return files

    files.append(f"m.should travel in the {portion.position}")
    if portion.length is not None:
        files.append(clips.platform_number(portion.length))
    files.append("e.coaches of the train")
    return files


def get_calling_points_with_splits(
    calling_points: Sequence[CallingPoint],
    terminating_station: str,
    overall_length: int | None,
) -> list[AudioItem]:
    """Build the calling pattern of a dividing train.

    Returns:
        An empty list when the train does not divide.

    Raises:
        InvalidTrainConfigurationError: If a dividing train's split portion has no stops.
    """
    split_data = get_split_info(calling_points, terminating_station, overall_length)

    if not split_data.divides:
        return []

    split_a, split_b = split_data.split_a, split_data.split_b
    split_point = split_data.divide_point
    if split_a is None or split_b is None or split_point is None:
        raise InvalidTrainConfigurationError("Dividing train is missing a portion")

    files: list[AudioItem] = pluralise_audio(
        [clips.station(s.crs_code) for s in split_data.stops_up_to_split], CALLING_POINT_LIST
    )

    files.append("e.where the train will divide")
    files.append(AudioClip("w.please make sure you travel in the correct part of this train", 400))

    if split_data.divide_type is SplitType.SPLIT_TERMINATES:
        if split_b.position is PortionPosition.UNKNOWN:
            files.extend(
                [
                    AudioClip("s.please note that", 400),
                    "m.coaches",
                    "m.will be detached and will terminate at",
                ]
            )
        else:
            coaches = "coach" if split_b.length == 1 else f"{split_b.length} coaches"
            files.extend(
                [
                    AudioClip(f"s.please note that the {split_b.position}", 400),
                    f"m.{coaches} will detach at",
                ]
            )
        files.append(clips.station(split_point.crs_code, Inflection.END))
    elif not split_b.stops:
        raise InvalidTrainConfigurationError(
            f"Splitting train at {split_point.crs_code} doesn't have any calling points"
        )

    # dicts keep first-seen order and act as ordered sets
    a_stops = dict.fromkeys(s.crs_code for s in split_a.stops)
    b_stops = dict.fromkeys(s.crs_code for s in split_b.stops)
    any_stops = dict.fromkeys(
        [
            *(s.crs_code for s in split_data.stops_up_to_split),
            *(crs for crs in a_stops if crs in b_stops),
        ]
    )
    a_only = [crs for crs in a_stops if crs not in any_stops]
    b_only = [crs for crs in b_stops if crs not in any_stops]

    if any_stops:
        files.extend(_customers_for(list(any_stops)))
        files.append("e.may travel in any part of the train")

    a_files = _portion_files(a_only, split_a)
    b_files = _portion_files(b_only, split_b)

    if split_a.position is PortionPosition.FRONT:
        files.extend([*a_files, *b_files])
    else:
        files.extend([*b_files, *a_files])

    files.append(AudioClip("s.this train will divide at", 200))
    files.append(clips.station(split_point.crs_code, Inflection.END))

    logger.debug(f"Built {len(files)} split calling point clip(s) for {terminating_station}")
    return files


def get_calling_points(
    calling_points: Sequence[CallingPoint],
    terminating_station: str,
    overall_length: int | None,
) -> list[AudioItem]:
    """Build the "calling at..." clause, split-aware when the train divides.

    Raises:
        InvalidTrainConfigurationError: If a dividing train's split portion has no stops.
    """
    files: list[AudioItem] = [AudioClip("m.calling at", 750)]

    with_splits = get_calling_points_with_splits(
        calling_points, terminating_station, overall_length
    )
    if with_splits:
        files.extend(with_splits)
        return files

    if not calling_points:
        files.extend([clips.station(terminating_station), "e.only"])
        return files

    files.extend(
        pluralise_audio(
            [
                *(clips.station(point.crs_code) for point in calling_points),
                clips.station(terminating_station, Inflection.END),
            ],
            CALLING_POINT_LIST,
        )
    )
    return files
