"""Resolve which part of a dividing train serves each stop."""

import logging
from collections.abc import Sequence
from itertools import dropwhile, takewhile

from rail_announcements.domain.models.calling_point import CallingPoint, SplitType
from rail_announcements.domain.models.portion import (
    Formation,
    Portion,
    PortionPosition,
    clamp_portion_length,
)
from rail_announcements.domain.models.split_info import SplitInfo, SplitInfoStop, SplitPortion

logger = logging.getLogger(__name__)

DEFAULT_SPLIT_FORM = "front.1"


def _to_stop(point: CallingPoint, portion: Portion) -> SplitInfoStop:
    return SplitInfoStop(
        crs_code=point.crs_code,
        short_platform=point.short_platform or "",
        request_stop=point.request_stop,
        portion=portion,
    )


def _tag(points: Sequence[CallingPoint], portion: Portion) -> tuple[SplitInfoStop, ...]:
    return tuple(_to_stop(point, portion) for point in points)


def _is_plain(point: CallingPoint) -> bool:
    return not point.is_divide


def get_split_info(
    calling_points: Sequence[CallingPoint],
    terminating_station: str,
    overall_length: int | None,
) -> SplitInfo:
    """Partition calling points into common stops and the two portions of a divide.

    Only the first divide marker is honoured. The terminating station is not
    part of ``calling_points``; it is appended as portion A's final stop.

    Args:
        calling_points: Intermediate stops in order, possibly with one divide marker.
        terminating_station: CRS code of the overall destination.
        overall_length: Coach count of the full train, or None if unknown.

    Returns:
        The split information. Undivided services have every stop tagged
        ``any`` and no portions.
    """
    before_divide = list(takewhile(_is_plain, calling_points))
    from_divide = list(dropwhile(_is_plain, calling_points))

    if not from_divide:
        return SplitInfo(
            divide_type=SplitType.NONE,
            stops_up_to_split=_tag(calling_points, Portion(PortionPosition.ANY, overall_length)),
        )

    divide_point, after_divide = from_divide[0], from_divide[1:]
    common_points = [*before_divide, divide_point]
    a_points = [*after_divide, CallingPoint(crs_code=terminating_station)]
    b_points = list(divide_point.split_calling_points)

    logger.debug(
        f"Train divides ({divide_point.split_type}) at {divide_point.crs_code}: "
        f"{len(a_points)} stop(s) in portion A, {len(b_points)} in portion B"
    )

    common = _tag(common_points, Portion(PortionPosition.ANY, overall_length))

    if overall_length is None:
        unknown = Portion(PortionPosition.UNKNOWN, None)
        return SplitInfo(
            divide_type=divide_point.split_type,
            stops_up_to_split=common,
            split_a=SplitPortion(_tag(a_points, unknown), PortionPosition.UNKNOWN, None),
            split_b=SplitPortion(_tag(b_points, unknown), PortionPosition.UNKNOWN, None),
        )

    b_form = Formation.parse(divide_point.split_form or DEFAULT_SPLIT_FORM)
    a_position = b_form.position.opposite()
    a_count = clamp_portion_length(overall_length - b_form.count)

    return SplitInfo(
        divide_type=divide_point.split_type,
        stops_up_to_split=common,
        split_a=SplitPortion(
            _tag(a_points, Portion(a_position, a_count)), a_position, a_count
        ),
        split_b=SplitPortion(
            _tag(b_points, Portion(b_form.position, b_form.count)),
            b_form.position,
            b_form.count,
        ),
    )
