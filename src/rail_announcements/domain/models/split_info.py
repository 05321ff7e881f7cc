"""Split information domain models."""

from dataclasses import dataclass

from rail_announcements.domain.models.calling_point import SplitType
from rail_announcements.domain.models.portion import Portion, PortionPosition


@dataclass(frozen=True)
class SplitInfoStop:
    """A calling point tagged with the portion of the train that serves it."""

    crs_code: str
    short_platform: str  # Empty when the platform is long enough
    request_stop: bool
    portion: Portion


@dataclass(frozen=True)
class SplitPortion:
    """One of the two portions of a dividing train."""

    stops: tuple[SplitInfoStop, ...]
    position: PortionPosition
    length: int | None


@dataclass(frozen=True)
class SplitInfo:
    """Partition of a service's calling points around its divide.

    ``split_b`` is the portion named by the divide marker; ``split_a`` is the
    portion continuing to the overall terminating station. Both are None when
    the train does not divide.
    """

    divide_type: SplitType
    stops_up_to_split: tuple[SplitInfoStop, ...]
    split_a: SplitPortion | None = None
    split_b: SplitPortion | None = None

    @property
    def divides(self) -> bool:
        return self.divide_type is not SplitType.NONE

    @property
    def divide_point(self) -> SplitInfoStop | None:
        """The last common stop, where the train divides."""
        if not self.divides or not self.stops_up_to_split:
            return None
        return self.stops_up_to_split[-1]

    def all_stops(self) -> list[SplitInfoStop]:
        """Common stops followed by portion A and portion B stops."""
        stops = list(self.stops_up_to_split)
        if self.split_a is not None:
            stops.extend(self.split_a.stops)
        if self.split_b is not None:
            stops.extend(self.split_b.stops)
        return stops
