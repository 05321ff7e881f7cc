"""Train portion and formation domain models."""

from dataclasses import dataclass
from enum import StrEnum

MIN_PORTION_LENGTH = 1
MAX_PORTION_LENGTH = 12


class PortionPosition(StrEnum):
    """Which physical part of the train serves a stop."""

    ANY = "any"
    FRONT = "front"
    MIDDLE = "middle"
    REAR = "rear"
    UNKNOWN = "unknown"

    def opposite(self) -> "PortionPosition":
        """Return the other end of the train for a detaching portion."""
        if self is PortionPosition.FRONT:
            return PortionPosition.REAR
        return PortionPosition.FRONT


@dataclass(frozen=True)
class Portion:
    """Position and coach count of the part of the train serving a stop."""

    position: PortionPosition
    length: int | None


@dataclass(frozen=True)
class Formation:
    """A ``<position>.<count>`` coach marker, used for short platforms and splits."""

    position: PortionPosition
    count: int

    @classmethod
    def parse(cls, value: str) -> "Formation":
        """Parse a marker such as ``front.4`` or ``rear.1``.

        Raises:
            ValueError: If the marker is not ``<front|middle|rear>.<count>``.
        """
        position, sep, count = value.partition(".")
        if not sep or not count.isdigit():
            raise ValueError(f"Invalid formation marker: {value!r}")
        try:
            parsed_position = PortionPosition(position)
        except ValueError:
            raise ValueError(f"Invalid formation position in {value!r}") from None
        if parsed_position in (PortionPosition.ANY, PortionPosition.UNKNOWN):
            raise ValueError(f"Invalid formation position in {value!r}")
        return cls(position=parsed_position, count=int(count))

    def __str__(self) -> str:
        return f"{self.position}.{self.count}"


def clamp_portion_length(length: int) -> int:
    return min(max(MIN_PORTION_LENGTH, length), MAX_PORTION_LENGTH)
