"""Clip identifier helpers.

Clip identifiers are dotted keys resolved by the audio asset store. Most
phrases exist in several inflections: start of sentence, mid sentence, end of
sentence and whole standalone sentence.
"""

from enum import StrEnum


class Inflection(StrEnum):
    """Inflection variant of a recorded phrase."""

    START = "s"
    MID = "m"
    END = "e"
    WHOLE = "w"


AND = "m.and"
OR = "m.or-2"


def phrase(inflection: Inflection, text: str) -> str:
    """Build a phrase clip id, e.g. ``m.calling at``."""
    return f"{inflection}.{text}"


def station(crs_code: str, inflection: Inflection = Inflection.MID) -> str:
    """Build a station clip id, e.g. ``station.m.BTN``."""
    return f"station.{inflection}.{crs_code}"


def hour(value: str) -> str:
    return f"hour.s.{value}"


def minute(value: str | int, inflection: Inflection = Inflection.MID) -> str:
    return f"mins.{inflection}.{value}"


def platform_number(value: str | int, inflection: Inflection = Inflection.START) -> str:
    """Build a platform numeral clip id; the same recordings double as coach counts."""
    return f"platform.{inflection}.{value}"


def operator(name: str) -> str:
    return f"toc.m.{name.lower()}"


def disruption_reason(reason: str) -> str:
    return f"disruption-reason.e.{reason}"


def chime(count: str) -> str:
    return f"sfx - {count} chimes"
