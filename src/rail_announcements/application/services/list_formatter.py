"""English list grammar for clip sequences."""

from collections.abc import Sequence
from dataclasses import dataclass

from rail_announcements.domain.models import clips
from rail_announcements.domain.models.audio_item import AudioItem, with_delay


@dataclass(frozen=True)
class PluraliseOptions:
    """How to render a list of items as "a, b and c".

    Delays are in milliseconds; None means no delay hint.
    """

    prefix: str = ""
    final_prefix: str | None = None  # Defaults to prefix
    and_id: str = clips.AND
    first_item_delay: int | None = None
    before_and_delay: int | None = None
    after_and_delay: int | None = None
    before_item_delay: int | None = None


def pluralise_audio(
    items: Sequence[str], options: PluraliseOptions | None = None
) -> list[AudioItem]:
    """Render items as a spoken list joined by a conjunction clip.

    Args:
        items: Ordered item identifiers, prefixed with ``options.prefix``.
        options: Prefixes, conjunction clip and delay hints.

    Returns:
        ``[]``, ``[x]``, ``[x, and, y]`` or ``[x, y, ..., and, z]``.
    """
    options = options or PluraliseOptions()
    final_prefix = options.prefix if options.final_prefix is None else options.final_prefix

    if not items:
        return []

    if len(items) == 1:
        return [with_delay(f"{final_prefix}{items[0]}", options.first_item_delay)]

    files: list[AudioItem] = []
    for i, item in enumerate(items[:-1]):
        delay = options.first_item_delay if i == 0 else options.before_item_delay
        files.append(with_delay(f"{options.prefix}{item}", delay))

    files.append(with_delay(options.and_id, options.before_and_delay))
    files.append(with_delay(f"{final_prefix}{items[-1]}", options.after_and_delay))
    return files
