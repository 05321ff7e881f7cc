"""Build the "HH:MM operator service to destination" clause."""

from collections.abc import Sequence

from rail_announcements.application.services.list_formatter import (
    PluraliseOptions,
    pluralise_audio,
)
from rail_announcements.domain.models import clips
from rail_announcements.domain.models.audio_item import AudioClip, AudioItem
from rail_announcements.domain.models.calling_point import CallingPoint
from rail_announcements.domain.models.clips import Inflection
from rail_announcements.domain.models.errors import InvalidTrainConfigurationError
from rail_announcements.domain.models.operator_catalogue import OperatorCatalogue


class TrainInfoBuilder:
    """Builds the time, operator and destination part of an announcement."""

    def __init__(self, operator_catalogue: OperatorCatalogue) -> None:
        """Initialize the builder.

        Args:
            operator_catalogue: Operators with recordings, and which of them stand alone.
        """
        self._operators = operator_catalogue

    def operator_files(self, toc: str) -> list[AudioItem]:
        """Render the operator followed by "service to".

        Raises:
            InvalidTrainConfigurationError: If the operator has no recording.
        """
        if not toc:
            return [AudioClip("m.service to", 50)]
        if not self._operators.is_known(toc):
            raise InvalidTrainConfigurationError(f"No recording for operator {toc!r}")
        if self._operators.is_standalone_only(toc):
            return [AudioClip(clips.operator(toc), 150), "m.service to"]
        return [AudioClip(f"{clips.operator(toc)} service to", 150)]

    def build(
        self,
        hour: str,
        minute: str,
        toc: str,
        vias: Sequence[str],
        terminating_station: str,
        calling_points: Sequence[CallingPoint],
        stations_always_middle: bool = False,
    ) -> list[AudioItem]:
        """Build the basic train information clause.

        Args:
            hour: Two digit departure hour.
            minute: Two digit departure minute.
            toc: Operator name, empty for a generic service.
            vias: CRS codes of via points, ignored for dividing trains.
            terminating_station: CRS code of the destination.
            calling_points: Calling points, inspected for a divide.
            stations_always_middle: Use mid-sentence station clips even for
                the last station, for clauses that continue afterwards.

        Returns:
            Clips for "HH:MM <operator> service to <destination(s)>".

        Raises:
            InvalidTrainConfigurationError: If the operator has no recording.
        """
        end = Inflection.MID if stations_always_middle else Inflection.END
        files: list[AudioItem] = [clips.hour(hour), clips.minute(minute)]
        files.extend(self.operator_files(toc))

        divides_at = next((p for p in calling_points if p.is_divide), None)

        if divides_at is not None and divides_at.split_calling_points:
            destinations = [terminating_station, divides_at.split_calling_points[-1].crs_code]
            files.extend(
                pluralise_audio(
                    destinations,
                    PluraliseOptions(
                        prefix="station.m.",
                        final_prefix=f"station.{end}.",
                        and_id=clips.AND,
                        first_item_delay=100,
                        before_and_delay=100,
                        before_item_delay=50,
                    ),
                )
            )
        elif vias:
            via_files = [
                clips.station(via, end if i == len(vias) - 1 else Inflection.MID)
                for i, via in enumerate(vias)
            ]
            files.extend([clips.station(terminating_station), "m.via"])
            files.extend(
                pluralise_audio(via_files, PluraliseOptions(and_id=clips.AND, before_and_delay=100))
            )
        else:
            files.append(clips.station(terminating_station, end))

        return files
