"""
Arrangement Register - owns the collection of arrangements.

Provides insertion plus the place, date and time-window queries and the
place/type grouping. The register is append-only; every query hands back
freshly built containers so callers never hold a reference into it.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator
from typing import Any

import yaml

from arrangement_register.constants import SAME_DATE_WINDOW, SCHEMA_VERSION, LogMessages
from arrangement_register.models.arrangement import Arrangement

logger = logging.getLogger(__name__)


def within_same_date_window(date: int, other: int) -> bool:
    """
    Numeric-window match on two encoded dates.

    True when the raw integers differ by at most SAME_DATE_WINDOW. This only
    behaves like a "same day" test for encodings where neighbouring days are
    further apart than the window.
    """
    return abs(date - other) <= SAME_DATE_WINDOW


class ArrangementRegister:
    """
    In-memory register of arrangements.

    Keeps arrangements in insertion order, plus an index of
    (place, type) buckets kept sorted by (date, time).
    """

    def __init__(self) -> None:
        self._arrangements: list[Arrangement] = []
        self._index: dict[tuple[str, str], list[Arrangement]] = {}

    def __len__(self) -> int:
        return len(self._arrangements)

    def __iter__(self) -> Iterator[Arrangement]:
        # Snapshot so adds during iteration don't leak in
        return iter(list(self._arrangements))

    def __contains__(self, arrangement: object) -> bool:
        return arrangement in self._arrangements

    def __repr__(self) -> str:
        return f"ArrangementRegister({len(self._arrangements)} arrangements)"

    def add(self, arrangement: Arrangement) -> None:
        """
        Add an arrangement to the register.

        Args:
            arrangement: The arrangement to add
        """
        self._arrangements.append(arrangement)

        # insort_right keeps equal (date, time) keys in insertion order
        bucket = self._index.setdefault((arrangement.place, arrangement.type), [])
        bisect.insort_right(bucket, arrangement, key=Arrangement.sort_key)

        logger.debug(
            LogMessages.ARRANGEMENT_ADDED.format(
                id=arrangement.id,
                place=arrangement.place,
                type=arrangement.type,
                date=arrangement.date,
                time=arrangement.time,
            )
        )

    def create(
        self,
        id: int,
        date: int,
        time: int,
        name: str,
        place: str,
        host: str,
        type: str,
    ) -> Arrangement:
        """
        Create a new arrangement from its fields and add it.

        Args:
            id: Arrangement id
            date: Integer-encoded date
            time: Integer-encoded time of day
            name: Event name
            place: Where the event is held
            host: Who hosts the event
            type: Kind of event

        Returns:
            The created Arrangement
        """
        arrangement = Arrangement(
            id=id,
            date=date,
            time=time,
            name=name,
            place=place,
            host=host,
            type=type,
        )
        self.add(arrangement)
        return arrangement

    def get_all(self) -> list[Arrangement]:
        """Get every arrangement in insertion order."""
        return list(self._arrangements)

    def get_at_place(self, place: str) -> list[Arrangement]:
        """
        Get arrangements held at a place.

        The match is exact and case-sensitive.

        Args:
            place: Place to match

        Returns:
            Matching arrangements in insertion order
        """
        result = [a for a in self._arrangements if a.place == place]
        self._log_query("get_at_place", result)
        return result

    def get_on_date(self, date: int) -> list[Arrangement]:
        """
        Get arrangements on a date.

        Uses the numeric-window match, so anything whose encoded date is
        within SAME_DATE_WINDOW of `date` (inclusive) is returned.

        Args:
            date: Integer-encoded date

        Returns:
            Matching arrangements in insertion order
        """
        result = [a for a in self._arrangements if within_same_date_window(a.date, date)]
        self._log_query("get_on_date", result)
        return result

    def get_between_times(
        self, date1: int, time1: int, date2: int, time2: int
    ) -> list[Arrangement]:
        """
        Get arrangements between two (date, time) points.

        The points may be given in either order. Times are only used to
        decide which point is later when the dates are equal; the filter
        itself looks at dates alone.

        An arrangement is kept when its date is within the numeric window
        of both dates and does not lie strictly between them.

        Args:
            date1: Date of the first point
            time1: Time of the first point
            date2: Date of the second point
            time2: Time of the second point

        Returns:
            Matching arrangements in insertion order
        """
        first_is_later = date1 > date2 or (date1 == date2 and time1 > time2)

        result = []
        for arrangement in self._arrangements:
            if not (
                within_same_date_window(arrangement.date, date1)
                and within_same_date_window(arrangement.date, date2)
            ):
                continue

            if first_is_later:
                keep = arrangement.date >= date1 or arrangement.date <= date2
            else:
                keep = arrangement.date <= date1 or arrangement.date >= date2

            if keep:
                result.append(arrangement)

        self._log_query("get_between_times", result)
        return result

    def get_between_dates(self, date1: int, date2: int) -> list[Arrangement]:
        """
        Get arrangements whose date lies in a range.

        Bounds may be given in either order and are inclusive.

        Args:
            date1: One end of the range
            date2: The other end of the range

        Returns:
            Matching arrangements sorted by date
        """
        earlier, later = min(date1, date2), max(date1, date2)
        result = [a for a in self._arrangements if earlier <= a.date <= later]
        result.sort(key=lambda a: a.date)
        self._log_query("get_between_dates", result)
        return result

    def get_all_grouped_and_sorted(self) -> dict[str, dict[str, list[Arrangement]]]:
        """
        Group arrangements by place, then type.

        Returns:
            place -> type -> arrangements sorted by (date, time)
        """
        grouped: dict[str, dict[str, list[Arrangement]]] = {}
        for (place, event_type), bucket in self._index.items():
            grouped.setdefault(place, {})[event_type] = list(bucket)
        return grouped

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert the grouped view to a YAML-friendly dict.

        This is the canonical export shape for a register.
        """
        return {
            "schema": SCHEMA_VERSION,
            "count": len(self._arrangements),
            "places": {
                place: {
                    event_type: [a.to_yaml_dict() for a in arrangements]
                    for event_type, arrangements in by_type.items()
                }
                for place, by_type in self.get_all_grouped_and_sorted().items()
            },
        }

    def dump_yaml(self) -> str:
        """Render the grouped view as a YAML document."""
        return yaml.safe_dump(self.to_yaml_dict(), default_flow_style=False, sort_keys=False)

    def _log_query(self, query: str, result: list[Arrangement]) -> None:
        logger.debug(
            LogMessages.QUERY_RESULT.format(
                query=query, count=len(result), total=len(self._arrangements)
            )
        )
