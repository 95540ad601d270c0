"""
Arrangement model - a single calendar event.

An Arrangement carries:
- Identity (caller-assigned id, not checked for uniqueness)
- When it happens (integer-encoded date and time)
- What it is (name, place, host, type)

Records are frozen once constructed. Dates and times are plain integers
(e.g. YYYYMMDD and HHMM) and are never range-checked.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Arrangement(BaseModel):
    """
    One event in the register.

    Values are accepted as-is; a time of 9999 or a negative date is
    stored without complaint.
    """

    id: int = Field(..., description="Caller-assigned identifier")
    date: int = Field(..., description="Integer-encoded date (e.g. 20240131)")
    time: int = Field(..., description="Integer-encoded time of day (e.g. 1430)")
    name: str = Field(..., description="Event name")
    place: str = Field(..., description="Where the event is held")
    host: str = Field(..., description="Who hosts the event")
    type: str = Field(..., description="Kind of event (e.g. 'concert', 'talk')")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[int, int]:
        """Chronological key: date first, time as tiebreak."""
        return (self.date, self.time)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "name": self.name,
            "place": self.place,
            "host": self.host,
            "type": self.type,
        }
