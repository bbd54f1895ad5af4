from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class PartialBooking:
    """Booking fields collected on earlier turns of a session."""

    date: date | None = None
    time_of_day: time | None = None
    end_time_of_day: time | None = None
    duration: int | None = None
    category: str | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.date, self.time_of_day, self.end_time_of_day, self.duration, self.category)
        )
