from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

DEFAULT_DESCRIPTION = "Session scheduled via Schedula AI"


@dataclass(frozen=True)
class BookingDraft:
    title: str
    category: str
    start_time: datetime | None
    end_time: datetime | None
    description: str = DEFAULT_DESCRIPTION
    client_name: str | None = None


@dataclass(frozen=True)
class Booking:
    id: int
    title: str
    description: str | None
    category: str
    start_time: datetime
    end_time: datetime
    client_name: str | None = None

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open interval test: touching boundaries do not overlap."""
        return self.start_time < end and self.end_time > start
