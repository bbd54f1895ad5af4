from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.clock import ClockPort
from schedula.application.utils.date_parser import day_bounds, month_bounds
from schedula.domain.entities.booking import Booking


@dataclass(frozen=True)
class QueryResult:
    scope: str  # "day" | "month"
    range_start: datetime
    range_end: datetime
    bookings: list[Booking] = field(default_factory=list)
    error: str | None = None


class QueryBookingsUseCase:
    def __init__(self, store: BookingStorePort, clock: ClockPort) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(self, target_date: date | None) -> QueryResult:
        """A given day, or the whole current month when no date was mentioned."""
        if target_date is not None:
            scope = "day"
            start, end = day_bounds(target_date)
        else:
            scope = "month"
            start, end = month_bounds(self._clock.today())

        try:
            bookings = self._store.list_between(start, end)
        except Exception as e:
            self._logger.exception("Error fetching bookings", extra={"error": str(e)})
            return QueryResult(scope=scope, range_start=start, range_end=end, error=f"System error: {e}")

        self._logger.info("Bookings queried", extra={"count": len(bookings), "reason": scope})
        return QueryResult(scope=scope, range_start=start, range_end=end, bookings=bookings)
