from __future__ import annotations

from datetime import date

from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.utils.date_parser import day_bounds
from schedula.domain.entities.booking import Booking


class SearchBookingsUseCase:
    def __init__(self, store: BookingStorePort) -> None:
        self._store = store

    def execute(
        self,
        text: str | None = None,
        day: date | None = None,
        category: str | None = None,
    ) -> list[Booking]:
        start, end = day_bounds(day) if day else (None, None)
        return self._store.search(
            text=text or None,
            start=start,
            end=end,
            category=category or None,
        )
