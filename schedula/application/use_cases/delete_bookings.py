from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.clock import ClockPort
from schedula.application.utils.date_parser import day_bounds
from schedula.application.utils.temporal_policy import allow_any_date
from schedula.domain.entities.booking import Booking


@dataclass(frozen=True)
class DeleteResult:
    success: bool
    deleted_count: int = 0
    deleted_bookings: list[Booking] = field(default_factory=list)
    error: str | None = None


class DeleteBookingsUseCase:
    """Delete every booking starting on a given day, one record at a time."""

    def __init__(self, store: BookingStorePort, clock: ClockPort) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(self, target_date: date | None) -> DeleteResult:
        if target_date is None:
            return DeleteResult(success=False, error="Please specify a date for deletion")

        policy_error = allow_any_date(target_date, self._clock.today(), "delete")
        if policy_error:
            return DeleteResult(success=False, error=policy_error)

        start, end = day_bounds(target_date)
        try:
            candidates = self._store.list_between(start, end)
        except Exception as e:
            self._logger.exception("Error fetching bookings to delete", extra={"error": str(e)})
            return DeleteResult(success=False, error=f"System error: {e}")

        if not candidates:
            return DeleteResult(
                success=True,
                error="No bookings found to delete for the specified date",
            )

        deleted: list[Booking] = []
        for booking in candidates:
            try:
                self._store.delete(booking.id)
            except Exception as e:
                # Not atomic: a failed record is skipped and the rest still go.
                self._logger.error(
                    "Error deleting booking",
                    extra={"booking_id": booking.id, "error": str(e)},
                )
                continue
            deleted.append(booking)

        self._logger.info("Bookings deleted", extra={"count": len(deleted)})
        return DeleteResult(success=True, deleted_count=len(deleted), deleted_bookings=deleted)
