from __future__ import annotations

import logging
from dataclasses import dataclass

from schedula.application.exceptions import SlotConflictError
from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.clock import ClockPort
from schedula.application.utils.temporal_policy import forbid_past_dates
from schedula.domain.entities.booking import Booking, BookingDraft

CONFLICT_MESSAGE = "Time slot conflicts with existing booking"


@dataclass(frozen=True)
class CreateResult:
    success: bool
    booking: Booking | None = None
    error: str | None = None


class CreateBookingUseCase:
    def __init__(self, store: BookingStorePort, clock: ClockPort) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(self, draft: BookingDraft) -> CreateResult:
        if draft.start_time is None or draft.end_time is None:
            return CreateResult(success=False, error="Missing required time information")

        policy_error = forbid_past_dates(draft.start_time.date(), self._clock.today(), "create")
        if policy_error:
            self._logger.info("Create rejected", extra={"reason": "past_date"})
            return CreateResult(success=False, error=policy_error)

        if draft.end_time <= draft.start_time:
            return CreateResult(success=False, error="End time must be after start time")

        try:
            booking = self._store.create_if_free(draft)
        except SlotConflictError:
            self._logger.info("Create rejected", extra={"reason": "conflict"})
            return CreateResult(success=False, error=CONFLICT_MESSAGE)
        except Exception as e:
            self._logger.exception("Error creating booking", extra={"error": str(e)})
            return CreateResult(success=False, error=f"System error: {e}")

        self._logger.info("Booking created", extra={"booking_id": booking.id})
        return CreateResult(success=True, booking=booking)
