from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from schedula.application.exceptions import SlotConflictError
from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.clock import ClockPort
from schedula.application.use_cases.create_booking import CONFLICT_MESSAGE
from schedula.application.utils.date_parser import day_bounds
from schedula.application.utils.temporal_policy import forbid_past_dates
from schedula.domain.entities.booking import Booking, BookingDraft
from schedula.domain.entities.intent import ExtractedIntent


@dataclass(frozen=True)
class UpdateResult:
    success: bool
    updated_booking: Booking | None = None
    original_booking: Booking | None = None
    candidate_count: int = 0
    error: str | None = None


class UpdateBookingUseCase:
    """
    Move a booking to a new time of day on the date it already has.

    The target is resolved from the extracted date only. When several bookings
    start that day the earliest one is changed and `candidate_count` reports
    how many there were, so the reply can say the choice was not unique.
    """

    def __init__(self, store: BookingStorePort, clock: ClockPort) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(self, extracted: ExtractedIntent) -> UpdateResult:
        if extracted.date is None:
            return UpdateResult(success=False, error="Please specify a date for the booking to update")

        policy_error = forbid_past_dates(extracted.date, self._clock.today(), "update")
        if policy_error:
            self._logger.info("Update rejected", extra={"reason": "past_date"})
            return UpdateResult(success=False, error=policy_error)

        start, end = day_bounds(extracted.date)
        try:
            candidates = self._store.list_between(start, end)
        except Exception as e:
            self._logger.exception("Error fetching bookings to update", extra={"error": str(e)})
            return UpdateResult(success=False, error=f"System error: {e}")

        if not candidates:
            return UpdateResult(success=False, error="No bookings found to update on the specified date")

        original = candidates[0]
        if len(candidates) > 1:
            self._logger.warning(
                "Several bookings match, updating the earliest",
                extra={"booking_id": original.id, "count": len(candidates)},
            )

        if extracted.time_of_day is None:
            return UpdateResult(
                success=False,
                candidate_count=len(candidates),
                error="Please specify a new time for the update",
            )

        booking_day = original.start_time.date()
        new_start = datetime.combine(booking_day, extracted.time_of_day)
        if extracted.end_time_of_day is not None:
            new_end = datetime.combine(booking_day, extracted.end_time_of_day)
        elif extracted.duration is not None:
            new_end = new_start + timedelta(hours=extracted.duration)
        else:
            new_end = new_start + original.duration

        if new_end <= new_start:
            return UpdateResult(
                success=False,
                candidate_count=len(candidates),
                error="End time must be after start time",
            )

        draft = BookingDraft(
            title=original.title,
            category=extracted.category or original.category,
            start_time=new_start,
            end_time=new_end,
            description=original.description or "",
            client_name=original.client_name,
        )
        try:
            updated = self._store.update_if_free(original.id, draft)
        except SlotConflictError:
            self._logger.info("Update rejected", extra={"booking_id": original.id, "reason": "conflict"})
            return UpdateResult(success=False, candidate_count=len(candidates), error=CONFLICT_MESSAGE)
        except Exception as e:
            self._logger.exception("Error updating booking", extra={"booking_id": original.id, "error": str(e)})
            return UpdateResult(success=False, candidate_count=len(candidates), error=f"System error: {e}")

        self._logger.info("Booking updated", extra={"booking_id": updated.id})
        return UpdateResult(
            success=True,
            updated_booking=updated,
            original_booking=original,
            candidate_count=len(candidates),
        )
