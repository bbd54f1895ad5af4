from __future__ import annotations

from datetime import date, datetime

from schedula.application.use_cases.delete_bookings import DeleteBookingsUseCase
from schedula.infrastructure.store.memory_store import MemoryBookingStore
from tests.conftest import make_draft


class FlakyDeleteStore(MemoryBookingStore):
    def __init__(self, failing_ids: set[int]) -> None:
        super().__init__()
        self._failing_ids = failing_ids

    def delete(self, booking_id: int) -> None:
        if booking_id in self._failing_ids:
            raise RuntimeError("row locked")
        super().delete(booking_id)


def test_deletes_every_booking_on_the_day(store, clock):
    store.create(make_draft(datetime(2025, 7, 13, 9, 0), datetime(2025, 7, 13, 10, 0)))
    store.create(make_draft(datetime(2025, 7, 13, 15, 0), datetime(2025, 7, 13, 16, 0)))
    store.create(make_draft(datetime(2025, 7, 14, 9, 0), datetime(2025, 7, 14, 10, 0)))

    result = DeleteBookingsUseCase(store, clock).execute(date(2025, 7, 13))

    assert result.success is True
    assert result.deleted_count == 2
    assert [b.start_time.hour for b in result.deleted_bookings] == [9, 15]
    remaining = store.search()
    assert len(remaining) == 1
    assert remaining[0].start_time.date() == date(2025, 7, 14)


def test_failed_deletion_does_not_stop_the_rest(clock):
    store = FlakyDeleteStore(failing_ids={1})
    store.create(make_draft(datetime(2025, 7, 13, 9, 0), datetime(2025, 7, 13, 10, 0)))
    store.create(make_draft(datetime(2025, 7, 13, 15, 0), datetime(2025, 7, 13, 16, 0)))

    result = DeleteBookingsUseCase(store, clock).execute(date(2025, 7, 13))

    assert result.success is True
    assert result.deleted_count == 1
    assert result.deleted_bookings[0].id == 2
    assert [b.id for b in store.search()] == [1]


def test_past_days_can_be_cleared(store, clock):
    store.create(make_draft(datetime(2025, 7, 1, 9, 0), datetime(2025, 7, 1, 10, 0)))
    result = DeleteBookingsUseCase(store, clock).execute(date(2025, 7, 1))
    assert result.deleted_count == 1


def test_empty_day_reports_no_matches(store, clock):
    result = DeleteBookingsUseCase(store, clock).execute(date(2025, 7, 20))
    assert result.success is True
    assert result.deleted_count == 0
    assert result.error == "No bookings found to delete for the specified date"


def test_date_is_required(store, clock):
    result = DeleteBookingsUseCase(store, clock).execute(None)
    assert result.success is False
    assert result.error == "Please specify a date for deletion"
