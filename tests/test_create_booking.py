from __future__ import annotations

from datetime import datetime

from schedula.application.use_cases.create_booking import CreateBookingUseCase
from schedula.application.use_cases.query_bookings import QueryBookingsUseCase
from tests.conftest import make_draft


def test_create_then_query_day_returns_the_record(store, clock):
    created = CreateBookingUseCase(store, clock).execute(
        make_draft(datetime(2025, 7, 10, 14, 0), datetime(2025, 7, 10, 15, 0), title="Python Training", category="Python")
    )
    assert created.success is True

    result = QueryBookingsUseCase(store, clock).execute(datetime(2025, 7, 10).date())
    assert len(result.bookings) == 1
    booking = result.bookings[0]
    assert booking.start_time == datetime(2025, 7, 10, 14, 0)
    assert booking.end_time == datetime(2025, 7, 10, 15, 0)
    assert booking.category == "Python"
    assert booking.title == "Python Training"
    assert booking.client_name == "Client"


def test_overlap_is_rejected(store, clock):
    use_case = CreateBookingUseCase(store, clock)
    assert use_case.execute(make_draft(datetime(2025, 7, 10, 14, 0), datetime(2025, 7, 10, 15, 0))).success

    result = use_case.execute(make_draft(datetime(2025, 7, 10, 14, 30), datetime(2025, 7, 10, 15, 30)))
    assert result.success is False
    assert result.error == "Time slot conflicts with existing booking"
    assert len(store.list_between(datetime(2025, 7, 10), datetime(2025, 7, 11))) == 1


def test_touching_boundaries_do_not_conflict(store, clock):
    use_case = CreateBookingUseCase(store, clock)
    assert use_case.execute(make_draft(datetime(2025, 7, 10, 14, 0), datetime(2025, 7, 10, 15, 0))).success
    assert use_case.execute(make_draft(datetime(2025, 7, 10, 15, 0), datetime(2025, 7, 10, 16, 0))).success
    assert use_case.execute(make_draft(datetime(2025, 7, 10, 13, 0), datetime(2025, 7, 10, 14, 0))).success


def test_past_date_is_rejected_without_writing(store, clock):
    result = CreateBookingUseCase(store, clock).execute(
        make_draft(datetime(2025, 7, 4, 14, 0), datetime(2025, 7, 4, 15, 0))
    )
    assert result.success is False
    assert result.error == "Cannot create sessions for past dates. Please choose a current or future date."
    assert store.search() == []


def test_earlier_today_is_still_allowed(store, clock):
    """Only the calendar day is compared, not the time of day."""
    result = CreateBookingUseCase(store, clock).execute(
        make_draft(datetime(2025, 7, 5, 8, 0), datetime(2025, 7, 5, 9, 0))
    )
    assert result.success is True


def test_end_before_start_is_rejected(store, clock):
    result = CreateBookingUseCase(store, clock).execute(
        make_draft(datetime(2025, 7, 10, 15, 0), datetime(2025, 7, 10, 15, 0))
    )
    assert result.success is False
    assert result.error == "End time must be after start time"


def test_missing_times_are_rejected(store, clock):
    result = CreateBookingUseCase(store, clock).execute(make_draft(None, None))
    assert result.error == "Missing required time information"


def test_store_failure_becomes_system_error(clock):
    class BrokenStore:
        def create_if_free(self, draft):
            raise RuntimeError("disk full")

    result = CreateBookingUseCase(BrokenStore(), clock).execute(
        make_draft(datetime(2025, 7, 10, 14, 0), datetime(2025, 7, 10, 15, 0))
    )
    assert result.success is False
    assert result.error == "System error: disk full"
