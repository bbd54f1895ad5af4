from datetime import datetime

from schedula.application.use_cases.create_booking import CreateResult
from schedula.application.use_cases.delete_bookings import DeleteResult
from schedula.application.use_cases.query_bookings import QueryResult
from schedula.application.use_cases.reply_composer import ReplyComposer
from schedula.domain.entities.booking import Booking

NOW = datetime(2025, 7, 5, 12, 0)


def _booking(**overrides) -> Booking:
    fields = dict(
        id=1,
        title="Python Basics",
        description="",
        category="Python",
        start_time=datetime(2025, 7, 10, 14, 0),
        end_time=datetime(2025, 7, 10, 15, 30),
        client_name=None,
    )
    fields.update(overrides)
    return Booking(**fields)


def test_confirmation_card_lists_details():
    html = ReplyComposer().compose_created(CreateResult(success=True, booking=_booking()))
    assert "Booking Confirmed!" in html
    assert "Thursday, July 10, 2025" in html
    assert "2:00 PM - 3:30 PM" in html
    assert "N/A" in html


def test_month_schedule_table():
    result = QueryResult(
        scope="month",
        range_start=datetime(2025, 7, 1),
        range_end=datetime(2025, 7, 31, 23, 59, 59),
        bookings=[_booking()],
    )
    html = ReplyComposer().compose_schedule(result, NOW)
    assert "Your Schedule - July 2025" in html
    assert "1.5h" in html
    assert "#3776ab" in html


def test_empty_schedule_message():
    result = QueryResult(scope="day", range_start=datetime(2025, 7, 10), range_end=datetime(2025, 7, 10, 23, 59))
    html = ReplyComposer().compose_schedule(result, NOW)
    assert "No bookings found for Thursday, July 10, 2025." in html


def test_no_bookings_to_delete():
    html = ReplyComposer().compose_deleted(
        DeleteResult(success=True, error="No bookings found to delete for the specified date")
    )
    assert "No Bookings Found" in html
