from __future__ import annotations

from datetime import date, datetime, time, timedelta

from schedula.domain.entities.booking import DEFAULT_DESCRIPTION, BookingDraft
from schedula.domain.entities.intent import ExtractedIntent

DEFAULT_START = time(10, 0)
DEFAULT_DURATION_HOURS = 1
DEFAULT_CATEGORY = "Training"
DEFAULT_CLIENT_NAME = "Client"
DEFAULT_TITLE = "Training Session"


def apply_defaults(extracted: ExtractedIntent, reference_date: date) -> BookingDraft:
    """Fill whatever the message left out: tomorrow, 10:00, one hour, Training."""
    working_date = extracted.date or reference_date + timedelta(days=1)
    start_time = datetime.combine(working_date, extracted.time_of_day or DEFAULT_START)

    if extracted.end_time_of_day is not None:
        end_time = datetime.combine(working_date, extracted.end_time_of_day)
    else:
        duration = extracted.duration if extracted.duration is not None else DEFAULT_DURATION_HOURS
        end_time = start_time + timedelta(hours=duration)

    if extracted.category:
        category = extracted.category
        title = f"{extracted.category} Training"
    else:
        category = DEFAULT_CATEGORY
        title = DEFAULT_TITLE

    return BookingDraft(
        title=title,
        category=category,
        start_time=start_time,
        end_time=end_time,
        description=DEFAULT_DESCRIPTION,
        client_name=DEFAULT_CLIENT_NAME,
    )
