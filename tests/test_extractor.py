from __future__ import annotations

from datetime import date, time

import pytest

from schedula.application.utils.date_parser import (
    day_bounds,
    month_bounds,
    parse_calendar_date,
    parse_time_range,
    to_24_hour,
)
from schedula.application.utils.extractor import extract_intent
from schedula.application.utils.message_rules import classify_intent, extract_category

TODAY = date(2025, 7, 5)


def test_delete_wins_over_update_and_query():
    """A message carrying delete, update and query keywords is a delete."""
    extracted = extract_intent("please remove and change the sessions list", TODAY)
    assert extracted.intent == "delete"


def test_confirmation_is_a_booking():
    intent, score = classify_intent("yes please")
    assert intent == "book"
    assert score == 80


def test_unmatched_message_is_general():
    extracted = extract_intent("hello there", TODAY)
    assert extracted.intent == "general"
    assert extracted.confidence == 0


def test_time_range_sets_start_end_and_duration():
    extracted = extract_intent("book a slot tomorrow 9 am to 5 pm", TODAY)
    assert extracted.time_of_day == time(9, 0)
    assert extracted.end_time_of_day == time(17, 0)
    assert extracted.duration == 8


def test_single_time_defaults_duration_to_one_hour():
    extracted = extract_intent("book python tomorrow at 2:30 pm", TODAY)
    assert extracted.time_of_day == time(14, 30)
    assert extracted.end_time_of_day is None
    assert extracted.duration == 1
    assert extracted.category == "Python"


@pytest.mark.parametrize(
    "text",
    ["Jul 13th", "July 13", "13-Jul", "07/13", "13jul", "13 July", "13/jul"],
)
def test_date_formats_resolve_to_the_13th(text):
    assert parse_calendar_date(f"book training {text}", TODAY) == date(2025, 7, 13)


def test_other_months_are_understood():
    assert parse_calendar_date("Aug 2nd", TODAY) == date(2025, 8, 2)
    assert parse_calendar_date("book on 3-sept", TODAY) == date(2025, 9, 3)


def test_july_only_mode_ignores_other_months():
    assert parse_calendar_date("Aug 2nd", TODAY, july_only=True) is None
    assert parse_calendar_date("Jul 13th", TODAY, july_only=True) == date(2025, 7, 13)


def test_invalid_day_is_skipped():
    assert parse_calendar_date("Feb 30", TODAY) is None


def test_explicit_year_is_used():
    assert parse_calendar_date("13 July 2026", TODAY) == date(2026, 7, 13)


def test_day_before_time_is_not_a_date():
    # "july 2 pm" must not read 2 as the day
    assert parse_calendar_date("july 2 pm", TODAY) is None


def test_relative_day_wins_over_calendar_date():
    extracted = extract_intent("book today not Jul 13", TODAY)
    assert extracted.date == TODAY


def test_update_from_to_takes_target_time():
    extracted = extract_intent("move jul 10 session from 9:30 am to 10 am", TODAY)
    assert extracted.intent == "update"
    assert extracted.date == date(2025, 7, 10)
    assert extracted.time_of_day == time(10, 0)
    assert extracted.duration is None


def test_update_to_at_phrase():
    extracted = extract_intent("change jul 10 session to 3 pm", TODAY)
    assert extracted.intent == "update"
    assert extracted.time_of_day == time(15, 0)


def test_twelve_hour_edges():
    assert to_24_hour(12, 0, "am") == time(0, 0)
    assert to_24_hour(12, 0, "pm") == time(12, 0)
    assert to_24_hour(13, 0, "pm") is None
    assert parse_time_range("13 pm to 2 pm") is None


def test_category_order():
    assert extract_category("azure training") == "Training"
    assert extract_category("azure meeting") == "Meeting"
    assert extract_category("nothing here") is None


def test_book_training_scenario():
    extracted = extract_intent("book training tomorrow at 2 PM to 3 PM", TODAY)
    assert extracted.intent == "book"
    assert extracted.date == date(2025, 7, 6)
    assert extracted.time_of_day == time(14, 0)
    assert extracted.end_time_of_day == time(15, 0)
    assert extracted.duration == 1
    assert extracted.category == "Training"
    assert extracted.confidence == 50 + 25 + 30 + 10


def test_delete_scenario():
    extracted = extract_intent("delete all sessions 13-Jul", TODAY)
    assert extracted.intent == "delete"
    assert extracted.date == date(2025, 7, 13)


def test_day_and_month_bounds():
    start, end = day_bounds(date(2025, 7, 13))
    assert (start.hour, start.minute) == (0, 0)
    assert (end.hour, end.minute, end.second, end.microsecond) == (23, 59, 59, 999000)

    first, last = month_bounds(date(2025, 12, 20))
    assert first.date() == date(2025, 12, 1)
    assert last.date() == date(2025, 12, 31)
