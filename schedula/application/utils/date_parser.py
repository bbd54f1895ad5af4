from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

MONTH_NUMBERS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MONTH = (
    r"(?P<month>january|february|march|april|may|june|july|august|september|october|november|december"
    r"|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec)(?![a-z])"
)

# Tried in order, first valid match wins.
DATE_PATTERNS = (
    # "jul 13th", "july 13"; a number followed by am/pm or ":" is a time, not a day
    re.compile(r"\b" + _MONTH + r"\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?\b(?!\s*(?:am|pm|:))"),
    # "13-jul"
    re.compile(r"\b(?P<day>\d{1,2})-" + _MONTH),
    # "07/13"
    re.compile(r"\b(?P<month>\d{1,2})/(?P<day>\d{1,2})\b"),
    # "13jul", "13july"
    re.compile(r"\b(?P<day>\d{1,2})" + _MONTH),
    # legacy: "13/jul", "13 july"
    re.compile(r"\b(?P<day>\d{1,2})[-/]" + _MONTH),
    re.compile(r"\b(?P<day>\d{1,2})\s+" + _MONTH),
)

# Grammar of the first release: July only, year 2025 when spelled out.
JULY_ONLY_DATE_PATTERNS = (
    re.compile(r"(?:july|jul)\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?", re.IGNORECASE),
    re.compile(r"(?P<day>\d{1,2})-(?:july|jul)", re.IGNORECASE),
    re.compile(r"07/(?P<day>\d{1,2})", re.IGNORECASE),
    re.compile(r"(?P<day>\d{1,2})(?:july|jul)(?!\w)", re.IGNORECASE),
    re.compile(r"(?P<day>\d{1,2})[-/](?:july|jul)", re.IGNORECASE),
    re.compile(r"(?:july|jul)\s+(?P<day>\d{1,2})", re.IGNORECASE),
    re.compile(r"(?P<day>\d{1,2})\s+(?:july|jul)", re.IGNORECASE),
)

YEAR_PATTERN = re.compile(r"\b(20\d{2})\b")

_CLOCK = r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)"

TIME_RANGE_PATTERN = re.compile(r"\b" + _CLOCK + r"\s*(?:to|until|-)\s*" + _CLOCK + r"\b")
SINGLE_TIME_PATTERN = re.compile(r"\b" + _CLOCK + r"\b")
UPDATE_FROM_TO_PATTERN = re.compile(r"\bfrom\s+" + _CLOCK + r"\s+to\s+" + _CLOCK + r"\b")
UPDATE_TO_AT_PATTERN = re.compile(r"\b(?:to|at)\s+" + _CLOCK + r"\b")


def to_24_hour(hour: int, minute: int, meridiem: str) -> time | None:
    """Convert a 12-hour clock reading. Returns None when it is not a valid reading."""
    if not 1 <= hour <= 12 or not 0 <= minute <= 59:
        return None
    meridiem = meridiem.lower()
    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    return time(hour, minute)


def _clock_from_groups(hour: str, minute: str | None, meridiem: str) -> time | None:
    return to_24_hour(int(hour), int(minute or 0), meridiem)


def parse_relative_day(text: str, reference_date: date) -> date | None:
    normalized = text.lower()
    if "today" in normalized:
        return reference_date
    if "tomorrow" in normalized:
        return reference_date + timedelta(days=1)
    return None


def parse_calendar_date(text: str, reference_date: date, july_only: bool = False) -> date | None:
    """Parse an explicit calendar date ("Jul 13th", "13-Jul", "07/13", "13jul")."""
    if july_only:
        return _parse_july_only(text, reference_date)

    normalized = text.lower()
    year_match = YEAR_PATTERN.search(normalized)
    year = int(year_match.group(1)) if year_match else reference_date.year

    for pattern in DATE_PATTERNS:
        for match in pattern.finditer(normalized):
            month_token = match.group("month")
            month = int(month_token) if month_token.isdigit() else MONTH_NUMBERS[month_token[:3]]
            try:
                return date(year, month, int(match.group("day")))
            except ValueError:
                continue
    return None


def _parse_july_only(text: str, reference_date: date) -> date | None:
    year = 2025 if "2025" in text else reference_date.year
    for pattern in JULY_ONLY_DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            try:
                return date(year, 7, int(match.group("day")))
            except ValueError:
                return None
    return None


def parse_time_range(text: str) -> tuple[time, time] | None:
    """Parse "2 pm to 3 pm" style ranges. Returns (start, end) or None."""
    for match in TIME_RANGE_PATTERN.finditer(text.lower()):
        start = _clock_from_groups(*match.group(1, 2, 3))
        end = _clock_from_groups(*match.group(4, 5, 6))
        if start and end:
            return start, end
    return None


def parse_single_time(text: str) -> time | None:
    for match in SINGLE_TIME_PATTERN.finditer(text.lower()):
        parsed = _clock_from_groups(*match.group(1, 2, 3))
        if parsed:
            return parsed
    return None


def parse_update_from_to(text: str) -> time | None:
    """"from 9:30 am to 10 am" on an update: only the target time counts."""
    for match in UPDATE_FROM_TO_PATTERN.finditer(text.lower()):
        target = _clock_from_groups(*match.group(4, 5, 6))
        if target:
            return target
    return None


def parse_update_to_at(text: str) -> time | None:
    for match in UPDATE_TO_AT_PATTERN.finditer(text.lower()):
        parsed = _clock_from_groups(*match.group(1, 2, 3))
        if parsed:
            return parsed
    return None


def day_bounds(target: date) -> tuple[datetime, datetime]:
    """[00:00:00.000, 23:59:59.999] of a calendar day."""
    start = datetime.combine(target, time.min)
    end = datetime.combine(target, time(23, 59, 59, 999000))
    return start, end


def month_bounds(reference: date) -> tuple[datetime, datetime]:
    first = reference.replace(day=1)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    last = next_first - timedelta(days=1)
    return datetime.combine(first, time.min), datetime.combine(last, time(23, 59, 59))
