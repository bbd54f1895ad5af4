from __future__ import annotations

from datetime import date


def forbid_past_dates(target: date, today: date, operation: str) -> str | None:
    """Policy for create and update: today and later are allowed, earlier days are not."""
    if target < today:
        return f"Cannot {operation} sessions for past dates. Please choose a current or future date."
    return None


def allow_any_date(target: date, today: date, operation: str) -> str | None:
    """Policy for delete: clearing out old sessions is allowed on any day."""
    return None
