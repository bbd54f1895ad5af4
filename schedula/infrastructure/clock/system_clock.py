from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from schedula.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    def __init__(self, timezone: str) -> None:
        self._timezone = _safe_timezone(timezone)

    def now(self) -> datetime:
        return datetime.now(self._timezone).replace(tzinfo=None)


class FixedClock(ClockPort):
    """A clock pinned to one instant, for demos and tests."""

    def __init__(self, anchor: datetime) -> None:
        self._anchor = anchor.replace(tzinfo=None)

    def now(self) -> datetime:
        return self._anchor


def _safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")
