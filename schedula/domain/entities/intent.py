from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Literal

INTENT_BOOK = "book"
INTENT_QUERY = "query"
INTENT_DELETE = "delete"
INTENT_UPDATE = "update"
INTENT_GENERAL = "general"

IntentName = Literal["book", "query", "delete", "update", "general"]


@dataclass(frozen=True)
class ExtractedIntent:
    intent: IntentName = INTENT_GENERAL
    date: date | None = None
    time_of_day: time | None = None
    end_time_of_day: time | None = None  # only for explicit ranges outside update
    duration: int | None = None  # whole hours
    category: str | None = None
    confidence: int = 0  # informational, never gates execution
    is_confirmation: bool = False
