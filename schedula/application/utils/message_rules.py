from __future__ import annotations

from schedula.domain.entities.intent import (
    INTENT_BOOK,
    INTENT_DELETE,
    INTENT_GENERAL,
    INTENT_QUERY,
    INTENT_UPDATE,
)

CONFIRMATION_KEYWORDS = (
    "yes",
    "yeah",
    "yep",
    "confirm",
    "correct",
    "right",
    "book it",
    "go ahead",
    "proceed",
)

DELETE_KEYWORDS = (
    "delete",
    "remove",
    "cancel",
    "clear",
    "cancel appointment",
    "cancel meeting",
    "clear calendar",
    "remove booking",
)

UPDATE_KEYWORDS = (
    "update",
    "change",
    "modify",
    "edit",
    "reschedule",
    "move",
    "shift",
    "adjust",
    "change time",
    "move to",
)

QUERY_KEYWORDS = (
    "show",
    "what",
    "when",
    "which",
    "sessions",
    "bookings",
    "check",
    "see",
    "display",
    "tell me",
    "find",
    "have",
    "do i have",
    "list",
    "view",
)

BOOKING_KEYWORDS = (
    "book",
    "schedule",
    "create",
    "add",
    "set up",
    "arrange",
    "plan",
    "reserve",
)

# Checked in this order; the first table with a hit decides the intent.
# Delete sits above update so "remove" phrasing is never read as an edit.
INTENT_RULES = (
    (CONFIRMATION_KEYWORDS, INTENT_BOOK, 80),
    (DELETE_KEYWORDS, INTENT_DELETE, 70),
    (UPDATE_KEYWORDS, INTENT_UPDATE, 60),
    (QUERY_KEYWORDS, INTENT_QUERY, 60),
    (BOOKING_KEYWORDS, INTENT_BOOK, 50),
)

CATEGORY_KEYWORDS = (
    ("training", "Training"),
    ("meeting", "Meeting"),
    ("azure", "Azure"),
    ("python", "Python"),
)


def matched_keywords(text: str, keywords: tuple[str, ...]) -> list[str]:
    normalized = text.lower()
    return [keyword for keyword in keywords if keyword in normalized]


def is_confirmation(text: str) -> bool:
    return bool(matched_keywords(text, CONFIRMATION_KEYWORDS))


def classify_intent(text: str) -> tuple[str, int]:
    """Return (intent, confidence gained) using the keyword tables in priority order."""
    for keywords, intent, score in INTENT_RULES:
        if matched_keywords(text, keywords):
            return intent, score
    return INTENT_GENERAL, 0


def extract_category(text: str) -> str | None:
    normalized = text.lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in normalized:
            return category
    return None
