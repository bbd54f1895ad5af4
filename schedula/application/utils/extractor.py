from __future__ import annotations

import logging
from datetime import date, time

from schedula.application.utils.date_parser import (
    parse_calendar_date,
    parse_relative_day,
    parse_single_time,
    parse_time_range,
    parse_update_from_to,
    parse_update_to_at,
)
from schedula.application.utils.message_rules import classify_intent, extract_category, is_confirmation
from schedula.domain.entities.intent import INTENT_UPDATE, ExtractedIntent

logger = logging.getLogger(__name__)


def extract_intent(message: str, reference_date: date, july_only: bool = False) -> ExtractedIntent:
    """
    Turn a free-text chat message into an intent plus whatever booking fields it mentions.

    Pure and deterministic: the only notion of "now" is `reference_date`, which
    resolves "today" and "tomorrow" and supplies the default year.
    """
    normalized = message.lower()
    intent, confidence = classify_intent(normalized)

    booking_date = parse_relative_day(normalized, reference_date)
    if booking_date is None:
        booking_date = parse_calendar_date(message, reference_date, july_only=july_only)
    if booking_date is not None:
        confidence += 25

    time_of_day: time | None = None
    end_time_of_day: time | None = None
    duration: int | None = None

    if intent == INTENT_UPDATE:
        time_of_day = parse_update_from_to(normalized)
        if time_of_day is not None:
            confidence += 40
        else:
            time_of_day = parse_update_to_at(normalized)
            if time_of_day is not None:
                confidence += 30
    else:
        time_range = parse_time_range(normalized)
        if time_range is not None:
            time_of_day, end_time_of_day = time_range
            duration = end_time_of_day.hour - time_of_day.hour
            confidence += 30
        else:
            time_of_day = parse_single_time(normalized)
            if time_of_day is not None:
                duration = 1
                confidence += 20

    category = extract_category(normalized)
    if category is not None:
        confidence += 10

    extracted = ExtractedIntent(
        intent=intent,
        date=booking_date,
        time_of_day=time_of_day,
        end_time_of_day=end_time_of_day,
        duration=duration,
        category=category,
        confidence=confidence,
        is_confirmation=is_confirmation(normalized),
    )
    logger.debug(
        "Message extracted",
        extra={"intent": extracted.intent, "confidence": extracted.confidence},
    )
    return extracted
