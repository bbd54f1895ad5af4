from __future__ import annotations

from dataclasses import replace

from schedula.domain.entities.conversation_state import ConversationState
from schedula.domain.entities.intent import ExtractedIntent
from schedula.domain.entities.partial_booking import PartialBooking


def collect_partial_booking(extracted: ExtractedIntent, previous: PartialBooking) -> PartialBooking:
    """
    Fields from this message win; gaps are kept from earlier turns.

    End time and duration belong to the start time they were given with, so a
    message that names a new start never inherits an older end or duration.
    """
    if extracted.time_of_day is not None:
        time_source = extracted
    else:
        time_source = previous
    return PartialBooking(
        date=extracted.date or previous.date,
        time_of_day=time_source.time_of_day,
        end_time_of_day=time_source.end_time_of_day,
        duration=time_source.duration,
        category=extracted.category or previous.category,
    )


def merge_partial_booking(extracted: ExtractedIntent, partial: PartialBooking) -> ExtractedIntent:
    """Complete a confirmation message with the booking fields collected earlier."""
    if partial.is_empty():
        return extracted
    merged = collect_partial_booking(extracted, partial)
    return replace(
        extracted,
        date=merged.date,
        time_of_day=merged.time_of_day,
        end_time_of_day=merged.end_time_of_day,
        duration=merged.duration,
        category=merged.category,
    )


def remember_booking_attempt(
    state: ConversationState, extracted: ExtractedIntent, now_ts: float
) -> ConversationState:
    """Keep the fields of an unfinished booking so a later "yes" can retry it."""
    previous = state.partial_booking if state.last_intent == extracted.intent else PartialBooking()
    return replace(
        state,
        last_intent=extracted.intent,
        partial_booking=collect_partial_booking(extracted, previous),
        updated_at=now_ts,
    )


def reset_partial_booking(state: ConversationState, last_intent: str, now_ts: float) -> ConversationState:
    """Record the turn's intent and drop any collected booking fields."""
    return replace(state, last_intent=last_intent, partial_booking=PartialBooking(), updated_at=now_ts)
