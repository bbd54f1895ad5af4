from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from schedula.application.ports.clock import ClockPort
from schedula.application.ports.session_store import SessionStorePort
from schedula.application.use_cases.create_booking import CreateBookingUseCase
from schedula.application.use_cases.delete_bookings import DeleteBookingsUseCase
from schedula.application.use_cases.query_bookings import QueryBookingsUseCase
from schedula.application.use_cases.reply_composer import ReplyComposer
from schedula.application.use_cases.update_booking import UpdateBookingUseCase
from schedula.application.utils.defaults import apply_defaults
from schedula.application.utils.extractor import extract_intent
from schedula.application.utils.state_helpers import (
    merge_partial_booking,
    remember_booking_attempt,
    reset_partial_booking,
)
from schedula.domain.entities.intent import (
    INTENT_BOOK,
    INTENT_DELETE,
    INTENT_QUERY,
    INTENT_UPDATE,
    ExtractedIntent,
)


@dataclass(frozen=True)
class ChatReply:
    session_id: str
    html: str
    extracted: ExtractedIntent
    success: bool


class HandleChatMessageUseCase:
    def __init__(
        self,
        sessions: SessionStorePort,
        clock: ClockPort,
        create_booking: CreateBookingUseCase,
        update_booking: UpdateBookingUseCase,
        delete_bookings: DeleteBookingsUseCase,
        query_bookings: QueryBookingsUseCase,
        composer: ReplyComposer,
        july_only_dates: bool = False,
    ) -> None:
        self._sessions = sessions
        self._clock = clock
        self._create_booking = create_booking
        self._update_booking = update_booking
        self._delete_bookings = delete_bookings
        self._query_bookings = query_bookings
        self._composer = composer
        self._july_only_dates = july_only_dates
        self._logger = logging.getLogger(__name__)

    def handle(self, text: str, session_id: str | None = None) -> ChatReply:
        now_ts = time.time()
        session_id = self._sessions.get_or_create(session_id, now_ts=now_ts)
        state = self._sessions.get_state(session_id, now_ts=now_ts)

        today = self._clock.today()
        extracted = extract_intent(text, today, july_only=self._july_only_dates)
        self._logger.info(
            "Chat message classified",
            extra={"session_id": session_id, "intent": extracted.intent, "confidence": extracted.confidence},
        )

        if extracted.intent == INTENT_BOOK:
            if extracted.is_confirmation and state.last_intent == INTENT_BOOK:
                extracted = merge_partial_booking(extracted, state.partial_booking)
            created = self._create_booking.execute(apply_defaults(extracted, today))
            html = self._composer.compose_created(created)
            success = created.success
            if success:
                new_state = reset_partial_booking(state, INTENT_BOOK, now_ts)
            else:
                new_state = remember_booking_attempt(state, extracted, now_ts)

        elif extracted.intent == INTENT_QUERY:
            queried = self._query_bookings.execute(extracted.date)
            html = self._composer.compose_schedule(queried, self._clock.now())
            success = queried.error is None
            new_state = reset_partial_booking(state, INTENT_QUERY, now_ts)

        elif extracted.intent == INTENT_DELETE:
            deleted = self._delete_bookings.execute(extracted.date)
            html = self._composer.compose_deleted(deleted)
            success = deleted.success
            new_state = reset_partial_booking(state, INTENT_DELETE, now_ts)

        elif extracted.intent == INTENT_UPDATE:
            updated = self._update_booking.execute(extracted)
            html = self._composer.compose_updated(updated)
            success = updated.success
            new_state = reset_partial_booking(state, INTENT_UPDATE, now_ts)

        else:
            html = self._composer.compose_help()
            success = True
            new_state = reset_partial_booking(state, extracted.intent, now_ts)

        self._sessions.set_state(session_id, new_state, now_ts=now_ts)
        return ChatReply(session_id=session_id, html=html, extracted=extracted, success=success)
