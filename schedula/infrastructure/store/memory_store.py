from __future__ import annotations

import threading
import time
import uuid
from collections import OrderedDict
from datetime import datetime

from schedula.application.exceptions import BookingNotFoundError, SlotConflictError
from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.session_store import SessionStorePort
from schedula.domain.entities.booking import Booking, BookingDraft
from schedula.domain.entities.conversation_state import ConversationState


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_between(self, start: datetime, end: datetime) -> list[Booking]:
        with self._lock:
            return _sorted(b for b in self._bookings.values() if start <= b.start_time <= end)

    def find_overlapping(
        self,
        start: datetime,
        end: datetime,
        exclude_id: int | None = None,
    ) -> list[Booking]:
        with self._lock:
            return self._overlapping(start, end, exclude_id)

    def search(
        self,
        text: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        category: str | None = None,
    ) -> list[Booking]:
        needle = text.lower() if text else None
        with self._lock:
            matches = []
            for booking in self._bookings.values():
                if needle is not None and not any(
                    needle in (value or "").lower()
                    for value in (booking.title, booking.description, booking.client_name)
                ):
                    continue
                if start is not None and booking.start_time < start:
                    continue
                if end is not None and booking.start_time > end:
                    continue
                if category is not None and booking.category != category:
                    continue
                matches.append(booking)
            return _sorted(matches)

    def get(self, booking_id: int) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def create(self, draft: BookingDraft) -> Booking:
        with self._lock:
            return self._insert(draft)

    def create_if_free(self, draft: BookingDraft) -> Booking:
        with self._lock:
            if self._overlapping(draft.start_time, draft.end_time, None):
                raise SlotConflictError("Time slot conflicts with existing booking")
            return self._insert(draft)

    def update(self, booking_id: int, draft: BookingDraft) -> Booking:
        with self._lock:
            return self._replace(booking_id, draft)

    def update_if_free(self, booking_id: int, draft: BookingDraft) -> Booking:
        with self._lock:
            if booking_id not in self._bookings:
                raise BookingNotFoundError(f"Booking {booking_id} not found")
            if self._overlapping(draft.start_time, draft.end_time, booking_id):
                raise SlotConflictError("Time slot conflicts with existing booking")
            return self._replace(booking_id, draft)

    def delete(self, booking_id: int) -> None:
        with self._lock:
            if self._bookings.pop(booking_id, None) is None:
                raise BookingNotFoundError(f"Booking {booking_id} not found")

    def _overlapping(self, start: datetime, end: datetime, exclude_id: int | None) -> list[Booking]:
        return _sorted(
            b for b in self._bookings.values() if b.id != exclude_id and b.overlaps(start, end)
        )

    def _insert(self, draft: BookingDraft) -> Booking:
        booking = _from_draft(self._next_id, draft)
        self._bookings[booking.id] = booking
        self._next_id += 1
        return booking

    def _replace(self, booking_id: int, draft: BookingDraft) -> Booking:
        if booking_id not in self._bookings:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        booking = _from_draft(booking_id, draft)
        self._bookings[booking_id] = booking
        return booking


class MemorySessionStore(SessionStorePort):
    """
    Conversation state per session token, kept in process memory.

    Entries idle for longer than `ttl_seconds` are dropped; beyond `max_entries`
    the least recently used session is evicted.
    """

    def __init__(self, ttl_seconds: float = 1800.0, max_entries: int = 1000) -> None:
        self._states: OrderedDict[str, tuple[ConversationState, float]] = OrderedDict()
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str | None, now_ts: float | None = None) -> str:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            self._evict_expired(now_ts)
            if session_id and session_id in self._states:
                self._touch(session_id, now_ts)
                return session_id
            session_id = session_id or uuid.uuid4().hex
            self._states[session_id] = (ConversationState(), now_ts)
            self._evict_overflow()
            return session_id

    def get_state(self, session_id: str, now_ts: float | None = None) -> ConversationState:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            self._evict_expired(now_ts)
            entry = self._states.get(session_id)
            if entry is None:
                return ConversationState()
            self._touch(session_id, now_ts)
            return entry[0]

    def set_state(self, session_id: str, state: ConversationState, now_ts: float | None = None) -> None:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            self._states[session_id] = (state, now_ts)
            self._states.move_to_end(session_id)
            self._evict_overflow()

    def _touch(self, session_id: str, now_ts: float) -> None:
        state, _ = self._states[session_id]
        self._states[session_id] = (state, now_ts)
        self._states.move_to_end(session_id)

    def _evict_expired(self, now_ts: float) -> None:
        expired = [key for key, (_, seen_at) in self._states.items() if now_ts - seen_at > self._ttl_seconds]
        for key in expired:
            del self._states[key]

    def _evict_overflow(self) -> None:
        while len(self._states) > self._max_entries:
            self._states.popitem(last=False)


def _from_draft(booking_id: int, draft: BookingDraft) -> Booking:
    return Booking(
        id=booking_id,
        title=draft.title,
        description=draft.description,
        category=draft.category,
        start_time=draft.start_time,
        end_time=draft.end_time,
        client_name=draft.client_name,
    )


def _sorted(bookings) -> list[Booking]:
    return sorted(bookings, key=lambda b: (b.start_time, b.id))
