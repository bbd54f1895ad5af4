from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from schedula.application.use_cases.create_booking import CreateBookingUseCase
from schedula.application.use_cases.delete_bookings import DeleteBookingsUseCase
from schedula.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from schedula.application.use_cases.query_bookings import QueryBookingsUseCase
from schedula.application.use_cases.reply_composer import ReplyComposer
from schedula.application.use_cases.search_bookings import SearchBookingsUseCase
from schedula.application.use_cases.update_booking import UpdateBookingUseCase
from schedula.domain.entities.booking import BookingDraft
from schedula.infrastructure.clock.system_clock import FixedClock
from schedula.infrastructure.store.memory_store import MemoryBookingStore, MemorySessionStore

ANCHOR = datetime(2025, 7, 5, 12, 0)


def make_draft(start: datetime, end: datetime, title: str = "Training Session", category: str = "Training", **extra):
    return BookingDraft(
        title=title,
        category=category,
        start_time=start,
        end_time=end,
        description=extra.get("description", "Session scheduled via Schedula AI"),
        client_name=extra.get("client_name", "Client"),
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(ANCHOR)


@pytest.fixture
def store() -> MemoryBookingStore:
    return MemoryBookingStore()


@pytest.fixture
def sessions() -> MemorySessionStore:
    return MemorySessionStore(ttl_seconds=1800, max_entries=100)


@pytest.fixture
def chat_use_case(store, sessions, clock) -> HandleChatMessageUseCase:
    return HandleChatMessageUseCase(
        sessions=sessions,
        clock=clock,
        create_booking=CreateBookingUseCase(store=store, clock=clock),
        update_booking=UpdateBookingUseCase(store=store, clock=clock),
        delete_bookings=DeleteBookingsUseCase(store=store, clock=clock),
        query_bookings=QueryBookingsUseCase(store=store, clock=clock),
        composer=ReplyComposer(),
    )


@pytest.fixture
def client(store, chat_use_case):
    from schedula.main import app
    from schedula.wiring import dependencies

    app.dependency_overrides[dependencies.get_handle_chat_message_use_case] = lambda: chat_use_case
    app.dependency_overrides[dependencies.get_search_bookings_use_case] = lambda: SearchBookingsUseCase(store=store)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
