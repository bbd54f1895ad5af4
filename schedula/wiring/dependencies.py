import logging

from schedula.application.ports.booking_store import BookingStorePort
from schedula.application.ports.clock import ClockPort
from schedula.application.ports.session_store import SessionStorePort
from schedula.application.ports.training_catalog import TrainingCatalogPort
from schedula.application.use_cases.create_booking import CreateBookingUseCase
from schedula.application.use_cases.delete_bookings import DeleteBookingsUseCase
from schedula.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from schedula.application.use_cases.list_training_types import ListTrainingTypesUseCase
from schedula.application.use_cases.query_bookings import QueryBookingsUseCase
from schedula.application.use_cases.reply_composer import ReplyComposer
from schedula.application.use_cases.search_bookings import SearchBookingsUseCase
from schedula.application.use_cases.update_booking import UpdateBookingUseCase
from schedula.core.config import settings
from schedula.infrastructure.catalog.training_catalog import StaticTrainingCatalog
from schedula.infrastructure.clock.system_clock import FixedClock, SystemClock
from schedula.infrastructure.store.memory_store import MemoryBookingStore, MemorySessionStore
from schedula.infrastructure.store.sql_store import SqlBookingStore


_clock: ClockPort | None = None
_booking_store: BookingStorePort | None = None
_session_store: SessionStorePort | None = None


def get_clock() -> ClockPort:
    global _clock
    if _clock is None:
        if settings.ANCHOR_DATETIME is not None:
            _clock = FixedClock(settings.ANCHOR_DATETIME)
        else:
            _clock = SystemClock(settings.BUSINESS_TIMEZONE)
    return _clock


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        logger = logging.getLogger(__name__)
        provider = settings.STORE_PROVIDER or ("memory" if settings.ENV.lower() in {"test", "ci"} else "sql")
        if provider.lower() == "memory":
            logger.info("Using MemoryBookingStore")
            _booking_store = MemoryBookingStore()
        else:
            logger.info("Using SqlBookingStore (DATABASE_URL=%s)", settings.DATABASE_URL)
            _booking_store = SqlBookingStore(settings.DATABASE_URL)
    return _booking_store


def get_session_store() -> SessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemorySessionStore(
            ttl_seconds=settings.SESSION_TTL_SECONDS,
            max_entries=settings.SESSION_MAX_ENTRIES,
        )
    return _session_store


def get_training_catalog() -> TrainingCatalogPort:
    return StaticTrainingCatalog()


def get_reply_composer() -> ReplyComposer:
    return ReplyComposer()


def get_handle_chat_message_use_case() -> HandleChatMessageUseCase:
    store = get_booking_store()
    clock = get_clock()
    return HandleChatMessageUseCase(
        sessions=get_session_store(),
        clock=clock,
        create_booking=CreateBookingUseCase(store=store, clock=clock),
        update_booking=UpdateBookingUseCase(store=store, clock=clock),
        delete_bookings=DeleteBookingsUseCase(store=store, clock=clock),
        query_bookings=QueryBookingsUseCase(store=store, clock=clock),
        composer=get_reply_composer(),
        july_only_dates=settings.DATE_PARSER_JULY_ONLY,
    )


def get_search_bookings_use_case() -> SearchBookingsUseCase:
    return SearchBookingsUseCase(store=get_booking_store())


def get_list_training_types_use_case() -> ListTrainingTypesUseCase:
    return ListTrainingTypesUseCase(catalog=get_training_catalog())
