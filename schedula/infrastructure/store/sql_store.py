from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator

from sqlalchemy import Column, DateTime, Integer, String, Text, create_engine, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from schedula.application.exceptions import BookingNotFoundError, BookingStoreError, SlotConflictError
from schedula.application.ports.booking_store import BookingStorePort
from schedula.domain.entities.booking import Booking, BookingDraft

Base = declarative_base()


class BookingRow(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True, index=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    client_name = Column(String(200), nullable=True)

    created_at = Column(DateTime, nullable=True, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"<BookingRow(id={self.id!r}, title={self.title!r}, "
            f"start={self.start_time!r}, end={self.end_time!r})>"
        )


class SqlBookingStore(BookingStorePort):
    """
    Booking store backed by a relational database through SQLAlchemy.

    The check-then-write operations (`create_if_free`, `update_if_free`) run
    under a process lock and inside a single transaction, so two concurrent
    requests cannot both claim the same slot from this process.
    """

    def __init__(self, database_url: str) -> None:
        connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
        self._engine = create_engine(database_url, connect_args=connect_args)
        self._session_factory = sessionmaker(bind=self._engine, autoflush=False, autocommit=False)
        self._write_lock = threading.Lock()
        self._logger = logging.getLogger(__name__)
        self.init_db()

    def init_db(self) -> None:
        """Create tables if they don't exist."""
        Base.metadata.create_all(bind=self._engine)

    def list_between(self, start: datetime, end: datetime) -> list[Booking]:
        with self._session() as db:
            rows = (
                db.query(BookingRow)
                .filter(BookingRow.start_time >= start, BookingRow.start_time <= end)
                .order_by(BookingRow.start_time, BookingRow.id)
                .all()
            )
            return [_to_entity(row) for row in rows]

    def find_overlapping(
        self,
        start: datetime,
        end: datetime,
        exclude_id: int | None = None,
    ) -> list[Booking]:
        with self._session() as db:
            return [_to_entity(row) for row in _overlapping_rows(db, start, end, exclude_id)]

    def search(
        self,
        text: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        category: str | None = None,
    ) -> list[Booking]:
        with self._session() as db:
            query = db.query(BookingRow)
            if text:
                pattern = f"%{text.lower()}%"
                query = query.filter(
                    or_(
                        func.lower(BookingRow.title).like(pattern),
                        func.lower(BookingRow.description).like(pattern),
                        func.lower(BookingRow.client_name).like(pattern),
                    )
                )
            if start is not None:
                query = query.filter(BookingRow.start_time >= start)
            if end is not None:
                query = query.filter(BookingRow.start_time <= end)
            if category is not None:
                query = query.filter(BookingRow.category == category)
            rows = query.order_by(BookingRow.start_time, BookingRow.id).all()
            return [_to_entity(row) for row in rows]

    def get(self, booking_id: int) -> Booking | None:
        with self._session() as db:
            row = db.get(BookingRow, booking_id)
            return _to_entity(row) if row is not None else None

    def create(self, draft: BookingDraft) -> Booking:
        with self._write_lock, self._session() as db:
            return self._insert(db, draft)

    def create_if_free(self, draft: BookingDraft) -> Booking:
        with self._write_lock, self._session() as db:
            if _overlapping_rows(db, draft.start_time, draft.end_time, None):
                raise SlotConflictError("Time slot conflicts with existing booking")
            return self._insert(db, draft)

    def update(self, booking_id: int, draft: BookingDraft) -> Booking:
        with self._write_lock, self._session() as db:
            return self._apply(db, booking_id, draft)

    def update_if_free(self, booking_id: int, draft: BookingDraft) -> Booking:
        with self._write_lock, self._session() as db:
            if db.get(BookingRow, booking_id) is None:
                raise BookingNotFoundError(f"Booking {booking_id} not found")
            if _overlapping_rows(db, draft.start_time, draft.end_time, booking_id):
                raise SlotConflictError("Time slot conflicts with existing booking")
            return self._apply(db, booking_id, draft)

    def delete(self, booking_id: int) -> None:
        with self._write_lock, self._session() as db:
            row = db.get(BookingRow, booking_id)
            if row is None:
                raise BookingNotFoundError(f"Booking {booking_id} not found")
            db.delete(row)
            db.commit()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            self._logger.exception("Booking store query failed", extra={"error": str(e)})
            raise BookingStoreError(str(e)) from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _insert(self, db: Session, draft: BookingDraft) -> Booking:
        row = BookingRow()
        _copy_draft(row, draft)
        db.add(row)
        db.commit()
        db.refresh(row)
        return _to_entity(row)

    def _apply(self, db: Session, booking_id: int, draft: BookingDraft) -> Booking:
        row = db.get(BookingRow, booking_id)
        if row is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        _copy_draft(row, draft)
        db.commit()
        db.refresh(row)
        return _to_entity(row)


def _overlapping_rows(db: Session, start: datetime, end: datetime, exclude_id: int | None) -> list[BookingRow]:
    query = db.query(BookingRow).filter(BookingRow.start_time < end, BookingRow.end_time > start)
    if exclude_id is not None:
        query = query.filter(BookingRow.id != exclude_id)
    return query.order_by(BookingRow.start_time, BookingRow.id).all()


def _copy_draft(row: BookingRow, draft: BookingDraft) -> None:
    row.title = draft.title
    row.description = draft.description
    row.category = draft.category
    row.start_time = draft.start_time
    row.end_time = draft.end_time
    row.client_name = draft.client_name


def _to_entity(row: BookingRow) -> Booking:
    return Booking(
        id=row.id,
        title=row.title,
        description=row.description or "",
        category=row.category or "",
        start_time=row.start_time,
        end_time=row.end_time,
        client_name=row.client_name,
    )
