from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from schedula.domain.entities.booking import Booking, BookingDraft


class BookingStorePort(ABC):
    @abstractmethod
    def list_between(self, start: datetime, end: datetime) -> list[Booking]:
        """Bookings whose start time lies in [start, end], ascending by start time."""
        raise NotImplementedError

    @abstractmethod
    def find_overlapping(
        self,
        start: datetime,
        end: datetime,
        exclude_id: int | None = None,
    ) -> list[Booking]:
        """Bookings with existing.start < end and existing.end > start."""
        raise NotImplementedError

    @abstractmethod
    def search(
        self,
        text: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        category: str | None = None,
    ) -> list[Booking]:
        """
        AND-combined filters, each applied only when given:
        - text: case-insensitive substring of title, description or client name
        - start/end: start time within [start, end]
        - category: exact match
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, draft: BookingDraft) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def create_if_free(self, draft: BookingDraft) -> Booking:
        """
        Insert only if no booking overlaps the draft's range.
        The check and the insert are atomic. Raises SlotConflictError on overlap.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, booking_id: int, draft: BookingDraft) -> Booking:
        """Full-field replace. Raises BookingNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def update_if_free(self, booking_id: int, draft: BookingDraft) -> Booking:
        """
        Replace only if no other booking overlaps the new range.
        Raises SlotConflictError on overlap, BookingNotFoundError for unknown ids.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: int) -> None:
        """Raises BookingNotFoundError for unknown ids."""
        raise NotImplementedError
