from __future__ import annotations

from datetime import datetime

import pytest

from schedula.application.exceptions import BookingNotFoundError, SlotConflictError
from tests.conftest import make_draft


def test_ids_increase_and_results_are_sorted(store):
    later = store.create(make_draft(datetime(2025, 7, 10, 15, 0), datetime(2025, 7, 10, 16, 0)))
    earlier = store.create(make_draft(datetime(2025, 7, 10, 9, 0), datetime(2025, 7, 10, 10, 0)))

    assert (later.id, earlier.id) == (1, 2)
    assert [b.id for b in store.list_between(datetime(2025, 7, 10), datetime(2025, 7, 10, 23, 59))] == [2, 1]


def test_find_overlapping_uses_half_open_ranges(store):
    booking = store.create(make_draft(datetime(2025, 7, 10, 9, 0), datetime(2025, 7, 10, 10, 0)))

    assert store.find_overlapping(datetime(2025, 7, 10, 10, 0), datetime(2025, 7, 10, 11, 0)) == []
    assert store.find_overlapping(datetime(2025, 7, 10, 9, 59), datetime(2025, 7, 10, 11, 0)) == [booking]
    assert store.find_overlapping(datetime(2025, 7, 10, 9, 0), datetime(2025, 7, 10, 10, 0), exclude_id=booking.id) == []


def test_update_and_delete_unknown_ids(store):
    draft = make_draft(datetime(2025, 7, 10, 9, 0), datetime(2025, 7, 10, 10, 0))
    with pytest.raises(BookingNotFoundError):
        store.update(42, draft)
    with pytest.raises(BookingNotFoundError):
        store.update_if_free(42, draft)
    with pytest.raises(BookingNotFoundError):
        store.delete(42)


def test_update_if_free_checks_other_bookings(store):
    store.create(make_draft(datetime(2025, 7, 10, 9, 0), datetime(2025, 7, 10, 10, 0)))
    other = store.create(make_draft(datetime(2025, 7, 10, 11, 0), datetime(2025, 7, 10, 12, 0)))

    with pytest.raises(SlotConflictError):
        store.update_if_free(other.id, make_draft(datetime(2025, 7, 10, 9, 30), datetime(2025, 7, 10, 10, 30)))

    moved = store.update(other.id, make_draft(datetime(2025, 7, 10, 13, 0), datetime(2025, 7, 10, 14, 0), title="Moved"))
    assert store.get(other.id) == moved
