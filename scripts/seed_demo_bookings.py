# scripts/seed_demo_bookings.py
import sys
from pathlib import Path
# Ensure project root is importable when running from scripts/
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datetime import datetime, time, timedelta

from dotenv import load_dotenv

load_dotenv()

from schedula.application.exceptions import SlotConflictError
from schedula.domain.entities.booking import BookingDraft
from schedula.wiring.dependencies import get_booking_store, get_clock


def at(d, h, m=0):
    return datetime.combine(d, time(h, m))


def add(store, d, start, end, title, category, client=None):
    draft = BookingDraft(
        title=title,
        category=category,
        start_time=start,
        end_time=end,
        description=f"{title} (demo)",
        client_name=client,
    )
    try:
        store.create_if_free(draft)
        return True
    except SlotConflictError:
        print(f"  skipped {title} on {d}: slot taken")
        return False


def main():
    store = get_booking_store()
    today = get_clock().today()
    start = today
    end = today + timedelta(days=13)

    # Clear only the target range to avoid duplicates on re-run
    print(f"Clearing bookings between {start} and {end}…")
    for booking in store.list_between(at(start, 0), at(end, 23, 59)):
        store.delete(booking.id)

    created = 0
    d = start
    while d <= end:
        wk = d.weekday()  # 0=Mon … 5=Sat 6=Sun

        if wk < 5:
            created += add(store, d, at(d, 9), at(d, 10), "Azure Fundamentals", "Azure", "Contoso")
            created += add(store, d, at(d, 14), at(d, 15, 30), "Python Basics", "Python", "Fabrikam")
            if wk == 2:
                created += add(store, d, at(d, 11), at(d, 12), "Team Meeting", "Meeting")
            if wk == 4:
                created += add(store, d, at(d, 16), at(d, 18), "Data Science with Python", "Python", "Northwind")
        d += timedelta(days=1)

    print(f"Seeded {created} bookings between {start} and {end}.")


if __name__ == "__main__":
    main()
