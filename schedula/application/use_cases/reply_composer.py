from __future__ import annotations

from datetime import datetime
from html import escape

from schedula.application.use_cases.create_booking import CreateResult
from schedula.application.use_cases.delete_bookings import DeleteResult
from schedula.application.use_cases.query_bookings import QueryResult
from schedula.application.use_cases.update_booking import UpdateResult
from schedula.domain.entities.booking import Booking

CATEGORY_COLORS = {
    "training": "#10b981",
    "workshop": "#3b82f6",
    "meeting": "#8b5cf6",
    "consultation": "#f59e0b",
    "review": "#6366f1",
    "azure": "#0078d4",
    "python": "#3776ab",
}
DEFAULT_CATEGORY_COLOR = "#6b7280"

SUCCESS_COLOR = "#059669"
ERROR_COLOR = "#dc2626"
DELETE_COLOR = "#d97706"
UPDATE_COLOR = "#7c3aed"
INFO_COLOR = "#4b5563"
HELP_COLOR = "#4f46e5"
SCHEDULE_COLOR = "#1d4ed8"

HELP_EXAMPLES = (
    ("Book sessions", "Book a training session tomorrow at 2 PM"),
    ("View schedule", "Show me my bookings for today"),
    ("Update bookings", "Change tomorrow's session to 3 PM"),
    ("Delete bookings", "Cancel my session on July 10"),
)


class ReplyComposer:
    """Render executor results as HTML fragments for the chat widget."""

    def compose_created(self, result: CreateResult) -> str:
        if not result.success or result.booking is None:
            return _card("Booking Failed", ERROR_COLOR, _paragraph(result.error or "Unable to create booking. Please try again."))
        return _card("Booking Confirmed!", SUCCESS_COLOR, _booking_details(result.booking, "Time"))

    def compose_updated(self, result: UpdateResult) -> str:
        if not result.success or result.updated_booking is None:
            return _card("Update Failed", ERROR_COLOR, _paragraph(result.error or "Unable to update booking. Please try again."))
        body = _booking_details(result.updated_booking, "New Time")
        if result.candidate_count > 1:
            body += _paragraph(
                f"{result.candidate_count} sessions were booked that day; the earliest one was updated."
            )
        return _card("Booking Updated!", UPDATE_COLOR, body)

    def compose_deleted(self, result: DeleteResult) -> str:
        if not result.success:
            return _card("Delete Failed", ERROR_COLOR, _paragraph(result.error or "Unable to delete bookings. Please try again."))
        if result.deleted_count == 0:
            return _card(
                "No Bookings Found",
                INFO_COLOR,
                _paragraph(result.error or "No bookings found to delete for the specified date."),
            )
        items = "".join(
            f"<li>{escape(booking.title)} - {booking.start_time.strftime('%m/%d/%Y')}</li>"
            for booking in result.deleted_bookings
        )
        body = _paragraph(f"Successfully deleted {result.deleted_count} booking(s):") + f"<ul>{items}</ul>"
        return _card("Bookings Deleted", DELETE_COLOR, body)

    def compose_schedule(self, result: QueryResult, now: datetime) -> str:
        if result.error:
            return _card("Schedule Unavailable", ERROR_COLOR, _paragraph(result.error))
        if result.scope == "day":
            label = _long_date(result.range_start)
        else:
            label = result.range_start.strftime("%B %Y")
        return _card(f"Your Schedule - {label}", SCHEDULE_COLOR, _bookings_table(result.bookings, label, now))

    def compose_help(self) -> str:
        items = "".join(
            f"<li><strong>{escape(title)}:</strong> \"{escape(example)}\"</li>" for title, example in HELP_EXAMPLES
        )
        body = _paragraph("I can help you manage your calendar! Here's what I can do:") + f"<ul>{items}</ul>"
        return _card("Schedula AI Assistant", HELP_COLOR, body)

    def compose_system_error(self) -> str:
        return _card(
            "System Error",
            ERROR_COLOR,
            _paragraph("I encountered an error processing your request. Please try again."),
        )


def _card(title: str, color: str, body: str) -> str:
    return (
        f'<div style="background: {color}; color: white; padding: 20px; border-radius: 12px; margin: 16px 0;">'
        f'<h3 style="margin: 0 0 12px 0; font-size: 18px;">{escape(title)}</h3>'
        f"{body}</div>"
    )


def _paragraph(text: str) -> str:
    return f'<p style="margin: 0 0 8px 0;">{escape(text)}</p>'


def _long_date(value: datetime) -> str:
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def _clock(value: datetime) -> str:
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def _booking_details(booking: Booking, time_label: str) -> str:
    rows = (
        ("Session", booking.title),
        ("Date", _long_date(booking.start_time)),
        (time_label, f"{_clock(booking.start_time)} - {_clock(booking.end_time)}"),
        ("Category", booking.category),
        ("Client", booking.client_name or "N/A"),
    )
    return "".join(
        f'<p style="margin: 0 0 8px 0;"><strong>{escape(label)}:</strong> {escape(value)}</p>' for label, value in rows
    )


def _hours(booking: Booking) -> str:
    hours = round(booking.duration.total_seconds() / 3600, 1)
    return f"{hours:g}h"


def _date_color(start: datetime, now: datetime) -> str:
    if start.date() == now.date():
        return "#059669"
    if start < now:
        return "#6b7280"
    return "#3b82f6"


def _bookings_table(bookings: list[Booking], label: str, now: datetime) -> str:
    if not bookings:
        return f'<div style="text-align: center; padding: 20px; font-style: italic;">No bookings found for {escape(label)}.</div>'

    header = "".join(
        f'<th style="padding: 12px; text-align: left;">{name}</th>'
        for name in ("Session Name", "Date", "Time", "Duration", "Client", "Category")
    )
    rows = []
    for index, booking in enumerate(bookings):
        background = "#f8fafc" if index % 2 == 0 else "white"
        badge = CATEGORY_COLORS.get((booking.category or "").lower(), DEFAULT_CATEGORY_COLOR)
        rows.append(
            f'<tr style="background: {background}; color: #2d3748;">'
            f'<td style="padding: 12px; font-weight: 600;">{escape(booking.title)}</td>'
            f'<td style="padding: 12px; color: {_date_color(booking.start_time, now)};">'
            f"{booking.start_time.strftime('%a, %b')} {booking.start_time.day}</td>"
            f'<td style="padding: 12px; font-family: monospace;">{_clock(booking.start_time)}</td>'
            f'<td style="padding: 12px;">{_hours(booking)}</td>'
            f'<td style="padding: 12px;">{escape(booking.client_name or "N/A")}</td>'
            f'<td style="padding: 12px;"><span style="background: {badge}; color: white; '
            f'padding: 4px 12px; border-radius: 20px;">{escape(booking.category or "General")}</span></td>'
            "</tr>"
        )
    return (
        '<table style="width: 100%; border-collapse: collapse; background: white;">'
        f"<thead><tr>{header}</tr></thead><tbody>{''.join(rows)}</tbody></table>"
    )
