from dataclasses import dataclass

from schedula.domain.entities.partial_booking import PartialBooking


@dataclass(frozen=True)
class ConversationState:
    last_intent: str | None = None
    partial_booking: PartialBooking = PartialBooking()
    updated_at: float | None = None
