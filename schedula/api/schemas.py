from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from schedula.domain.entities.booking import Booking
from schedula.domain.entities.training_type import TrainingType


class ChatRequestSchema(BaseModel):
    message: str
    session_id: str | None = None


class ChatResponseSchema(BaseModel):
    response: str
    session_id: str
    intent: str


class ChatErrorSchema(BaseModel):
    response: str


class BookingSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str | None = None
    category: str
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    client_name: str | None = Field(default=None, alias="clientName")

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=str(booking.id),
            title=booking.title,
            description=booking.description,
            category=booking.category,
            start_time=booking.start_time,
            end_time=booking.end_time,
            client_name=booking.client_name,
        )


class TrainingTypeSchema(BaseModel):
    id: int
    name: str
    category: str
    duration: int

    @classmethod
    def from_entity(cls, entry: TrainingType) -> "TrainingTypeSchema":
        return cls(id=entry.id, name=entry.name, category=entry.category, duration=entry.duration_minutes)


class ErrorMessageSchema(BaseModel):
    message: str
