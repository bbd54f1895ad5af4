from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from schedula.api.schemas import BookingSchema, ErrorMessageSchema, TrainingTypeSchema
from schedula.application.use_cases.list_training_types import ListTrainingTypesUseCase
from schedula.application.use_cases.search_bookings import SearchBookingsUseCase
from schedula.wiring.dependencies import get_list_training_types_use_case, get_search_bookings_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/bookings/search")
def search_bookings(
    q: str | None = Query(None),
    day: str | None = Query(None, alias="date"),
    category: str | None = Query(None),
    uc: SearchBookingsUseCase = Depends(get_search_bookings_use_case),
) -> JSONResponse:
    try:
        target_day = date.fromisoformat(day) if day else None
        bookings = uc.execute(text=q, day=target_day, category=category)
    except Exception as e:
        logger.exception("Error searching bookings", extra={"error": str(e)})
        return _error("Failed to search bookings")

    logger.info("Bookings searched", extra={"count": len(bookings)})
    content = [BookingSchema.from_entity(b).model_dump(mode="json", by_alias=True) for b in bookings]
    return JSONResponse(content=content)


@router.get("/api/training-types", response_model=list[TrainingTypeSchema])
def list_training_types(
    category: str | None = Query(None),
    uc: ListTrainingTypesUseCase = Depends(get_list_training_types_use_case),
):
    try:
        types = uc.execute(category=category)
    except Exception as e:
        logger.exception("Error fetching training types", extra={"error": str(e)})
        return _error("Failed to fetch training types")

    return [TrainingTypeSchema.from_entity(entry) for entry in types]


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorMessageSchema(message=message).model_dump())
