from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.query.flight_query_use_case import (
    MAX_SEARCH_LIMIT,
    FlightQueryUseCase,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.flight_schema import (
    FlightResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def search_flights(
    origin: Optional[str] = Query(None, alias='from', max_length=100),
    destination: Optional[str] = Query(None, alias='to', max_length=100),
    departure_date: Optional[date] = Query(None, alias='date'),
    limit: Optional[int] = Query(None, ge=1, le=MAX_SEARCH_LIMIT),
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> List[FlightResponse]:
    flights = await use_case.search(
        origin=origin, destination=destination, day=departure_date, limit=limit
    )
    return [FlightResponse.model_validate(flight) for flight in flights]


@router.get('/{flight_id}')
@Logger.io
async def get_flight(
    flight_id: int,
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> FlightResponse:
    flight = await use_case.get_flight(flight_id=flight_id)
    return FlightResponse.model_validate(flight)
