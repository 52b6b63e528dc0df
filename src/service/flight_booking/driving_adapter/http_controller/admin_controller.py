"""
Administrator routes. The router-level `require_admin` dependency is the only
privilege check; handlers below never look at the admin flag themselves.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.create_flight_use_case import CreateFlightUseCase
from src.service.flight_booking.app.command.update_flight_status_use_case import (
    UpdateFlightStatusUseCase,
)
from src.service.flight_booking.app.query.admin_stats_use_case import AdminStatsUseCase
from src.service.flight_booking.app.query.booking_query_use_case import BookingQueryUseCase
from src.service.flight_booking.app.query.flight_query_use_case import FlightQueryUseCase
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.admin_schema import (
    AdminStatsResponse,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingResponse,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.flight_schema import (
    FlightCreateRequest,
    FlightResponse,
    FlightStatusUpdateRequest,
)


router = APIRouter(dependencies=[Depends(require_admin)])


@router.get('/flights')
@Logger.io
async def list_flights(
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> List[FlightResponse]:
    flights = await use_case.list_all()
    return [FlightResponse.model_validate(flight) for flight in flights]


@router.post('/flights', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_flight(
    request: FlightCreateRequest,
    use_case: CreateFlightUseCase = Depends(CreateFlightUseCase.depends),
) -> FlightResponse:
    flight = await use_case.create_flight(
        flight_number=request.flight_number,
        airline=request.airline,
        origin=request.origin,
        destination=request.destination,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
        price=request.price,
        total_seats=request.total_seats,
        available_seats=request.available_seats,
        aircraft=request.aircraft,
        duration=request.duration,
        status=request.status,
    )
    return FlightResponse.model_validate(flight)


@router.patch('/flights/{flight_id}/status')
@Logger.io
async def update_flight_status(
    flight_id: int,
    request: FlightStatusUpdateRequest,
    use_case: UpdateFlightStatusUseCase = Depends(UpdateFlightStatusUseCase.depends),
) -> FlightResponse:
    flight = await use_case.update_status(flight_id=flight_id, status=request.status)
    return FlightResponse.model_validate(flight)


@router.get('/bookings')
@Logger.io
async def list_bookings(
    use_case: BookingQueryUseCase = Depends(BookingQueryUseCase.depends),
) -> List[BookingResponse]:
    details = await use_case.list_all()
    return [BookingResponse.from_detail(detail) for detail in details]


@router.get('/stats')
@Logger.io
async def get_stats(
    use_case: AdminStatsUseCase = Depends(AdminStatsUseCase.depends),
) -> AdminStatsResponse:
    stats = await use_case.get_stats()
    return AdminStatsResponse.model_validate(stats)
