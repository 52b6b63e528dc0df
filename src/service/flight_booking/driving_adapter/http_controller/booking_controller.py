from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.flight_booking.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.flight_booking.app.query.booking_query_use_case import BookingQueryUseCase
from src.service.flight_booking.domain.value_object.passenger_info import PassengerInfo
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    session: SessionClaims = Depends(get_current_session),
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('flight_id', request.flight_id)
        span.set_attribute('seat_count', request.seat_count)

        detail = await use_case.reserve(
            account_id=session.account_id,
            flight_id=request.flight_id,
            passenger=PassengerInfo.create(
                name=request.passenger_name,
                email=request.passenger_email,
                phone=request.passenger_phone,
            ),
            seat_count=request.seat_count,
        )
        return BookingResponse.from_detail(detail)


@router.get('')
@Logger.io
async def list_my_bookings(
    session: SessionClaims = Depends(get_current_session),
    use_case: BookingQueryUseCase = Depends(BookingQueryUseCase.depends),
) -> List[BookingResponse]:
    details = await use_case.list_for_account(account_id=session.account_id)
    return [BookingResponse.from_detail(detail) for detail in details]


@router.get('/{pnr}')
@Logger.io
async def get_booking_by_reference(
    pnr: str,
    session: SessionClaims = Depends(get_current_session),
    use_case: BookingQueryUseCase = Depends(BookingQueryUseCase.depends),
) -> BookingResponse:
    detail = await use_case.get_by_reference(pnr=pnr, requester=session)
    return BookingResponse.from_detail(detail)


@router.patch('/{booking_id}')
@Logger.io
async def cancel_booking(
    booking_id: UUID,
    session: SessionClaims = Depends(get_current_session),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingResponse:
    detail = await use_case.cancel(booking_id=booking_id, requester=session)
    return BookingResponse.from_detail(detail)
