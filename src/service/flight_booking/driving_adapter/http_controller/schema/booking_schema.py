from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.platform.constant.db_limit import DB_INT_MAX
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.domain.entity.booking_entity import BookingStatus
from src.service.flight_booking.driving_adapter.http_controller.schema.flight_schema import (
    FlightResponse,
)


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'flight_id': 1,
                'passenger_name': 'Asha Rao',
                'passenger_email': 'asha@flights.com',
                'passenger_phone': '+919876543210',
                'seat_count': 2,
            }
        }
    )

    flight_id: int
    passenger_name: str = Field(..., min_length=1, max_length=255)
    passenger_email: EmailStr
    passenger_phone: str = Field(..., min_length=1, max_length=32)
    seat_count: int = Field(..., ge=1, le=DB_INT_MAX)


class BookingAccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'pnr': 'K7Q2XM',
                'account_id': 2,
                'flight_id': 1,
                'passenger_name': 'Asha Rao',
                'passenger_email': 'asha@flights.com',
                'passenger_phone': '+919876543210',
                'seat_numbers': ['6A', '6B'],
                'total_price': 11000,
                'status': 'confirmed',
                'booked_at': '2024-03-01T10:30:00Z',
            }
        },
    )

    id: UUID  # UUID7
    pnr: str
    account_id: int
    flight_id: int
    passenger_name: str
    passenger_email: str
    passenger_phone: str
    seat_numbers: List[str]
    total_price: int
    status: BookingStatus
    booked_at: Optional[datetime] = None
    flight: Optional[FlightResponse] = None
    account: Optional[BookingAccountResponse] = None

    @classmethod
    def from_detail(cls, detail: BookingDetail) -> 'BookingResponse':
        booking = detail.booking
        return cls(
            id=booking.id,
            pnr=booking.pnr,
            account_id=booking.account_id,
            flight_id=booking.flight_id,
            passenger_name=booking.passenger_name,
            passenger_email=booking.passenger_email,
            passenger_phone=booking.passenger_phone,
            seat_numbers=booking.seat_numbers,
            total_price=booking.total_price,
            status=booking.status,
            booked_at=booking.booked_at,
            flight=FlightResponse.model_validate(detail.flight) if detail.flight else None,
            account=BookingAccountResponse.model_validate(detail.account)
            if detail.account
            else None,
        )
