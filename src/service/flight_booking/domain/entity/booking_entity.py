from datetime import datetime
from enum import StrEnum
from typing import List, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import (
    BookingNotCancellableError,
    DomainError,
    ForbiddenError,
)
from src.platform.types.utc_datetime import utc_now
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity
from src.service.flight_booking.domain.value_object.passenger_info import PassengerInfo


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'


@attrs.define
class BookingEntity:
    id: UUID
    account_id: int
    flight_id: int
    passenger_name: str
    passenger_email: str
    passenger_phone: str
    seat_numbers: List[str]
    total_price: int
    pnr: str
    status: BookingStatus = BookingStatus.CONFIRMED
    booked_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        account_id: int,
        flight: FlightEntity,
        passenger: PassengerInfo,
        seat_numbers: List[str],
        pnr: str,
    ) -> 'BookingEntity':
        if flight.id is None:
            raise DomainError('Flight must be persisted before booking')
        if not seat_numbers:
            raise DomainError('At least one seat is required')
        if len(set(seat_numbers)) != len(seat_numbers):
            raise DomainError('Seat labels must be unique within a booking')

        return cls(
            id=uuid7(),
            account_id=account_id,
            flight_id=flight.id,
            passenger_name=passenger.name,
            passenger_email=passenger.email,
            passenger_phone=passenger.phone,
            seat_numbers=list(seat_numbers),
            total_price=flight.price * len(seat_numbers),
            pnr=pnr,
            status=BookingStatus.CONFIRMED,
            booked_at=utc_now(),
        )

    @property
    def seat_count(self) -> int:
        return len(self.seat_numbers)

    def ensure_visible_to(self, *, account_id: int, is_admin: bool) -> None:
        if not is_admin and self.account_id != account_id:
            raise ForbiddenError('You can only access your own bookings')

    def ensure_cancellable(self) -> None:
        if self.status != BookingStatus.CONFIRMED:
            raise BookingNotCancellableError(f'Booking {self.pnr} is already {self.status.value}')
