from typing import Optional

import attrs

from src.service.flight_booking.domain.entity.booking_entity import BookingEntity
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity


@attrs.frozen
class AccountSummary:
    id: int
    name: str
    email: str


@attrs.frozen
class BookingDetail:
    """A booking with the display fields of its flight (and, for admin listings, its account)."""

    booking: BookingEntity
    flight: Optional[FlightEntity] = None
    account: Optional[AccountSummary] = None
