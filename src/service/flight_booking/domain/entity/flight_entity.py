from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.utc_datetime import ensure_utc, utc_now


# A booking total (price x seats) must stay within an INTEGER column
MAX_TOTAL_SEATS = 1_000
MAX_PRICE = 1_000_000


class FlightStatus(StrEnum):
    ACTIVE = 'active'
    CANCELLED = 'cancelled'
    DELAYED = 'delayed'


def format_duration(*, departure_time: datetime, arrival_time: datetime) -> str:
    """Render the flight time as a label such as ``2h 15m``."""
    minutes = int((arrival_time - departure_time).total_seconds() // 60)
    hours, minutes = divmod(minutes, 60)
    return f'{hours}h {minutes}m'


@attrs.define
class FlightEntity:
    flight_number: str
    airline: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    price: int
    total_seats: int
    available_seats: int
    aircraft: str
    duration: str = ''
    status: FlightStatus = FlightStatus.ACTIVE
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        flight_number: str,
        airline: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        arrival_time: datetime,
        price: int,
        total_seats: int,
        aircraft: str,
        available_seats: Optional[int] = None,
        duration: Optional[str] = None,
        status: FlightStatus = FlightStatus.ACTIVE,
    ) -> 'FlightEntity':
        flight_number = flight_number.strip().upper()
        origin = origin.strip()
        destination = destination.strip()

        for field_name, value in (
            ('flight_number', flight_number),
            ('airline', airline.strip()),
            ('origin', origin),
            ('destination', destination),
            ('aircraft', aircraft.strip()),
        ):
            if not value:
                raise DomainError(f'{field_name} is required')

        if origin.lower() == destination.lower():
            raise DomainError('Origin and destination must differ')

        departure_time = ensure_utc(departure_time)
        arrival_time = ensure_utc(arrival_time)
        if arrival_time <= departure_time:
            raise DomainError('Arrival time must be after departure time')

        if not 0 < total_seats <= MAX_TOTAL_SEATS:
            raise DomainError(f'Total seats must be between 1 and {MAX_TOTAL_SEATS}')
        if not 0 <= price <= MAX_PRICE:
            raise DomainError(f'Price must be between 0 and {MAX_PRICE}')

        if available_seats is None:
            available_seats = total_seats
        if not 0 <= available_seats <= total_seats:
            raise DomainError('Available seats must be between 0 and total seats')

        return cls(
            flight_number=flight_number,
            airline=airline.strip(),
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
            duration=duration
            or format_duration(departure_time=departure_time, arrival_time=arrival_time),
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
            aircraft=aircraft.strip(),
            status=status,
            created_at=utc_now(),
        )

    @property
    def is_bookable(self) -> bool:
        return self.status != FlightStatus.CANCELLED

    @property
    def sold_seats(self) -> int:
        return self.total_seats - self.available_seats
