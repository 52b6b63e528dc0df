"""
Row -> entity conversion shared by the command and query repositories.

Mappers accept ORM instances and Core result rows alike (both expose columns as
attributes). SQLite returns naive datetimes, so every timestamp passes through
`ensure_utc`.
"""

from typing import Any
from uuid import UUID

from src.platform.types.utc_datetime import ensure_utc, ensure_utc_or_none
from src.service.flight_booking.app.dto.booking_detail import AccountSummary
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.domain.entity.booking_entity import BookingEntity, BookingStatus
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus


def to_account_entity(row: Any) -> AccountEntity:
    return AccountEntity(
        id=row.id,
        email=row.email,
        name=row.name,
        phone=row.phone,
        hashed_password=row.hashed_password,
        is_admin=row.is_admin,
        created_at=ensure_utc_or_none(row.created_at),
    )


def to_account_summary(row: Any) -> AccountSummary:
    return AccountSummary(id=row.id, name=row.name, email=row.email)


def to_flight_entity(row: Any) -> FlightEntity:
    return FlightEntity(
        id=row.id,
        flight_number=row.flight_number,
        airline=row.airline,
        origin=row.origin,
        destination=row.destination,
        departure_time=ensure_utc(row.departure_time),
        arrival_time=ensure_utc(row.arrival_time),
        duration=row.duration,
        price=row.price,
        total_seats=row.total_seats,
        available_seats=row.available_seats,
        aircraft=row.aircraft,
        status=FlightStatus(row.status),
        created_at=ensure_utc_or_none(row.created_at),
    )


def to_booking_entity(row: Any) -> BookingEntity:
    return BookingEntity(
        id=row.id if isinstance(row.id, UUID) else UUID(str(row.id)),
        account_id=row.account_id,
        flight_id=row.flight_id,
        passenger_name=row.passenger_name,
        passenger_email=row.passenger_email,
        passenger_phone=row.passenger_phone,
        seat_numbers=list(row.seat_numbers or []),
        total_price=row.total_price,
        pnr=row.pnr,
        status=BookingStatus(row.status),
        booked_at=ensure_utc_or_none(row.booked_at),
    )
