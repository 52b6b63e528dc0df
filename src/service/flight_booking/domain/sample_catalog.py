from datetime import datetime, timezone
from typing import List

from src.service.flight_booking.domain.entity.flight_entity import FlightEntity


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def build_sample_flights() -> List[FlightEntity]:
    """Starter catalog seeded into an empty database."""
    return [
        FlightEntity.create(
            flight_number='AI101',
            airline='Air India',
            origin='Delhi',
            destination='Mumbai',
            departure_time=_utc('2024-03-20T06:00:00'),
            arrival_time=_utc('2024-03-20T08:15:00'),
            duration='2h 15m',
            price=5500,
            total_seats=180,
            available_seats=150,
            aircraft='Boeing 737',
        ),
        FlightEntity.create(
            flight_number='SG205',
            airline='SpiceJet',
            origin='Mumbai',
            destination='Bangalore',
            departure_time=_utc('2024-03-20T10:30:00'),
            arrival_time=_utc('2024-03-20T12:00:00'),
            duration='1h 30m',
            price=4200,
            total_seats=160,
            available_seats=140,
            aircraft='Boeing 737-800',
        ),
        FlightEntity.create(
            flight_number='UK771',
            airline='Vistara',
            origin='Delhi',
            destination='Bangalore',
            departure_time=_utc('2024-03-20T14:15:00'),
            arrival_time=_utc('2024-03-20T16:45:00'),
            duration='2h 30m',
            price=6800,
            total_seats=200,
            available_seats=180,
            aircraft='Airbus A320',
        ),
        FlightEntity.create(
            flight_number='IG401',
            airline='IndiGo',
            origin='Chennai',
            destination='Kolkata',
            departure_time=_utc('2024-03-20T18:00:00'),
            arrival_time=_utc('2024-03-20T20:30:00'),
            duration='2h 30m',
            price=5200,
            total_seats=186,
            available_seats=165,
            aircraft='Airbus A320neo',
        ),
    ]
