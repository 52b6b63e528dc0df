from datetime import datetime, timedelta, timezone

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.flight_booking.domain.entity.flight_entity import (
    FlightEntity,
    FlightStatus,
    format_duration,
)
from test.shared.factories import make_flight


DEPARTURE = datetime(2024, 3, 20, 6, 0, tzinfo=timezone.utc)


def _create(**overrides):
    kwargs = {
        'flight_number': 'ai101',
        'airline': 'Air India',
        'origin': 'Delhi',
        'destination': 'Mumbai',
        'departure_time': DEPARTURE,
        'arrival_time': DEPARTURE + timedelta(hours=2, minutes=15),
        'price': 5500,
        'total_seats': 180,
        'aircraft': 'Boeing 737',
    }
    kwargs.update(overrides)
    return FlightEntity.create(**kwargs)


@pytest.mark.unit
class TestFlightCreate:
    def test_defaults_and_normalisation(self):
        # Act
        flight = _create()

        # Assert
        assert flight.flight_number == 'AI101'
        assert flight.available_seats == 180
        assert flight.duration == '2h 15m'
        assert flight.status == FlightStatus.ACTIVE
        assert flight.id is None
        assert flight.created_at is not None

    def test_opening_inventory_below_capacity(self):
        flight = _create(available_seats=150)

        assert flight.available_seats == 150
        assert flight.sold_seats == 30

    def test_explicit_duration_is_kept(self):
        assert _create(duration='2h 15m (direct)').duration == '2h 15m (direct)'

    def test_naive_timestamps_are_read_as_utc(self):
        flight = _create(
            departure_time=datetime(2024, 3, 20, 6, 0),
            arrival_time=datetime(2024, 3, 20, 8, 0),
        )

        assert flight.departure_time.tzinfo == timezone.utc

    @pytest.mark.parametrize(
        'overrides, message',
        [
            ({'origin': 'Delhi', 'destination': 'delhi'}, 'Origin and destination must differ'),
            ({'arrival_time': DEPARTURE}, 'Arrival time must be after departure time'),
            ({'total_seats': 0}, 'Total seats must be between 1 and 1000'),
            ({'total_seats': 1_001}, 'Total seats must be between 1 and 1000'),
            ({'price': -1}, 'Price must be between 0 and 1000000'),
            ({'price': 1_000_001}, 'Price must be between 0 and 1000000'),
            ({'available_seats': 181}, 'Available seats must be between 0 and total seats'),
            ({'available_seats': -1}, 'Available seats must be between 0 and total seats'),
            ({'airline': '  '}, 'airline is required'),
        ],
    )
    def test_rejects_invalid_flight(self, overrides, message):
        with pytest.raises(DomainError, match=message):
            _create(**overrides)


@pytest.mark.unit
class TestFlightState:
    def test_cancelled_flight_is_not_bookable(self):
        assert not make_flight(status=FlightStatus.CANCELLED).is_bookable

    def test_delayed_flight_is_still_bookable(self):
        assert make_flight(status=FlightStatus.DELAYED).is_bookable

    def test_format_duration(self):
        assert (
            format_duration(
                departure_time=DEPARTURE, arrival_time=DEPARTURE + timedelta(minutes=90)
            )
            == '1h 30m'
        )
