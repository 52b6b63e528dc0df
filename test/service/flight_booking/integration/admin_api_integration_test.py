from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    ADMIN_BOOKINGS,
    ADMIN_FLIGHT_STATUS,
    ADMIN_FLIGHTS,
    ADMIN_STATS,
    BOOKING_BASE,
    FLIGHT_SEARCH,
)
from test.shared.utils import find_flight, reserve
from test.util_constant import SAMPLE_FLIGHT_COUNT, TRAVELER_EMAIL


NEW_FLIGHT = {
    'flight_number': 'ek501',
    'airline': 'Emirates',
    'origin': 'Mumbai',
    'destination': 'Dubai',
    'departure_time': '2024-03-21T04:00:00Z',
    'arrival_time': '2024-03-21T07:20:00Z',
    'price': 18000,
    'total_seats': 300,
    'aircraft': 'Boeing 777',
}


@pytest.mark.integration
class TestAdminGate:
    @pytest.mark.parametrize('path', [ADMIN_FLIGHTS, ADMIN_BOOKINGS, ADMIN_STATS])
    def test_requires_session(self, client: TestClient, path):
        response = client.get(path)

        assert response.status_code == 401

    @pytest.mark.parametrize('path', [ADMIN_FLIGHTS, ADMIN_BOOKINGS, ADMIN_STATS])
    def test_traveler_is_forbidden(self, client: TestClient, as_traveler, path):
        response = client.get(path, headers=as_traveler)

        assert response.status_code == 403
        assert response.json() == {'detail': 'Admin access required', 'error': 'forbidden'}

    def test_traveler_cannot_create_flight(self, client: TestClient, as_traveler):
        response = client.post(ADMIN_FLIGHTS, json=NEW_FLIGHT, headers=as_traveler)

        assert response.status_code == 403
        assert len(client.get(FLIGHT_SEARCH).json()) == SAMPLE_FLIGHT_COUNT


@pytest.mark.integration
class TestAdminFlights:
    def test_create_flight(self, client: TestClient, as_admin):
        # Act
        response = client.post(ADMIN_FLIGHTS, json=NEW_FLIGHT, headers=as_admin)

        # Assert
        assert response.status_code == 201
        flight = response.json()
        assert flight['flight_number'] == 'EK501'
        assert flight['available_seats'] == 300
        assert flight['duration'] == '3h 20m'
        assert flight['status'] == 'active'
        found = client.get(FLIGHT_SEARCH, params={'to': 'dubai'}).json()
        assert [f['flight_number'] for f in found] == ['EK501']

    def test_duplicate_flight_number(self, client: TestClient, as_admin):
        response = client.post(
            ADMIN_FLIGHTS, json={**NEW_FLIGHT, 'flight_number': 'AI101'}, headers=as_admin
        )

        assert response.status_code == 409
        assert response.json()['error'] == 'duplicate_flight'

    @pytest.mark.parametrize(
        'overrides',
        [
            {'destination': 'mumbai'},
            {'arrival_time': '2024-03-21T03:00:00Z'},
            {'available_seats': 301},
            {'total_seats': 0},
            {'total_seats': 10**19},
            {'price': 10**19},
            {'available_seats': 10**19},
        ],
    )
    def test_invalid_flight(self, client: TestClient, as_admin, overrides):
        response = client.post(ADMIN_FLIGHTS, json={**NEW_FLIGHT, **overrides}, headers=as_admin)

        assert response.status_code == 400
        assert response.json()['error'] == 'validation_error'

    def test_list_flights_newest_first(self, client: TestClient, as_admin):
        client.post(ADMIN_FLIGHTS, json=NEW_FLIGHT, headers=as_admin)

        response = client.get(ADMIN_FLIGHTS, headers=as_admin)

        flights = response.json()
        assert len(flights) == SAMPLE_FLIGHT_COUNT + 1
        assert flights[0]['flight_number'] == 'EK501'

    def test_update_status(self, client: TestClient, as_admin):
        ai101 = find_flight(client, 'AI101')

        response = client.patch(
            ADMIN_FLIGHT_STATUS.format(flight_id=ai101['id']),
            json={'status': 'delayed'},
            headers=as_admin,
        )

        assert response.status_code == 200
        assert response.json()['status'] == 'delayed'
        assert response.json()['available_seats'] == ai101['available_seats']

    def test_update_status_of_unknown_flight(self, client: TestClient, as_admin):
        response = client.patch(
            ADMIN_FLIGHT_STATUS.format(flight_id=9999), json={'status': 'delayed'}, headers=as_admin
        )

        assert response.status_code == 404

    def test_update_status_beyond_id_range(self, client: TestClient, as_admin):
        response = client.patch(
            ADMIN_FLIGHT_STATUS.format(flight_id=10**19),
            json={'status': 'delayed'},
            headers=as_admin,
        )

        assert response.status_code == 404
        assert response.json()['error'] == 'not_found'

    def test_update_status_rejects_unknown_value(self, client: TestClient, as_admin):
        response = client.patch(
            ADMIN_FLIGHT_STATUS.format(flight_id=1), json={'status': 'boarding'}, headers=as_admin
        )

        assert response.status_code == 400


@pytest.mark.integration
class TestAdminBookingsAndStats:
    def test_bookings_include_account(self, client: TestClient, as_traveler, as_admin):
        ai101 = find_flight(client, 'AI101')
        reserve(client, as_traveler, flight_id=ai101['id'], seat_count=1)

        response = client.get(ADMIN_BOOKINGS, headers=as_admin)

        bookings = response.json()
        assert len(bookings) == 1
        assert bookings[0]['account']['email'] == TRAVELER_EMAIL
        assert bookings[0]['flight']['flight_number'] == 'AI101'

    def test_empty_stats(self, client: TestClient, as_admin):
        response = client.get(ADMIN_STATS, headers=as_admin)

        assert response.json() == {
            'total_flights': SAMPLE_FLIGHT_COUNT,
            'total_bookings': 0,
            'total_users': 0,
            'total_revenue': 0,
        }

    def test_revenue_counts_confirmed_bookings(self, client: TestClient, as_traveler, as_admin):
        # Arrange
        ai101 = find_flight(client, 'AI101')
        ig401 = find_flight(client, 'IG401')
        kept = reserve(client, as_traveler, flight_id=ai101['id'], seat_count=2).json()
        dropped = reserve(client, as_traveler, flight_id=ig401['id'], seat_count=1).json()
        client.patch(f'{BOOKING_BASE}/{dropped["id"]}', headers=as_traveler)

        # Act
        stats = client.get(ADMIN_STATS, headers=as_admin).json()

        # Assert
        confirmed = [
            b for b in client.get(ADMIN_BOOKINGS, headers=as_admin).json()
            if b['status'] == 'confirmed'
        ]
        assert stats['total_revenue'] == sum(b['total_price'] for b in confirmed)
        assert stats['total_revenue'] == kept['total_price'] == 11000
        assert stats['total_bookings'] == 2
        assert stats['total_users'] == 1
        assert stats['total_flights'] == SAMPLE_FLIGHT_COUNT
