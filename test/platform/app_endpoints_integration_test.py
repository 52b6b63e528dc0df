from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import ACCOUNT_ME, ADMIN_FLIGHTS
from test.shared.utils import auth_header, find_flight, login, reserve
from test.util_constant import ADMIN_EMAIL, ADMIN_PASSWORD, SAMPLE_FLIGHT_COUNT


@pytest.mark.integration
class TestCommonEndpoints:
    def test_startup_bootstraps_admin_and_sample_catalog(self, client: TestClient):
        """
        Given: a fresh database
        When: the app starts through its lifespan
        Then: the configured administrator can sign in and sees the seeded catalog
        """
        # Act
        headers = auth_header(login(client, ADMIN_EMAIL, ADMIN_PASSWORD))

        # Assert
        me = client.get(ACCOUNT_ME, headers=headers).json()
        assert me['email'] == ADMIN_EMAIL
        assert me['is_admin'] is True
        assert len(client.get(ADMIN_FLIGHTS, headers=headers).json()) == SAMPLE_FLIGHT_COUNT

    def test_health(self, client: TestClient):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_root_redirects_to_docs(self, client: TestClient):
        response = client.get('/', follow_redirects=False)

        assert response.status_code in (302, 307)
        assert response.headers['location'] == '/docs'

    def test_metrics_expose_reservation_counters(self, client: TestClient, as_traveler):
        ai101 = find_flight(client, 'AI101')
        reserve(client, as_traveler, flight_id=ai101['id'], seat_count=1)
        reserve(client, as_traveler, flight_id=ai101['id'], seat_count=1000)

        body = client.get('/metrics').text

        assert 'seat_reservation_requests_total{result="success"}' in body
        assert 'seat_reservation_requests_total{result="insufficient_inventory"}' in body
        assert 'seat_availability_ratio{flight_number="AI101"}' in body
