from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    ACCOUNT_REGISTER,
    BOOKING_CREATE,
    FLIGHT_SEARCH,
    SESSION_LOGIN,
)
from test.util_constant import DEFAULT_PASSWORD, DEFAULT_PHONE


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def auth_header(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def register_account(
    client: TestClient,
    *,
    email: str,
    name: str,
    password: str = DEFAULT_PASSWORD,
    phone: str = DEFAULT_PHONE,
) -> Dict[str, Any]:
    response = client.post(
        ACCOUNT_REGISTER,
        json={'name': name, 'email': email, 'password': password, 'phone': phone},
    )
    assert_response_status(response, 201, f'Failed to register {email}')
    return response.json()


def login(client: TestClient, email: str, password: str) -> str:
    """Helper function to login and return the bearer token."""
    response = client.post(SESSION_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed for {email}')
    return response.json()['token']


def find_flight(client: TestClient, flight_number: str) -> Dict[str, Any]:
    response = client.get(FLIGHT_SEARCH)
    assert_response_status(response, 200)
    for flight in response.json():
        if flight['flight_number'] == flight_number:
            return flight
    raise AssertionError(f'Flight {flight_number} not in catalog')


def reserve(
    client: TestClient,
    headers: Dict[str, str],
    *,
    flight_id: int,
    seat_count: int,
    passenger_name: str = 'Asha Rao',
    passenger_email: str = 'asha@flights.com',
    passenger_phone: Optional[str] = DEFAULT_PHONE,
) -> Any:
    return client.post(
        BOOKING_CREATE,
        json={
            'flight_id': flight_id,
            'passenger_name': passenger_name,
            'passenger_email': passenger_email,
            'passenger_phone': passenger_phone,
            'seat_count': seat_count,
        },
        headers=headers,
    )
