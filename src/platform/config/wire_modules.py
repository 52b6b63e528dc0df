"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.flight_booking.app.command import (
    cancel_booking_use_case,
    create_flight_use_case,
    register_account_use_case,
    reserve_seats_use_case,
    update_flight_status_use_case,
)
from src.service.flight_booking.app.query import (
    account_query_use_case,
    admin_stats_use_case,
    booking_query_use_case,
    flight_query_use_case,
)
from src.service.flight_booking.driving_adapter.http_controller import (
    account_controller,
    session_controller,
)
from src.service.flight_booking.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    register_account_use_case,
    create_flight_use_case,
    update_flight_status_use_case,
    reserve_seats_use_case,
    cancel_booking_use_case,
    account_query_use_case,
    flight_query_use_case,
    booking_query_use_case,
    admin_stats_use_case,
    account_controller,
    session_controller,
    role_auth,
]
