"""
Test Configuration and Fixtures

This module provides:
- Early environment setup so module-level settings and the logger pick up test values
- A fresh SQLite database per test (the container's Settings is overridden)
- The TestClient fixture, entered as a context manager so the lifespan runs
  (schema creation, admin bootstrap, sample catalog)
- Session helpers for the bootstrap admin and a registered traveler

Architecture:
- Unit tests (test/**/unit/): mocks only, never touch the `client` fixture
- Integration tests (test/**/integration/): real app against a temporary SQLite file
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# src.platform.config.core_setting builds `settings` at import time and the
# loguru sinks are configured from it
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    scratch_db = Path(tempfile.gettempdir()) / 'flight_booking_test_bootstrap.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{scratch_db}'
    os.environ['DEBUG'] = 'false'
    os.environ['BCRYPT_ROUNDS'] = '4'
    os.environ.setdefault('SERVICE_NAME', 'flight-booking-test')
    os.environ.setdefault('DEPLOY_ENV', 'test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pydantic import SecretStr  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from test.shared.utils import auth_header, login, register_account  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    ANOTHER_TRAVELER_EMAIL,
    ANOTHER_TRAVELER_NAME,
    DEFAULT_PASSWORD,
    TRAVELER_EMAIL,
    TRAVELER_NAME,
)


# =============================================================================
# Settings / Container override
# =============================================================================
@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f'sqlite+aiosqlite:///{tmp_path / "flight_booking.db"}',
        DEBUG=False,
        BCRYPT_ROUNDS=4,
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=SecretStr(ADMIN_PASSWORD),
        DB_TRANSIENT_RETRY_BACKOFF_SECONDS=0.01,
    )


@pytest.fixture
def override_settings(test_settings: Settings) -> Generator[Settings, None, None]:
    container.reset_singletons()
    with container.config_service.override(providers.Object(test_settings)):
        yield test_settings
    container.reset_singletons()


# =============================================================================
# HTTP Client
# =============================================================================
@pytest.fixture
def client(override_settings: Settings) -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client: TestClient) -> str:
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def traveler(client: TestClient) -> dict[str, Any]:
    return register_account(client, email=TRAVELER_EMAIL, name=TRAVELER_NAME)


@pytest.fixture
def traveler_token(traveler: dict[str, Any]) -> str:
    return traveler['token']


@pytest.fixture
def another_traveler_token(client: TestClient) -> str:
    return register_account(client, email=ANOTHER_TRAVELER_EMAIL, name=ANOTHER_TRAVELER_NAME)[
        'token'
    ]


@pytest.fixture
def as_traveler(traveler_token: str) -> dict[str, str]:
    return auth_header(traveler_token)


@pytest.fixture
def as_admin(admin_token: str) -> dict[str, str]:
    return auth_header(admin_token)


@pytest.fixture
def login_as(client: TestClient) -> Callable[[str, str], str]:
    def _login(email: str, password: str = DEFAULT_PASSWORD) -> str:
        return login(client, email, password)

    return _login
