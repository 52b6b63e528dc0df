"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.state.flight_lock_registry import FlightLockRegistry
from src.service.flight_booking.driven_adapter.repo.account_query_repo_impl import (
    AccountQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.stats_query_repo_impl import (
    StatsQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine + session maker built lazily from config_service)
    database = providers.Singleton(Database, settings=config_service)

    # Unit of work: a fresh instance (and session) per atomic unit
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_maker=database.provided.session_maker
    )

    # Query repositories (stateless - use session_factory per call)
    account_query_repo = providers.Singleton(
        AccountQueryRepoImpl, session_factory=database.provided.session
    )
    flight_query_repo = providers.Singleton(
        FlightQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    stats_query_repo = providers.Singleton(
        StatsQueryRepoImpl, session_factory=database.provided.session
    )

    # Security
    password_hasher = providers.Singleton(
        BcryptPasswordHasher, rounds=config_service.provided.BCRYPT_ROUNDS
    )
    jwt_auth = providers.Singleton(JwtAuth, settings=config_service)

    # Per-flight in-process serialisation of reserve / cancel
    flight_lock_registry = providers.Singleton(FlightLockRegistry)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
