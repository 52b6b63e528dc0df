from typing import AsyncContextManager, Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.dto.admin_stats import AdminStats
from src.service.flight_booking.app.interface.i_stats_query_repo import IStatsQueryRepo
from src.service.flight_booking.domain.entity.booking_entity import BookingStatus
from src.service.flight_booking.driven_adapter.model.account_model import AccountModel
from src.service.flight_booking.driven_adapter.model.booking_model import BookingModel
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel


class StatsQueryRepoImpl(IStatsQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_stats(self) -> AdminStats:
        # One statement so a concurrent reservation is counted entirely or not at all
        stmt = select(
            select(func.count(FlightModel.id)).scalar_subquery().label('total_flights'),
            select(func.count(BookingModel.id)).scalar_subquery().label('total_bookings'),
            select(func.count(AccountModel.id))
            .where(AccountModel.is_admin.is_(False))
            .scalar_subquery()
            .label('total_users'),
            select(func.coalesce(func.sum(BookingModel.total_price), 0))
            .where(BookingModel.status == BookingStatus.CONFIRMED.value)
            .scalar_subquery()
            .label('total_revenue'),
        )
        async with self.session_factory() as session:
            row = (await session.execute(stmt)).one()
            return AdminStats(
                total_flights=int(row.total_flights),
                total_bookings=int(row.total_bookings),
                total_users=int(row.total_users),
                total_revenue=int(row.total_revenue),
            )
