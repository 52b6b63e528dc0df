from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.flight_booking.driven_adapter.model.account_model import AccountModel
from src.service.flight_booking.driven_adapter.model.booking_model import BookingModel
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import (
    to_account_summary,
    to_booking_entity,
    to_flight_entity,
)


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _with_flight() -> Select:
        return select(BookingModel, FlightModel).join(
            FlightModel, FlightModel.id == BookingModel.flight_id
        )

    @staticmethod
    def _newest_first(stmt: Select) -> Select:
        return stmt.order_by(BookingModel.booked_at.desc(), BookingModel.id.desc())

    async def _fetch_one(self, stmt: Select) -> Optional[BookingDetail]:
        async with self.session_factory() as session:
            row = (await session.execute(stmt)).one_or_none()
            if row is None:
                return None
            booking_model, flight_model = row
            return BookingDetail(
                booking=to_booking_entity(booking_model), flight=to_flight_entity(flight_model)
            )

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[BookingDetail]:
        return await self._fetch_one(self._with_flight().where(BookingModel.id == booking_id))

    @Logger.io
    async def get_by_pnr(self, *, pnr: str) -> Optional[BookingDetail]:
        return await self._fetch_one(self._with_flight().where(BookingModel.pnr == pnr))

    @Logger.io
    async def list_for_account(self, *, account_id: int) -> List[BookingDetail]:
        stmt = self._newest_first(self._with_flight().where(BookingModel.account_id == account_id))
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                BookingDetail(
                    booking=to_booking_entity(booking_model),
                    flight=to_flight_entity(flight_model),
                )
                for booking_model, flight_model in result.all()
            ]

    @Logger.io
    async def list_all(self) -> List[BookingDetail]:
        stmt = self._newest_first(
            select(BookingModel, FlightModel, AccountModel)
            .join(FlightModel, FlightModel.id == BookingModel.flight_id)
            .join(AccountModel, AccountModel.id == BookingModel.account_id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                BookingDetail(
                    booking=to_booking_entity(booking_model),
                    flight=to_flight_entity(flight_model),
                    account=to_account_summary(account_model),
                )
                for booking_model, flight_model, account_model in result.all()
            ]
