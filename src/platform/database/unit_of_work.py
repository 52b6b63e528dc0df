"""
Unit of Work Pattern - one transaction shared by the command repositories

Architecture:
- UoW owns the session lifecycle (one session per `async with` block)
- UoW owns commit/rollback; leaving the block without commit rolls back
- Command repositories receive the shared session from the UoW
- Use cases coordinate several repositories inside one UoW block

A UoW instance may be re-entered after the previous block exits, which is how
use cases retry a whole atomic unit after a transient storage fault.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


if TYPE_CHECKING:
    from src.service.flight_booking.app.interface.i_account_command_repo import (
        IAccountCommandRepo,
    )
    from src.service.flight_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.flight_booking.app.interface.i_flight_command_repo import (
        IFlightCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking engine

    Usage:
        async with uow:
            flight = await uow.flight_command_repo.reserve_seats(flight_id=1, seat_count=2)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    account_command_repo: IAccountCommandRepo
    flight_command_repo: IFlightCommandRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.flight_booking.driven_adapter.repo.account_command_repo_impl import (
            AccountCommandRepoImpl,
        )
        from src.service.flight_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.flight_booking.driven_adapter.repo.flight_command_repo_impl import (
            FlightCommandRepoImpl,
        )

        self.session = self._session_maker()
        self.account_command_repo = AccountCommandRepoImpl(session=self.session)
        self.flight_command_repo = FlightCommandRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of `async with`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
