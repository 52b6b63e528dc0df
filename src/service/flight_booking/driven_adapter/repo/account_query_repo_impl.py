from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_account_query_repo import IAccountQueryRepo
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.driven_adapter.model.account_model import AccountModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import to_account_entity


class AccountQueryRepoImpl(IAccountQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[AccountEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(AccountModel).where(AccountModel.email == email))
            account_model = result.scalar_one_or_none()
            return to_account_entity(account_model) if account_model else None

    @Logger.io
    async def get_by_id(self, *, account_id: int) -> Optional[AccountEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AccountModel).where(AccountModel.id == account_id)
            )
            account_model = result.scalar_one_or_none()
            return to_account_entity(account_model) if account_model else None
