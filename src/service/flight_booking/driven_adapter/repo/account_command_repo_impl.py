from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DuplicateAccountError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_account_command_repo import IAccountCommandRepo
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.driven_adapter.model.account_model import AccountModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import to_account_entity


class AccountCommandRepoImpl(IAccountCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, account: AccountEntity) -> AccountEntity:
        account_model = AccountModel(
            email=account.email,
            hashed_password=account.hashed_password,
            name=account.name,
            phone=account.phone,
            is_admin=account.is_admin,
            created_at=account.created_at,
        )
        self.session.add(account_model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Unique index on email is the final arbiter for concurrent registrations
            if 'email' in str(e.orig).lower():
                raise DuplicateAccountError(f'Account with email {account.email} already exists') from e
            raise

        return to_account_entity(account_model)

    @Logger.io
    async def exists_by_email(self, *, email: str) -> bool:
        result = await self.session.execute(
            select(AccountModel.id).where(AccountModel.email == email)
        )
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def exists_by_id(self, *, account_id: int) -> bool:
        result = await self.session.execute(
            select(AccountModel.id).where(AccountModel.id == account_id)
        )
        return result.scalar_one_or_none() is not None
