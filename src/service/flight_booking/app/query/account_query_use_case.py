from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidSessionError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_account_query_repo import IAccountQueryRepo
from src.service.flight_booking.domain.entity.account_entity import AccountEntity


class AccountQueryUseCase:
    def __init__(self, *, account_query_repo: IAccountQueryRepo) -> None:
        self.account_query_repo = account_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        account_query_repo: IAccountQueryRepo = Depends(Provide[Container.account_query_repo]),
    ) -> Self:
        return cls(account_query_repo=account_query_repo)

    @Logger.io
    async def get_me(self, *, account_id: int) -> AccountEntity:
        account = await self.account_query_repo.get_by_id(account_id=account_id)
        if account is None:
            # Signed token for an account that no longer resolves
            raise InvalidSessionError('Session account not found')
        return account
