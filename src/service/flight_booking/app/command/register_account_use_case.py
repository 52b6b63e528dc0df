from functools import partial
from typing import Callable, Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DuplicateAccountError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.domain.entity.account_entity import AccountEntity


class RegisterAccountUseCase:
    """
    Register a traveler account

    The email pre-check gives the common case a clean error; the unique index on
    account.email settles concurrent registrations (surfaced as DuplicateAccountError
    by the repository).
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.uow_factory = uow_factory
        self.password_hasher = password_hasher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(uow_factory=uow_factory, password_hasher=password_hasher)

    @Logger.io
    async def register(
        self,
        *,
        name: str,
        email: str,
        password: SecretStr,
        phone: str,
        is_admin: bool = False,
    ) -> AccountEntity:
        with self.tracer.start_as_current_span('use_case.register_account'):
            # Hash before opening the transaction; bcrypt is slow on purpose
            account = await anyio.to_thread.run_sync(
                partial(
                    AccountEntity.create,
                    name=name,
                    email=email,
                    phone=phone,
                    plain_password=password,
                    password_hasher=self.password_hasher,
                    is_admin=is_admin,
                )
            )

            async with self.uow_factory() as uow:
                if await uow.account_command_repo.exists_by_email(email=account.email):
                    raise DuplicateAccountError(f'Account with email {account.email} already exists')
                created = await uow.account_command_repo.create(account=account)
                await uow.commit()

            Logger.base.info(f'👤 [REGISTER] account={created.id} is_admin={created.is_admin}')
            return created
