from functools import partial
from typing import Callable

import anyio

from src.platform.config.core_setting import Settings
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DuplicateAccountError, DuplicateFlightError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.domain.sample_catalog import build_sample_flights


class BootstrapUseCase:
    """
    Startup seeding, safe to run on every boot.

    - Administrator account: created only when its email is absent; a concurrent
      boot that wins the unique index leaves us with nothing to do.
    - Sample catalog: seeded only into an empty flight table; a flight_number
      collision from a concurrent boot means it is already seeded.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        password_hasher: IPasswordHasher,
        settings: Settings,
    ) -> None:
        self.uow_factory = uow_factory
        self.password_hasher = password_hasher
        self.settings = settings

    @Logger.io
    async def run(self) -> None:
        if self.settings.BOOTSTRAP_ADMIN:
            await self.ensure_admin()
        if self.settings.SEED_SAMPLE_FLIGHTS:
            await self.ensure_sample_catalog()

    async def ensure_admin(self) -> bool:
        email = AccountEntity.normalize_email(self.settings.ADMIN_EMAIL)
        async with self.uow_factory() as uow:
            if await uow.account_command_repo.exists_by_email(email=email):
                Logger.base.info(f'👑 [BOOTSTRAP] Admin {email} already present')
                return False

        admin = await anyio.to_thread.run_sync(
            partial(
                AccountEntity.create,
                name=self.settings.ADMIN_NAME,
                email=email,
                phone=self.settings.ADMIN_PHONE,
                plain_password=self.settings.ADMIN_PASSWORD,
                password_hasher=self.password_hasher,
                is_admin=True,
            )
        )
        try:
            async with self.uow_factory() as uow:
                await uow.account_command_repo.create(account=admin)
                await uow.commit()
        except DuplicateAccountError:
            Logger.base.info(f'👑 [BOOTSTRAP] Admin {email} created concurrently')
            return False

        Logger.base.info(f'👑 [BOOTSTRAP] Admin {email} created')
        return True

    async def ensure_sample_catalog(self) -> int:
        try:
            async with self.uow_factory() as uow:
                if await uow.flight_command_repo.count():
                    Logger.base.info('🗂️  [BOOTSTRAP] Flight catalog not empty, skip seeding')
                    return 0
                created = await uow.flight_command_repo.create_many(flights=build_sample_flights())
                await uow.commit()
        except DuplicateFlightError:
            Logger.base.info('🗂️  [BOOTSTRAP] Sample flights seeded concurrently')
            return 0

        Logger.base.info(f'🗂️  [BOOTSTRAP] Seeded {len(created)} sample flights')
        return len(created)
