from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.constant.db_limit import fits_db_int
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus


class UpdateFlightStatusUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(uow_factory=uow_factory)

    @Logger.io
    async def update_status(self, *, flight_id: int, status: FlightStatus) -> FlightEntity:
        if not fits_db_int(flight_id):
            raise NotFoundError('Flight not found')
        async with self.uow_factory() as uow:
            flight = await uow.flight_command_repo.update_status(flight_id=flight_id, status=status)
            if flight is None:
                raise NotFoundError('Flight not found')
            await uow.commit()

        Logger.base.info(f'🛫 [FLIGHT_STATUS] {flight.flight_number} -> {status.value}')
        return flight
