from datetime import datetime
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus


class CreateFlightUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory
        self.tracer = trace.get_tracer(__name__)

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
    async def create_flight(
        self,
        *,
        flight_number: str,
        airline: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        arrival_time: datetime,
        price: int,
        total_seats: int,
        aircraft: str,
        available_seats: Optional[int] = None,
        duration: Optional[str] = None,
        status: FlightStatus = FlightStatus.ACTIVE,
    ) -> FlightEntity:
        """
        Create a flight listing (admin only; gated at the router)

        Raises:
            DomainError: arrival not after departure, non-positive capacity,
                negative price, identical endpoints, or available seats out of range
            DuplicateFlightError: flight_number already listed
        """
        with self.tracer.start_as_current_span(
            'use_case.create_flight', attributes={'flight.number': flight_number}
        ):
            flight = FlightEntity.create(
                flight_number=flight_number,
                airline=airline,
                origin=origin,
                destination=destination,
                departure_time=departure_time,
                arrival_time=arrival_time,
                price=price,
                total_seats=total_seats,
                available_seats=available_seats,
                aircraft=aircraft,
                duration=duration,
                status=status,
            )

            async with self.uow_factory() as uow:
                created = await uow.flight_command_repo.create(flight=flight)
                await uow.commit()

            Logger.base.info(
                f'✈️  [CREATE_FLIGHT] {created.flight_number} id={created.id} '
                f'seats={created.available_seats}/{created.total_seats}'
            )
            return created
