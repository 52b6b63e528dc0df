from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DuplicateFlightError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import to_flight_entity


_flight_table = FlightModel.__table__


class FlightCommandRepoImpl(IFlightCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _entity_to_model(flight: FlightEntity) -> FlightModel:
        return FlightModel(
            flight_number=flight.flight_number,
            airline=flight.airline,
            origin=flight.origin,
            destination=flight.destination,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            duration=flight.duration,
            price=flight.price,
            total_seats=flight.total_seats,
            available_seats=flight.available_seats,
            aircraft=flight.aircraft,
            status=flight.status.value,
            created_at=flight.created_at,
        )

    async def _flush_or_duplicate(self, *, flight_numbers: List[str]) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            if 'flight_number' in str(e.orig).lower():
                raise DuplicateFlightError(
                    f'Flight {", ".join(flight_numbers)} already exists'
                ) from e
            raise

    @Logger.io
    async def create(self, *, flight: FlightEntity) -> FlightEntity:
        flight_model = self._entity_to_model(flight)
        self.session.add(flight_model)
        await self._flush_or_duplicate(flight_numbers=[flight.flight_number])
        return to_flight_entity(flight_model)

    @Logger.io
    async def create_many(self, *, flights: List[FlightEntity]) -> List[FlightEntity]:
        flight_models = [self._entity_to_model(flight) for flight in flights]
        self.session.add_all(flight_models)
        await self._flush_or_duplicate(flight_numbers=[f.flight_number for f in flights])
        return [to_flight_entity(model) for model in flight_models]

    @Logger.io
    async def count(self) -> int:
        result = await self.session.execute(select(func.count(FlightModel.id)))
        return result.scalar_one()

    @Logger.io
    async def get_by_id(self, *, flight_id: int) -> Optional[FlightEntity]:
        result = await self.session.execute(select(_flight_table).where(_flight_table.c.id == flight_id))
        row = result.one_or_none()
        return to_flight_entity(row) if row else None

    @Logger.io
    async def update_status(self, *, flight_id: int, status: FlightStatus) -> Optional[FlightEntity]:
        result = await self.session.execute(
            update(_flight_table)
            .where(_flight_table.c.id == flight_id)
            .values(status=status.value)
            .returning(*_flight_table.c)
        )
        row = result.one_or_none()
        return to_flight_entity(row) if row else None

    @Logger.io
    async def reserve_seats(self, *, flight_id: int, seat_count: int) -> Optional[FlightEntity]:
        # Availability check and decrement in one statement
        result = await self.session.execute(
            update(_flight_table)
            .where(
                _flight_table.c.id == flight_id,
                _flight_table.c.status != FlightStatus.CANCELLED.value,
                _flight_table.c.available_seats >= seat_count,
            )
            .values(available_seats=_flight_table.c.available_seats - seat_count)
            .returning(*_flight_table.c)
        )
        row = result.one_or_none()
        return to_flight_entity(row) if row else None

    @Logger.io
    async def release_seats(self, *, flight_id: int, seat_count: int) -> Optional[FlightEntity]:
        result = await self.session.execute(
            update(_flight_table)
            .where(
                _flight_table.c.id == flight_id,
                _flight_table.c.available_seats + seat_count <= _flight_table.c.total_seats,
            )
            .values(available_seats=_flight_table.c.available_seats + seat_count)
            .returning(*_flight_table.c)
        )
        row = result.one_or_none()
        return to_flight_entity(row) if row else None
