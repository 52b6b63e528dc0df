from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import to_flight_entity


_LIKE_ESCAPE = '\\'


def _contains_pattern(value: str) -> str:
    """Substring LIKE pattern with the user's own wildcards taken literally."""
    escaped = (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace('%', f'{_LIKE_ESCAPE}%')
        .replace('_', f'{_LIKE_ESCAPE}_')
    )
    return f'%{escaped}%'


class FlightQueryRepoImpl(IFlightQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, flight_id: int) -> Optional[FlightEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(FlightModel).where(FlightModel.id == flight_id))
            flight_model = result.scalar_one_or_none()
            return to_flight_entity(flight_model) if flight_model else None

    @Logger.io
    async def search(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        departure_from: Optional[datetime] = None,
        departure_until: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[FlightEntity]:
        stmt = select(FlightModel).where(FlightModel.status == FlightStatus.ACTIVE.value)

        if origin:
            stmt = stmt.where(FlightModel.origin.ilike(_contains_pattern(origin), escape=_LIKE_ESCAPE))
        if destination:
            stmt = stmt.where(
                FlightModel.destination.ilike(_contains_pattern(destination), escape=_LIKE_ESCAPE)
            )
        if departure_from is not None:
            stmt = stmt.where(FlightModel.departure_time >= departure_from)
        if departure_until is not None:
            stmt = stmt.where(FlightModel.departure_time < departure_until)

        stmt = stmt.order_by(FlightModel.departure_time.asc(), FlightModel.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [to_flight_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def list_all(self) -> List[FlightEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(FlightModel).order_by(FlightModel.created_at.desc(), FlightModel.id.desc())
            )
            return [to_flight_entity(model) for model in result.scalars().all()]
