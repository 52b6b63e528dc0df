from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Self, Tuple
from zoneinfo import ZoneInfo

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.constant.db_limit import fits_db_int
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity


MAX_SEARCH_LIMIT = 500


class FlightQueryUseCase:
    def __init__(self, *, flight_query_repo: IFlightQueryRepo, settings: Settings) -> None:
        self.flight_query_repo = flight_query_repo
        self.catalog_timezone = ZoneInfo(settings.CATALOG_TIMEZONE)

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(flight_query_repo=flight_query_repo, settings=settings)

    def departure_window(self, day: date) -> Tuple[datetime, datetime]:
        """[day 00:00, day+1 00:00) in the catalog time zone, expressed in UTC."""
        start = datetime.combine(day, time.min, tzinfo=self.catalog_timezone)
        end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=self.catalog_timezone)
        return start.astimezone(timezone.utc), end.astimezone(timezone.utc)

    @Logger.io
    async def search(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        day: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[FlightEntity]:
        if limit is not None and not 1 <= limit <= MAX_SEARCH_LIMIT:
            raise DomainError(f'limit must be between 1 and {MAX_SEARCH_LIMIT}')

        departure_from = departure_until = None
        if day is not None:
            departure_from, departure_until = self.departure_window(day)

        return await self.flight_query_repo.search(
            origin=origin.strip() if origin else None,
            destination=destination.strip() if destination else None,
            departure_from=departure_from,
            departure_until=departure_until,
            limit=limit,
        )

    @Logger.io
    async def get_flight(self, *, flight_id: int) -> FlightEntity:
        if not fits_db_int(flight_id):
            raise NotFoundError('Flight not found')
        flight = await self.flight_query_repo.get_by_id(flight_id=flight_id)
        if flight is None:
            raise NotFoundError('Flight not found')
        return flight

    @Logger.io
    async def list_all(self) -> List[FlightEntity]:
        return await self.flight_query_repo.list_all()
