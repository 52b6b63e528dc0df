from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.flight_booking.domain.entity.flight_entity import FlightEntity


class IFlightQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, flight_id: int) -> Optional[FlightEntity]:
        pass

    @abstractmethod
    async def search(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        departure_from: Optional[datetime] = None,
        departure_until: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[FlightEntity]:
        """Active flights only, departure ascending; the departure window is half-open."""
        pass

    @abstractmethod
    async def list_all(self) -> List[FlightEntity]:
        pass
