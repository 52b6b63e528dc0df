from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.flight_booking.domain.entity.flight_entity import FlightEntity, FlightStatus


class IFlightCommandRepo(ABC):
    """Flight Command Repository - the only writer of flight rows"""

    @abstractmethod
    async def create(self, *, flight: FlightEntity) -> FlightEntity:
        """Insert the flight; raises DuplicateFlightError on a flight_number unique violation."""
        pass

    @abstractmethod
    async def create_many(self, *, flights: List[FlightEntity]) -> List[FlightEntity]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def get_by_id(self, *, flight_id: int) -> Optional[FlightEntity]:
        """Read inside the current transaction."""
        pass

    @abstractmethod
    async def update_status(self, *, flight_id: int, status: FlightStatus) -> Optional[FlightEntity]:
        pass

    @abstractmethod
    async def reserve_seats(self, *, flight_id: int, seat_count: int) -> Optional[FlightEntity]:
        """
        Conditional decrement: succeeds only when the flight is bookable and has
        at least `seat_count` seats. Returns the post-decrement flight, or None.
        """
        pass

    @abstractmethod
    async def release_seats(self, *, flight_id: int, seat_count: int) -> Optional[FlightEntity]:
        """Conditional increment bounded by total_seats. Returns None when nothing changed."""
        pass
