from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.flight_booking.domain.entity.booking_entity import BookingEntity


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: BookingEntity) -> BookingEntity:
        pass

    @abstractmethod
    async def pnr_exists(self, *, pnr: str) -> bool:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[BookingEntity]:
        pass

    @abstractmethod
    async def mark_cancelled(self, *, booking_id: UUID) -> Optional[BookingEntity]:
        """Flip confirmed -> cancelled. Returns None when the booking was not confirmed."""
        pass
