from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.flight_booking.app.dto.booking_detail import BookingDetail


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[BookingDetail]:
        pass

    @abstractmethod
    async def get_by_pnr(self, *, pnr: str) -> Optional[BookingDetail]:
        pass

    @abstractmethod
    async def list_for_account(self, *, account_id: int) -> List[BookingDetail]:
        """Newest first, joined with the flight's current fields."""
        pass

    @abstractmethod
    async def list_all(self) -> List[BookingDetail]:
        """Newest first, joined with flight and account fields."""
        pass
