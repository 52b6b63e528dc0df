from abc import ABC, abstractmethod

from src.service.flight_booking.app.dto.admin_stats import AdminStats


class IStatsQueryRepo(ABC):
    @abstractmethod
    async def get_stats(self) -> AdminStats:
        """All four figures from a single statement."""
        pass
