from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.entity.account_entity import AccountEntity


class IAccountQueryRepo(ABC):
    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[AccountEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, account_id: int) -> Optional[AccountEntity]:
        pass
