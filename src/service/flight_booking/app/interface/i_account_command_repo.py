from abc import ABC, abstractmethod

from src.service.flight_booking.domain.entity.account_entity import AccountEntity


class IAccountCommandRepo(ABC):
    """Account Command Repository - write side, bound to the unit of work session"""

    @abstractmethod
    async def create(self, *, account: AccountEntity) -> AccountEntity:
        """Insert the account; raises DuplicateAccountError on an email unique violation."""
        pass

    @abstractmethod
    async def exists_by_email(self, *, email: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_id(self, *, account_id: int) -> bool:
        pass
