from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.flight_booking.domain.value_object.reservation_ref import (
    is_valid_pnr,
    normalize_pnr,
)
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims


class BookingQueryUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_for_account(self, *, account_id: int) -> List[BookingDetail]:
        return await self.booking_query_repo.list_for_account(account_id=account_id)

    @Logger.io
    async def list_all(self) -> List[BookingDetail]:
        return await self.booking_query_repo.list_all()

    @Logger.io
    async def get_by_reference(self, *, pnr: str, requester: SessionClaims) -> BookingDetail:
        pnr = normalize_pnr(pnr)
        detail = await self.booking_query_repo.get_by_pnr(pnr=pnr) if is_valid_pnr(pnr) else None
        if detail is None:
            raise NotFoundError('Booking not found')
        detail.booking.ensure_visible_to(
            account_id=requester.account_id, is_admin=requester.is_admin
        )
        return detail
