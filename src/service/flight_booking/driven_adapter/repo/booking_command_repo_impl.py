from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.flight_booking.domain.entity.booking_entity import BookingEntity, BookingStatus
from src.service.flight_booking.driven_adapter.model.booking_model import BookingModel
from src.service.flight_booking.driven_adapter.repo.model_mapper import to_booking_entity


_booking_table = BookingModel.__table__


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, booking: BookingEntity) -> BookingEntity:
        booking_model = BookingModel(
            id=booking.id,
            account_id=booking.account_id,
            flight_id=booking.flight_id,
            passenger_name=booking.passenger_name,
            passenger_email=booking.passenger_email,
            passenger_phone=booking.passenger_phone,
            seat_numbers=list(booking.seat_numbers),
            total_price=booking.total_price,
            status=booking.status.value,
            pnr=booking.pnr,
            booked_at=booking.booked_at,
        )
        self.session.add(booking_model)
        # A PNR unique violation surfaces here as IntegrityError and is retried by the caller
        await self.session.flush()
        return to_booking_entity(booking_model)

    @Logger.io
    async def pnr_exists(self, *, pnr: str) -> bool:
        result = await self.session.execute(
            select(_booking_table.c.id).where(_booking_table.c.pnr == pnr)
        )
        return result.first() is not None

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[BookingEntity]:
        result = await self.session.execute(
            select(_booking_table).where(_booking_table.c.id == booking_id)
        )
        row = result.one_or_none()
        return to_booking_entity(row) if row else None

    @Logger.io
    async def mark_cancelled(self, *, booking_id: UUID) -> Optional[BookingEntity]:
        result = await self.session.execute(
            update(_booking_table)
            .where(
                _booking_table.c.id == booking_id,
                _booking_table.c.status == BookingStatus.CONFIRMED.value,
            )
            .values(status=BookingStatus.CANCELLED.value)
            .returning(*_booking_table.c)
        )
        row = result.one_or_none()
        return to_booking_entity(row) if row else None
