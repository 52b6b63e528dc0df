from functools import partial
from typing import Callable, Self, Tuple
from uuid import UUID

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.transient_retry import run_with_transient_retry
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    BookingNotCancellableError,
    CustomBaseError,
    InternalFailureError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.platform.state.flight_lock_registry import FlightLockRegistry
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.flight_booking.domain.entity.booking_entity import BookingEntity
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims


class CancelBookingUseCase:
    """
    Cancel a confirmed booking and give its seats back, atomically.

    The status flip is conditional on `confirmed`, so of two racing cancels only
    one updates a row; the loser gets BookingNotCancellableError and restores nothing.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        booking_query_repo: IBookingQueryRepo,
        lock_registry: FlightLockRegistry,
        settings: Settings,
    ) -> None:
        self.uow_factory = uow_factory
        self.booking_query_repo = booking_query_repo
        self.lock_registry = lock_registry
        self.max_attempts = settings.DB_TRANSIENT_RETRY_ATTEMPTS
        self.backoff_seconds = settings.DB_TRANSIENT_RETRY_BACKOFF_SECONDS
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        lock_registry: FlightLockRegistry = Depends(Provide[Container.flight_lock_registry]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            uow_factory=uow_factory,
            booking_query_repo=booking_query_repo,
            lock_registry=lock_registry,
            settings=settings,
        )

    @Logger.io
    async def cancel(self, *, booking_id: UUID, requester: SessionClaims) -> BookingDetail:
        with self.tracer.start_as_current_span(
            'use_case.cancel_booking',
            attributes={'booking.id': str(booking_id), 'account.id': requester.account_id},
        ):
            # Resolve the flight to lock on; ownership is re-checked inside the unit
            existing = await self.booking_query_repo.get_by_id(booking_id=booking_id)
            if existing is None:
                raise NotFoundError('Booking not found')
            existing.booking.ensure_visible_to(
                account_id=requester.account_id, is_admin=requester.is_admin
            )

            try:
                async with self.lock_registry.hold(flight_id=existing.booking.flight_id):
                    with anyio.CancelScope(shield=True):
                        booking, flight = await run_with_transient_retry(
                            partial(self._cancel_once, booking_id=booking_id, requester=requester),
                            label='cancel_booking',
                            max_attempts=self.max_attempts,
                            backoff_seconds=self.backoff_seconds,
                        )
            except CustomBaseError as e:
                metrics.record_cancellation(result=e.error_kind)
                raise

            metrics.record_cancellation(result='success')
            Logger.base.info(
                f'↩️  [CANCEL] pnr={booking.pnr} released={booking.seat_count} '
                f'available={flight.available_seats}'
            )
            return BookingDetail(booking=booking, flight=flight)

    async def _cancel_once(
        self, *, booking_id: UUID, requester: SessionClaims
    ) -> Tuple[BookingEntity, FlightEntity]:
        async with self.uow_factory() as uow:
            booking = await uow.booking_command_repo.get_by_id(booking_id=booking_id)
            if booking is None:
                raise NotFoundError('Booking not found')
            booking.ensure_visible_to(account_id=requester.account_id, is_admin=requester.is_admin)
            booking.ensure_cancellable()

            cancelled = await uow.booking_command_repo.mark_cancelled(booking_id=booking_id)
            if cancelled is None:
                raise BookingNotCancellableError(f'Booking {booking.pnr} is no longer confirmed')

            flight = await uow.flight_command_repo.release_seats(
                flight_id=cancelled.flight_id, seat_count=cancelled.seat_count
            )
            if flight is None:
                # Leaving the unit uncommitted rolls the status flip back
                Logger.base.error(
                    f'❌ [CANCEL] pnr={cancelled.pnr} seats could not be restored to flight '
                    f'{cancelled.flight_id}'
                )
                raise InternalFailureError(f'Booking {cancelled.pnr} could not be cancelled')

            await uow.commit()
            return cancelled, flight
