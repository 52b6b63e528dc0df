import time
from functools import partial
from typing import Callable, NoReturn, Self, Tuple

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.constant.db_limit import fits_db_int
from src.platform.database.transient_retry import run_with_transient_retry
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    FlightNotBookableError,
    InsufficientInventoryError,
    InternalFailureError,
    InvalidSessionError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.platform.state.flight_lock_registry import FlightLockRegistry
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.domain.entity.booking_entity import BookingEntity
from src.service.flight_booking.domain.entity.flight_entity import FlightEntity
from src.service.flight_booking.domain.seat_allocator import SeatAllocator
from src.service.flight_booking.domain.value_object.passenger_info import PassengerInfo
from src.service.flight_booking.domain.value_object.reservation_ref import generate_pnr


_PNR_DRAWS_PER_ATTEMPT = 10
_GENERATED_KEYS = ('pnr',)


class ReserveSeatsUseCase:
    """
    Reserve seats on a flight - the ledger's critical section

    Flow (one unit of work, retried as a whole on transient storage faults):
    1. Conditional UPDATE decrements available_seats only if the flight is
       bookable and has enough seats (check and act are one statement)
    2. No row updated -> re-read to pick NotFound / FlightNotBookable / InsufficientInventory
    3. Confirm the session account still exists
    4. Allocate seat labels from the sold-seat counter
    5. Draw a PNR not yet in use
    6. Insert the booking and commit together with the decrement

    Requests for the same flight queue on the in-process FlightLockRegistry; once
    the unit starts it is shielded from request cancellation so it either commits
    or rolls back completely.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        lock_registry: FlightLockRegistry,
        settings: Settings,
    ) -> None:
        self.uow_factory = uow_factory
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
        lock_registry: FlightLockRegistry = Depends(Provide[Container.flight_lock_registry]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow_factory=uow_factory, lock_registry=lock_registry, settings=settings)

    @Logger.io
    async def reserve(
        self,
        *,
        account_id: int,
        flight_id: int,
        passenger: PassengerInfo,
        seat_count: int,
    ) -> BookingDetail:
        if seat_count <= 0:
            raise DomainError('Seat count must be positive')
        if not fits_db_int(flight_id):
            raise NotFoundError('Flight not found')

        started = time.perf_counter()
        result = 'error'
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={
                'account.id': account_id,
                'flight.id': flight_id,
                'booking.seat_count': seat_count,
            },
        ) as span:
            try:
                async with self.lock_registry.hold(flight_id=flight_id):
                    with anyio.CancelScope(shield=True):
                        booking, flight = await run_with_transient_retry(
                            partial(
                                self._reserve_once,
                                account_id=account_id,
                                flight_id=flight_id,
                                passenger=passenger,
                                seat_count=seat_count,
                            ),
                            label='reserve_seats',
                            max_attempts=self.max_attempts,
                            backoff_seconds=self.backoff_seconds,
                            generated_keys=_GENERATED_KEYS,
                        )
                result = 'success'
            except CustomBaseError as e:
                result = e.error_kind
                raise
            finally:
                metrics.record_seat_reservation(
                    result=result,
                    duration=time.perf_counter() - started,
                    seat_count=seat_count if result == 'success' else 0,
                )

            span.set_attribute('booking.pnr', booking.pnr)
            metrics.update_seat_availability(
                flight_number=flight.flight_number,
                available_seats=flight.available_seats,
                total_seats=flight.total_seats,
            )
            Logger.base.info(
                f'🎫 [RESERVE] pnr={booking.pnr} flight={flight.flight_number} '
                f'seats={booking.seat_numbers} available={flight.available_seats}'
            )
            return BookingDetail(booking=booking, flight=flight)

    async def _reserve_once(
        self,
        *,
        account_id: int,
        flight_id: int,
        passenger: PassengerInfo,
        seat_count: int,
    ) -> Tuple[BookingEntity, FlightEntity]:
        async with self.uow_factory() as uow:
            # Write first: the transaction takes the row/write lock before any read
            flight = await uow.flight_command_repo.reserve_seats(
                flight_id=flight_id, seat_count=seat_count
            )
            if flight is None:
                await self._raise_rejection(uow=uow, flight_id=flight_id, seat_count=seat_count)

            if not await uow.account_command_repo.exists_by_id(account_id=account_id):
                # Signed token for an account that no longer resolves
                raise InvalidSessionError('Session account not found')

            seat_numbers = SeatAllocator.allocate_after_decrement(
                total_seats=flight.total_seats,
                available_after=flight.available_seats,
                seat_count=seat_count,
            )
            booking = BookingEntity.create(
                account_id=account_id,
                flight=flight,
                passenger=passenger,
                seat_numbers=seat_numbers,
                pnr=await self._draw_unused_pnr(uow=uow),
            )
            booking = await uow.booking_command_repo.create(booking=booking)
            await uow.commit()
            return booking, flight

    @staticmethod
    async def _raise_rejection(
        *, uow: AbstractUnitOfWork, flight_id: int, seat_count: int
    ) -> NoReturn:
        current = await uow.flight_command_repo.get_by_id(flight_id=flight_id)
        if current is None:
            raise NotFoundError('Flight not found')
        if not current.is_bookable:
            raise FlightNotBookableError(f'Flight {current.flight_number} is {current.status.value}')
        raise InsufficientInventoryError(
            f'Not enough seats available: requested {seat_count}, '
            f'available {current.available_seats}'
        )

    @staticmethod
    async def _draw_unused_pnr(*, uow: AbstractUnitOfWork) -> str:
        for _ in range(_PNR_DRAWS_PER_ATTEMPT):
            pnr = generate_pnr()
            if not await uow.booking_command_repo.pnr_exists(pnr=pnr):
                return pnr
        raise InternalFailureError('Could not allocate a reservation reference')
