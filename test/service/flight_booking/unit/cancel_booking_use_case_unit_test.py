"""
Unit tests for CancelBookingUseCase

Test Focus:
1. Owner (or admin) cancels a confirmed booking; seats go back to the flight
2. Fail Fast: booking not found, someone else's booking, not confirmed
. Seats that cannot be restored abort the whole cancel
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import (
    BookingNotCancellableError,
    ForbiddenError,
    InternalFailureError,
    NotFoundError,
)
from src.platform.state.flight_lock_registry import FlightLockRegistry
from src.service.flight_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.domain.entity.booking_entity import BookingStatus
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from test.shared.factories import BOOKING_ID, FakeUnitOfWork, make_booking, make_flight


OWNER = SessionClaims(account_id=2)


@pytest.mark.unit
class TestCancelBooking:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()
        uow.booking_command_repo.get_by_id = AsyncMock(return_value=make_booking())
        uow.booking_command_repo.mark_cancelled = AsyncMock(
            return_value=make_booking(status=BookingStatus.CANCELLED)
        )
        uow.flight_command_repo.release_seats = AsyncMock(
            return_value=make_flight(available_seats=150)
        )
        return uow

    @pytest.fixture
    def booking_query_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(return_value=BookingDetail(booking=make_booking()))
        return repo

    @pytest.fixture
    def use_case(self, uow, booking_query_repo) -> CancelBookingUseCase:
        return CancelBookingUseCase(
            uow_factory=lambda: uow,
            booking_query_repo=booking_query_repo,
            lock_registry=FlightLockRegistry(),
            settings=Settings(DB_TRANSIENT_RETRY_BACKOFF_SECONDS=0),
        )

    async def test_owner_cancels_and_seats_are_restored(self, use_case, uow):
        """
        Given: confirmed booking of 2 seats owned by account 2
        When: account 2 cancels it
        Then: status is cancelled and 2 seats are released on flight 1
        """
        # Act
        detail = await use_case.cancel(booking_id=BOOKING_ID, requester=OWNER)

        # Assert
        assert detail.booking.status == BookingStatus.CANCELLED
        assert detail.flight.available_seats == 150
        uow.flight_command_repo.release_seats.assert_awaited_once_with(flight_id=1, seat_count=2)
        assert uow.commits == 1

    async def test_admin_may_cancel_any_booking(self, use_case, uow):
        detail = await use_case.cancel(
            booking_id=BOOKING_ID, requester=SessionClaims(account_id=1, is_admin=True)
        )

        assert detail.booking.status == BookingStatus.CANCELLED

    async def test_booking_not_found(self, use_case, booking_query_repo, uow):
        booking_query_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match='Booking not found'):
            await use_case.cancel(booking_id=BOOKING_ID, requester=OWNER)
        uow.booking_command_repo.mark_cancelled.assert_not_called()

    async def test_other_traveler_is_forbidden(self, use_case, uow):
        with pytest.raises(ForbiddenError):
            await use_case.cancel(booking_id=BOOKING_ID, requester=SessionClaims(account_id=3))
        uow.booking_command_repo.mark_cancelled.assert_not_called()

    async def test_already_cancelled(self, use_case, uow):
        uow.booking_command_repo.get_by_id = AsyncMock(
            return_value=make_booking(status=BookingStatus.CANCELLED)
        )

        with pytest.raises(BookingNotCancellableError):
            await use_case.cancel(booking_id=BOOKING_ID, requester=OWNER)
        uow.flight_command_repo.release_seats.assert_not_called()
        assert uow.commits == 0

    async def test_losing_racing_cancel_restores_nothing(self, use_case, uow):
        # Arrange: the other request flipped the status first
        uow.booking_command_repo.mark_cancelled = AsyncMock(return_value=None)

        # Act & Assert
        with pytest.raises(BookingNotCancellableError, match='no longer confirmed'):
            await use_case.cancel(booking_id=BOOKING_ID, requester=OWNER)
        uow.flight_command_repo.release_seats.assert_not_called()
        assert uow.commits == 0

    async def test_unrestorable_seats_abort_cancel(self, use_case, uow):
        """
        Given: the seat restore matches no row (it would exceed total seats)
        When: the owner cancels
        Then: the unit is rolled back, so the booking stays confirmed
        """
        # Arrange
        uow.flight_command_repo.release_seats = AsyncMock(return_value=None)

        # Act & Assert
        with pytest.raises(InternalFailureError, match='could not be cancelled'):
            await use_case.cancel(booking_id=BOOKING_ID, requester=OWNER)
        uow.booking_command_repo.mark_cancelled.assert_awaited_once()
        assert uow.commits == 0
        assert uow.rollbacks == 1
