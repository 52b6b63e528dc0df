from datetime import date, datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DomainError, ForbiddenError, NotFoundError
from src.service.flight_booking.app.dto.booking_detail import BookingDetail
from src.service.flight_booking.app.query.booking_query_use_case import BookingQueryUseCase
from src.service.flight_booking.app.query.flight_query_use_case import FlightQueryUseCase
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from test.shared.factories import make_booking, make_flight


@pytest.mark.unit
class TestFlightQuery:
    @pytest.fixture
    def repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.search = AsyncMock(return_value=[make_flight()])
        return repo

    def test_departure_window_in_utc_catalog(self, repo):
        use_case = FlightQueryUseCase(flight_query_repo=repo, settings=Settings())

        start, end = use_case.departure_window(date(2024, 3, 20))

        assert start == datetime(2024, 3, 20, tzinfo=timezone.utc)
        assert end == datetime(2024, 3, 21, tzinfo=timezone.utc)

    def test_departure_window_follows_catalog_timezone(self, repo):
        use_case = FlightQueryUseCase(
            flight_query_repo=repo, settings=Settings(CATALOG_TIMEZONE='Asia/Kolkata')
        )

        start, end = use_case.departure_window(date(2024, 3, 20))

        assert start == datetime(2024, 3, 19, 18, 30, tzinfo=timezone.utc)
        assert end == datetime(2024, 3, 20, 18, 30, tzinfo=timezone.utc)

    async def test_search_passes_trimmed_filters_and_window(self, repo):
        # Arrange
        use_case = FlightQueryUseCase(flight_query_repo=repo, settings=Settings())

        # Act
        flights = await use_case.search(origin=' Delhi ', destination='Mumbai', day=date(2024, 3, 20))

        # Assert
        assert [f.flight_number for f in flights] == ['AI101']
        repo.search.assert_awaited_once_with(
            origin='Delhi',
            destination='Mumbai',
            departure_from=datetime(2024, 3, 20, tzinfo=timezone.utc),
            departure_until=datetime(2024, 3, 21, tzinfo=timezone.utc),
            limit=None,
        )

    async def test_search_without_filters(self, repo):
        await FlightQueryUseCase(flight_query_repo=repo, settings=Settings()).search()

        repo.search.assert_awaited_once_with(
            origin=None, destination=None, departure_from=None, departure_until=None, limit=None
        )

    async def test_search_limit_out_of_range(self, repo):
        with pytest.raises(DomainError, match='limit'):
            await FlightQueryUseCase(flight_query_repo=repo, settings=Settings()).search(limit=0)

    async def test_get_missing_flight(self, repo):
        repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match='Flight not found'):
            await FlightQueryUseCase(flight_query_repo=repo, settings=Settings()).get_flight(
                flight_id=99
            )

    @pytest.mark.parametrize('flight_id', [2**31, 10**19, -(2**31) - 1])
    async def test_id_outside_column_range_is_not_found(self, repo, flight_id):
        with pytest.raises(NotFoundError, match='Flight not found'):
            await FlightQueryUseCase(flight_query_repo=repo, settings=Settings()).get_flight(
                flight_id=flight_id
            )
        repo.get_by_id.assert_not_called()


@pytest.mark.unit
class TestBookingQuery:
    @pytest.fixture
    def repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_by_pnr = AsyncMock(
            return_value=BookingDetail(booking=make_booking(account_id=2), flight=make_flight())
        )
        return repo

    async def test_lookup_is_case_insensitive(self, repo):
        detail = await BookingQueryUseCase(booking_query_repo=repo).get_by_reference(
            pnr=' k7q2xm ', requester=SessionClaims(account_id=2)
        )

        assert detail.booking.pnr == 'K7Q2XM'
        repo.get_by_pnr.assert_awaited_once_with(pnr='K7Q2XM')

    async def test_malformed_reference_is_not_found(self, repo):
        with pytest.raises(NotFoundError):
            await BookingQueryUseCase(booking_query_repo=repo).get_by_reference(
                pnr='nope', requester=SessionClaims(account_id=2)
            )
        repo.get_by_pnr.assert_not_called()

    async def test_other_traveler_is_forbidden(self, repo):
        with pytest.raises(ForbiddenError):
            await BookingQueryUseCase(booking_query_repo=repo).get_by_reference(
                pnr='K7Q2XM', requester=SessionClaims(account_id=3)
            )

    async def test_admin_sees_any_booking(self, repo):
        detail = await BookingQueryUseCase(booking_query_repo=repo).get_by_reference(
            pnr='K7Q2XM', requester=SessionClaims(account_id=1, is_admin=True)
        )

        assert detail.booking.account_id == 2
