from unittest.mock import AsyncMock

import jwt
import pytest
from pydantic import SecretStr

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    InvalidSessionError,
)
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


SECRET = 'unit-test-secret-key-with-enough-length!'


def _jwt_auth(**overrides) -> JwtAuth:
    return JwtAuth(settings=Settings(_env_file=None, SECRET_KEY=SecretStr(SECRET), **overrides))


@pytest.fixture
def traveler() -> AccountEntity:
    return AccountEntity(id=2, email='asha@flights.com', name='Asha Rao')


@pytest.mark.unit
class TestJwtAuth:
    def test_token_round_trip(self, traveler):
        auth = _jwt_auth()

        claims = auth.verify_session(auth.create_jwt_token(traveler))

        assert claims == SessionClaims(account_id=2, is_admin=False)

    def test_admin_flag_is_carried(self):
        auth = _jwt_auth()
        admin = AccountEntity(id=1, email='admin@flights.com', name='Admin', is_admin=True)

        assert auth.verify_session(auth.create_jwt_token(admin)).is_admin is True

    def test_session_has_no_expiry_by_default(self, traveler):
        auth = _jwt_auth()

        assert auth.expire_minutes is None
        assert 'exp' not in auth.decode_jwt_token(auth.create_jwt_token(traveler))

    def test_configured_lifetime_sets_expiry(self, traveler):
        auth = _jwt_auth(ACCESS_TOKEN_EXPIRE_MINUTES=7 * 24 * 60)

        payload = auth.decode_jwt_token(auth.create_jwt_token(traveler))

        assert payload['exp'] - payload['iat'] == 7 * 24 * 60 * 60

    def test_expired_token(self, traveler):
        auth = _jwt_auth(ACCESS_TOKEN_EXPIRE_MINUTES=-1)

        with pytest.raises(InvalidSessionError, match='Session expired'):
            auth.verify_session(auth.create_jwt_token(traveler))

    def test_token_signed_with_other_key(self, traveler):
        forged = jwt.encode(
            {'sub': '2', 'account_id': 2, 'is_admin': True},
            'another-secret-key-with-enough-length!!',
            algorithm='HS256',
        )

        with pytest.raises(InvalidSessionError, match='Invalid token'):
            _jwt_auth().verify_session(forged)

    def test_token_missing_claims(self):
        token = jwt.encode({'sub': '2'}, SECRET, algorithm='HS256')

        with pytest.raises(InvalidSessionError):
            _jwt_auth().verify_session(token)

    @pytest.mark.parametrize('token', [None, ''])
    def test_missing_token(self, token):
        with pytest.raises(AuthenticationError, match='Not authenticated'):
            _jwt_auth().verify_session(token)

    def test_unsaved_account_has_no_session(self):
        with pytest.raises(ValueError):
            _jwt_auth().create_jwt_token(AccountEntity(email='asha@flights.com', name='Asha'))


@pytest.mark.unit
class TestAuthenticateAccount:
    @pytest.fixture(scope='class')
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=4)

    @pytest.fixture
    def account_query_repo(self, password_hasher) -> AsyncMock:
        account = AccountEntity(
            id=2,
            email='asha@flights.com',
            name='Asha Rao',
            hashed_password=password_hasher.hash_password(plain_password=SecretStr('P@ssw0rd')),
        )
        repo = AsyncMock()
        repo.get_by_email = AsyncMock(
            side_effect=lambda *, email: account if email == account.email else None
        )
        return repo

    async def test_valid_credentials(self, account_query_repo, password_hasher):
        account = await _jwt_auth().authenticate_account(
            account_query_repo=account_query_repo,
            password_hasher=password_hasher,
            email='ASHA@flights.com',
            password=SecretStr('P@ssw0rd'),
        )

        assert account.id == 2

    @pytest.mark.parametrize(
        'email, password',
        [('asha@flights.com', 'wrong-pass'), ('nobody@flights.com', 'P@ssw0rd')],
    )
    async def test_invalid_credentials(self, account_query_repo, password_hasher, email, password):
        with pytest.raises(InvalidCredentialsError, match='Invalid credentials'):
            await _jwt_auth().authenticate_account(
                account_query_repo=account_query_repo,
                password_hasher=password_hasher,
                email=email,
                password=SecretStr(password),
            )
