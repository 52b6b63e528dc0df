import pytest
from pydantic import SecretStr

from src.platform.exception.exceptions import DomainError, InvalidCredentialsError
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.fixture(scope='module')
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.mark.unit
class TestAccountEntity:
    def test_create_hashes_password_and_normalizes_email(self, password_hasher):
        # Act
        account = AccountEntity.create(
            name='Asha Rao',
            email='  Asha@Flights.COM ',
            phone='+919876543210',
            plain_password=SecretStr('P@ssw0rd'),
            password_hasher=password_hasher,
        )

        # Assert
        assert account.email == 'asha@flights.com'
        assert account.hashed_password.startswith('$2')
        assert 'P@ssw0rd' not in account.hashed_password
        assert 'hashed_password' not in repr(account)
        assert account.is_admin is False

    def test_create_requires_name(self, password_hasher):
        with pytest.raises(DomainError, match='Name is required'):
            AccountEntity.create(
                name=' ',
                email='asha@flights.com',
                phone='',
                plain_password=SecretStr('P@ssw0rd'),
                password_hasher=password_hasher,
            )

    def test_validate_credentials(self, password_hasher):
        account = AccountEntity.create(
            name='Asha Rao',
            email='asha@flights.com',
            phone='',
            plain_password=SecretStr('P@ssw0rd'),
            password_hasher=password_hasher,
        )

        assert (
            AccountEntity.validate_credentials(
                account, plain_password=SecretStr('P@ssw0rd'), password_hasher=password_hasher
            )
            is account
        )
        with pytest.raises(InvalidCredentialsError):
            AccountEntity.validate_credentials(
                account, plain_password=SecretStr('wrong-pass'), password_hasher=password_hasher
            )

    def test_unknown_account_gives_same_error(self, password_hasher):
        with pytest.raises(InvalidCredentialsError, match='Invalid credentials'):
            AccountEntity.validate_credentials(
                None, plain_password=SecretStr('P@ssw0rd'), password_hasher=password_hasher
            )

    def test_malformed_stored_hash_never_verifies(self, password_hasher):
        account = AccountEntity(email='asha@flights.com', name='Asha', hashed_password='not-bcrypt')

        assert not account.verify_password(
            plain_password=SecretStr('P@ssw0rd'), password_hasher=password_hasher
        )
