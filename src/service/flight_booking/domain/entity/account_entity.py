from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import DomainError, InvalidCredentialsError
from src.platform.types.utc_datetime import utc_now
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher


@attrs.define
class AccountEntity:
    email: str
    name: str
    phone: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    is_admin: bool = False
    created_at: Optional[datetime] = None

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @classmethod
    def create(
        cls,
        *,
        name: str,
        email: str,
        phone: str,
        plain_password: SecretStr,
        password_hasher: IPasswordHasher,
        is_admin: bool = False,
    ) -> 'AccountEntity':
        if not name.strip():
            raise DomainError('Name is required')
        if not email.strip():
            raise DomainError('Email is required')
        if not plain_password.get_secret_value():
            raise DomainError('Password is required')

        return cls(
            email=cls.normalize_email(email),
            name=name.strip(),
            phone=phone.strip(),
            hashed_password=password_hasher.hash_password(plain_password=plain_password),
            is_admin=is_admin,
            created_at=utc_now(),
        )

    def verify_password(self, *, plain_password: SecretStr, password_hasher: IPasswordHasher) -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=plain_password, hashed_password=self.hashed_password
        )

    @staticmethod
    def validate_credentials(
        account: Optional['AccountEntity'],
        *,
        plain_password: SecretStr,
        password_hasher: IPasswordHasher,
    ) -> 'AccountEntity':
        # Unknown email and wrong password raise the same error
        if account is None or not account.verify_password(
            plain_password=plain_password, password_hasher=password_hasher
        ):
            raise InvalidCredentialsError('Invalid credentials')
        return account
