"""
Session issuing and verification (stateless HS256 JWT)
"""

from datetime import datetime, timedelta, timezone
from functools import partial
from typing import Any, Dict, Optional

import anyio
import jwt
from pydantic import SecretStr

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError, InvalidSessionError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_account_query_repo import IAccountQueryRepo
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.domain.entity.account_entity import AccountEntity
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims


class JwtAuth:
    def __init__(self, *, settings: Settings) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, account: AccountEntity) -> str:
        if account.id is None:
            raise ValueError('Cannot issue a session for an unsaved account')

        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            'sub': str(account.id),
            'iat': now,
            'account_id': account.id,
            'is_admin': account.is_admin,
        }
        if self.expire_minutes is not None:
            payload['exp'] = now + timedelta(minutes=self.expire_minutes)

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise InvalidSessionError('Session expired') from e
        except jwt.PyJWTError as e:
            raise InvalidSessionError('Invalid token') from e

    def verify_session(self, token: Optional[str]) -> SessionClaims:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        account_id = payload.get('account_id')
        is_admin = payload.get('is_admin')
        if not isinstance(account_id, int) or not isinstance(is_admin, bool):
            raise InvalidSessionError('Invalid token')

        return SessionClaims(account_id=account_id, is_admin=is_admin)

    @Logger.io
    async def authenticate_account(
        self,
        *,
        account_query_repo: IAccountQueryRepo,
        password_hasher: IPasswordHasher,
        email: str,
        password: SecretStr,
    ) -> AccountEntity:
        account = await account_query_repo.get_by_email(
            email=AccountEntity.normalize_email(email)
        )
        # bcrypt is CPU bound; keep it off the event loop
        return await anyio.to_thread.run_sync(
            partial(
                AccountEntity.validate_credentials,
                account,
                plain_password=password,
                password_hasher=password_hasher,
            )
        )
