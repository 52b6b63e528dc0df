from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# auto_error=False so a missing header maps to our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SessionClaims:
    """Stateless: resolves the bearer token without a database lookup."""
    return jwt_auth.verify_session(credentials.credentials if credentials else None)


async def require_admin(
    session: SessionClaims = Depends(get_current_session),
) -> SessionClaims:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'account.id': session.account_id,
            'account.is_admin': session.is_admin,
        },
    ):
        if not session.is_admin:
            raise ForbiddenError('Admin access required')
        return session
