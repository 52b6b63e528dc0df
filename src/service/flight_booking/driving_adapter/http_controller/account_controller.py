from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.register_account_use_case import (
    RegisterAccountUseCase,
)
from src.service.flight_booking.app.query.account_query_use_case import AccountQueryUseCase
from src.service.flight_booking.domain.value_object.session_claims import SessionClaims
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.account_schema import (
    AccountResponse,
    RegisterAccountRequest,
    SessionResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register_account(
    request: RegisterAccountRequest,
    use_case: RegisterAccountUseCase = Depends(RegisterAccountUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SessionResponse:
    account = await use_case.register(
        name=request.name,
        email=request.email,
        password=request.password,
        phone=request.phone,
    )
    return SessionResponse(
        token=jwt_auth.create_jwt_token(account),
        account=AccountResponse.model_validate(account),
    )


@router.get('/me')
@Logger.io
async def get_me(
    session: SessionClaims = Depends(get_current_session),
    use_case: AccountQueryUseCase = Depends(AccountQueryUseCase.depends),
) -> AccountResponse:
    account = await use_case.get_me(account_id=session.account_id)
    return AccountResponse.model_validate(account)
