from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_account_query_repo import IAccountQueryRepo
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.flight_booking.driving_adapter.http_controller.schema.account_schema import (
    AccountResponse,
    LoginRequest,
    SessionResponse,
)


router = APIRouter()


@router.post('')
@Logger.io
@inject
async def login(
    request: LoginRequest,
    account_query_repo: IAccountQueryRepo = Depends(Provide[Container.account_query_repo]),
    password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SessionResponse:
    account = await jwt_auth.authenticate_account(
        account_query_repo=account_query_repo,
        password_hasher=password_hasher,
        email=request.email,
        password=request.password,
    )
    return SessionResponse(
        token=jwt_auth.create_jwt_token(account),
        account=AccountResponse.model_validate(account),
    )
