from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, InternalFailureError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_body(*, detail: Any, error_kind: str) -> dict[str, Any]:
    return {'detail': detail, 'error': error_kind}


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else InternalFailureError(str(exc))
    if error.status_code >= 500:
        # Internal details stay in the log
        Logger.base.opt(exception=exc).error(f'{request.method} {request.url.path}: {error}')
        return JSONResponse(
            status_code=error.status_code,
            content=_error_body(detail='Internal server error', error_kind=error.error_kind),
        )
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(detail=error.message, error_kind=error.error_kind),
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(detail=str(exc), error_kind='validation_error'),
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            detail=jsonable_encoder(error.errors()), error_kind='validation_error'
        ),
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'{request.method} {request.url.path}: storage failure {type(exc).__name__}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(detail='Internal server error', error_kind='internal_failure'),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'{request.method} {request.url.path}: unhandled {type(exc).__name__}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(detail='Internal server error', error_kind='internal_failure'),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    SQLAlchemyError: storage_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
