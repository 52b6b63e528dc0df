"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    ACCOUNT_BASE,
    ADMIN_BASE,
    BOOKING_BASE,
    FLIGHT_BASE,
    SESSION_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.flight_booking.driving_adapter.http_controller.account_controller import (
    router as account_router,
)
from src.service.flight_booking.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.flight_booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.flight_booking.driving_adapter.http_controller.flight_controller import (
    router as flight_router,
)
from src.service.flight_booking.driving_adapter.http_controller.session_controller import (
    router as session_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Flight inventory and booking engine',
    service_name: str = 'flight-booking',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(account_router, prefix=ACCOUNT_BASE, tags=['account'])
    app.include_router(session_router, prefix=SESSION_BASE, tags=['session'])
    app.include_router(flight_router, prefix=FLIGHT_BASE, tags=['flight'])
    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])
    app.include_router(admin_router, prefix=ADMIN_BASE, tags=['admin'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
