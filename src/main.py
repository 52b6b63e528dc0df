"""
Production FastAPI Application

    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.flight_booking.app.command.bootstrap_use_case import BootstrapUseCase


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Flight Booking] Starting up...')

    tracing = TracingConfig(service_name='flight-booking')
    tracing.setup()
    Logger.base.info('📊 [Flight Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Flight Booking] Dependency injection wired')

    database = container.database()
    tracing.instrument_sqlalchemy(engine=database.engine)

    settings = container.config_service()
    if not settings.SKIP_DB_INIT:
        await create_db_and_tables(database)

    await BootstrapUseCase(
        uow_factory=container.unit_of_work,
        password_hasher=container.password_hasher(),
        settings=settings,
    ).run()
    Logger.base.info('✅ [Flight Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Flight Booking] Shutting down...')
    await database.dispose()
    tracing.shutdown()
    container.unwire()
    Logger.base.info('👋 [Flight Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
