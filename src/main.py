"""
Production FastAPI Application

Run with: granian src.main:app --interface asgi
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Catalog] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Catalog] Dependency injection wired')

    database = container.database()
    if settings.DEBUG:
        # Schema is managed by alembic outside of DEBUG
        await database.create_db_and_tables()
    Logger.base.info('🗄️  [Catalog] Database ready')

    try:
        yield
    finally:
        Logger.base.info('🛑 [Catalog] Shutting down...')
        await database.dispose()
        container.unwire()
        cleanup()
        Logger.base.info('👋 [Catalog] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
