"""
Catalog FastAPI app factory, shared by src.main and the test app.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import EVENT_BASE, HEALTH, VENUE_BASE
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.catalog.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from src.service.catalog.driving_adapter.http_controller.venue_controller import (
    router as venue_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Venue and event catalog',
) -> FastAPI:
    """
    Build the catalog app: CORS, error handlers, the two submission routers,
    and the stored media mounted at `/{MEDIA_BUCKET}`.

    Public URLs handed out by the media storage resolve against that mount.
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['GET', 'POST'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    app.include_router(venue_router, prefix=VENUE_BASE, tags=['venue'])
    app.include_router(event_router, prefix=EVENT_BASE, tags=['event'])
    _mount_media(app, settings.MEDIA_BUCKET_DIR)

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app


def _mount_media(app: FastAPI, directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    app.mount(
        f'/{settings.MEDIA_BUCKET}',
        StaticFiles(directory=str(directory)),
        name='media',
    )
