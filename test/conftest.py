"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database and media root for the whole run
- Schema setup through alembic and table cleanup between integration tests
- The HTTP test client and token helpers for organizers/attendees
- BDD step definitions (imported from bdd_steps_loader.py)
- Service fixtures (imported from fixture_loader.py)

Architecture:
- Unit tests (@pytest.mark.unit): mocks only, no database or files
- Integration tests: real SQLite database, real local object storage
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Point the database, media root and logs at test locations before any app import."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    run_dir = Path(tempfile.mkdtemp(prefix=f'catalog_test_{worker_id}_'))

    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{run_dir / "catalog_test.db"}'
    os.environ['MEDIA_ROOT'] = str(run_dir / 'storage')
    os.environ['MEDIA_PUBLIC_BASE_URL'] = 'http://testserver'
    os.environ.setdefault('DEBUG', 'true')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['LOG_DIR'] = str(test_log_dir)
    os.environ['LOG_FILE_PREFIX'] = 'test_'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
import shutil  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import Base  # noqa: E402
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth  # noqa: E402
from test.util_constant import (  # noqa: E402
    ATTENDEE_USER_ID,
    ORGANIZER_USER_ID,
)


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames[:0] = ['clean_database', 'clean_media', 'clean_list_caches']


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _sync_engine() -> Any:
    return create_engine(settings.DATABASE_URL_SYNC)


def _setup_test_database() -> None:
    alembic_cfg = Config(str(Path(__file__).parent.parent / 'alembic.ini'))
    command.upgrade(alembic_cfg, 'head')


def _clean_all_tables() -> None:
    import src.service.catalog.driven_adapter.model  # noqa: F401

    engine = _sync_engine()
    try:
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())
    finally:
        engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


@pytest.fixture(scope='function')
def clean_media() -> Generator[None, None, None]:
    yield
    shutil.rmtree(settings.MEDIA_BUCKET_DIR, ignore_errors=True)
    settings.MEDIA_BUCKET_DIR.mkdir(parents=True, exist_ok=True)


@pytest.fixture(scope='function')
def clean_list_caches() -> Generator[None, None, None]:
    from src.platform.config.di import container

    container.venue_list_cache().invalidate()
    container.event_list_cache().invalidate()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    # Lazily get client to avoid creating it for unit tests
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = _sync_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
        finally:
            engine.dispose()
        return None

    return _execute


@pytest.fixture
def grant_role(execute_sql_statement: Callable[..., Any]) -> Callable[[str, str], None]:
    def _grant(user_id: str, role: str) -> None:
        execute_sql_statement(
            'INSERT INTO user_roles (user_id, role) VALUES (:user_id, :role)',
            {'user_id': user_id, 'role': role},
        )

    return _grant


@pytest.fixture
def bearer_token() -> Callable[[str], str]:
    jwt_auth = JwtAuth()

    def _token(user_id: str) -> str:
        return jwt_auth.create_jwt_token(user_id)

    return _token


@pytest.fixture
def organizer_headers(
    grant_role: Callable[[str, str], None], bearer_token: Callable[[str], str]
) -> dict[str, str]:
    grant_role(ORGANIZER_USER_ID, 'organizer')
    return {'Authorization': f'Bearer {bearer_token(ORGANIZER_USER_ID)}'}


@pytest.fixture
def attendee_headers(
    grant_role: Callable[[str, str], None], bearer_token: Callable[[str], str]
) -> dict[str, str]:
    grant_role(ATTENDEE_USER_ID, 'attendee')
    return {'Authorization': f'Bearer {bearer_token(ATTENDEE_USER_ID)}'}


# =============================================================================
# Load BDD steps and service fixtures
# =============================================================================
from test.bdd_steps_loader import *  # noqa: E402, F401, F403
from test.fixture_loader import *  # noqa: E402, F401, F403
