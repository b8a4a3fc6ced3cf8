from collections.abc import AsyncGenerator

import pytest

from src.platform.database.orm_db_setting import Database


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Database bound to this test's event loop; the schema comes from alembic."""
    db = Database()
    yield db
    await db.dispose()
