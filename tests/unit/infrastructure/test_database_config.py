"""Tests for engine creation and schema initialization."""
import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from core.infrastructure.database.config import create_engine, init_database
from core.settings import DatabaseSettings


def test_sqlite_engine_uses_static_pool():
    engine = create_engine(DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))

    assert isinstance(engine.sync_engine.pool, StaticPool)


@pytest.mark.asyncio
async def test_init_database_creates_tables():
    engine = create_engine(DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))
    try:
        await init_database(engine)

        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    finally:
        await engine.dispose()

    assert {"categories", "products", "users", "orders", "order_items"} <= set(tables)
