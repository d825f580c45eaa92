import asyncio
import os

import psycopg
import pytest
from psycopg import sql

from app.config.settings import Settings
from app.database.connection import build_conninfo

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    id BIGSERIAL PRIMARY KEY,
    image_url TEXT NOT NULL,
    analysis TEXT NOT NULL,
    processed_at TIMESTAMPTZ NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "materials_test")
    return Settings(records_table="material_analysis_test")


async def _prepare_database(settings: Settings) -> None:
    async with await psycopg.AsyncConnection.connect(
        build_conninfo(settings), connect_timeout=3
    ) as conn:
        await conn.execute(
            sql.SQL(CREATE_TABLE_SQL).format(
                table=sql.Identifier(settings.records_table)
            )
        )
        await conn.commit()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def database_settings(test_settings: Settings) -> Settings:
    """Settings for a reachable PostgreSQL with the results table created."""
    try:
        asyncio.run(_prepare_database(test_settings))
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    return test_settings
