import asyncio
from datetime import datetime, timezone

from psycopg import sql

from app.config.settings import Settings
from app.database.connection import close_pool, get_connection, init_pool
from app.database.repositories.material_analysis_repository import MaterialAnalysisRepository
from app.intake.models import PersistedRecord


async def _insert_and_fetch(settings: Settings, record: PersistedRecord) -> tuple[int, object]:
    await init_pool(settings)
    try:
        repo = MaterialAnalysisRepository(settings.records_table)
        record_id = await repo.insert(record)
        found = await repo.find_by_id(record_id)
        async with get_connection() as conn:
            await conn.execute(
                sql.SQL("DELETE FROM {table} WHERE id = %s").format(
                    table=sql.Identifier(settings.records_table)
                ),
                (record_id,),
            )
            await conn.commit()
        return record_id, found
    finally:
        await close_pool()


class TestMaterialAnalysisRepositoryIntegration:
    def test_insert_then_find(self, database_settings: Settings) -> None:
        processed_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        record = PersistedRecord(
            image_url="https://cdn.example.com/uploads/1-photo.jpg",
            analysis="1) Materials Identified\nGlass",
            processed_at=processed_at,
        )

        record_id, found = asyncio.run(_insert_and_fetch(database_settings, record))

        assert record_id > 0
        assert found is not None
        assert found.image_url == record.image_url
        assert found.analysis == record.analysis
        assert found.processed_at == processed_at
        assert found.created_at is not None
