import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.models import MaterialAnalysisRecord
from app.intake.exceptions import PersistenceError
from app.intake.models import PersistedRecord


class MaterialAnalysisRepository:
    """Database operations for the analysis results table."""

    def __init__(self, table: str = "material_analysis") -> None:
        self._table = sql.Identifier(table)

    async def insert(self, record: PersistedRecord) -> int:
        """Insert one analysis record and return its id.

        Raises:
            PersistenceError: on any database error, carrying the driver message,
                or when the connection pool has not been opened.
        """
        query = sql.SQL(
            """
            INSERT INTO {table} (image_url, analysis, processed_at)
            VALUES (%s, %s, %s)
            RETURNING id
            """
        ).format(table=self._table)
        try:
            async with get_connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        query,
                        (record.image_url, record.analysis, record.processed_at),
                    )
                    row = await cur.fetchone()
                await conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(str(exc)) from exc
        except RuntimeError as exc:
            raise PersistenceError("Result store is not connected") from exc

        if row is None:
            raise PersistenceError("Insert returned no id")
        return int(row[0])

    async def find_by_id(self, record_id: int) -> MaterialAnalysisRecord | None:
        """Find a record by ID. Useful for tests."""
        query = sql.SQL(
            """
            SELECT id, image_url, analysis, processed_at, created_at
            FROM {table}
            WHERE id = %s
            """
        ).format(table=self._table)
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(query, (record_id,))
                row = await cur.fetchone()

        if row is None:
            return None

        return MaterialAnalysisRecord(
            id=row["id"],
            image_url=row["image_url"],
            analysis=row["analysis"],
            processed_at=row["processed_at"],
            created_at=row["created_at"],
        )
