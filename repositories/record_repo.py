"""
repositories/record_repo.py
----------------------------
Generic data access for the flat record tables.
Every call runs exactly one parameterized statement on a pooled connection.
"""

from typing import Any, ClassVar

import psycopg2
from psycopg2 import extras

from db.connection import get_connection, release_connection
from utils.errors import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


class RecordRepository:
    """
    Base repository for a single table with an auto-generated `id`.

    Subclasses set:
        table: Table name.
        columns: Insertable columns, in bind order.
        model: Dataclass built from each returned row.
    """

    table: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]
    model: ClassVar[type]

    # ── CREATE ────────────────────────────────────────────

    def add(self, values: dict[str, Any]):
        """
        Insert a new row.

        Args:
            values: Validated field values keyed by column name.

        Returns:
            The stored record, including its generated `id`.

        Raises:
            PersistenceError: On any database failure. Nothing is written.
        """
        placeholders = ", ".join(["%s"] * len(self.columns))
        sql = (
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
            f"VALUES ({placeholders}) RETURNING *;"
        )
        params = tuple(values[column] for column in self.columns)

        conn = self._connect()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
            record = self._row_to_model(row)
            logger.info(f"Added {self.table} #{record.id}")
            return record
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to insert into {self.table}: {e}")
            raise PersistenceError(f"Insert into {self.table} failed") from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list:
        """
        Fetch every row of the table, in the database's natural order.

        Raises:
            PersistenceError: On connection loss or query failure.
        """
        sql = f"SELECT * FROM {self.table};"
        conn = self._connect()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql)
                rows = cur.fetchall()
            return [self._row_to_model(r) for r in rows]
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to fetch {self.table}: {e}")
            raise PersistenceError(f"Select from {self.table} failed") from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _connect(self):
        """Check a connection out of the pool, mapping pool failures."""
        try:
            return get_connection()
        except psycopg2.Error as e:
            logger.error(f"No database connection available for {self.table}: {e}")
            raise PersistenceError("Database connection unavailable") from e

    def _rollback(self, conn) -> None:
        """
        Roll back unless the connection is already gone.

        A rollback that fails (e.g. the server dropped the connection
        mid-statement) is logged; the original error is what gets reported.
        """
        if conn.closed:
            return
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback on {self.table} failed: {e}")

    def _row_to_model(self, row: dict):
        """Convert a RealDictCursor row to the repository's model."""
        return self.model(**{"id": row["id"], **{c: row[c] for c in self.columns}})
