"""Unit tests for the schema bootstrapper."""

import re
from unittest.mock import MagicMock

import psycopg2
import pytest

from db import init_db
from utils.errors import BootstrapError


@pytest.fixture
def db(monkeypatch, mock_conn):
    release = MagicMock()
    monkeypatch.setattr(init_db, "get_connection", lambda: mock_conn)
    monkeypatch.setattr(init_db, "release_connection", release)
    mock_conn.release = release
    return mock_conn


class TestSchemaSql:
    @pytest.mark.parametrize("table", ["alerts", "personal_data", "vehicular", "cameras"])
    def test_each_table_created_if_absent(self, table: str) -> None:
        assert re.search(rf"CREATE TABLE IF NOT EXISTS {table} \(", init_db.SCHEMA_SQL)

    def test_script_is_non_destructive(self) -> None:
        sql = init_db.SCHEMA_SQL.upper()
        for keyword in ("DROP", "TRUNCATE", "DELETE", "ALTER"):
            assert keyword not in sql

    def test_string_columns_are_unbounded(self) -> None:
        assert "VARCHAR" not in init_db.SCHEMA_SQL.upper()
        assert re.search(r"\bdate\s+TEXT NOT NULL", init_db.SCHEMA_SQL)


class TestCreateTables:
    def test_executes_schema_and_commits(self, db) -> None:
        init_db.create_tables()

        db.cur.execute.assert_called_once_with(init_db.SCHEMA_SQL)
        db.commit.assert_called_once()
        db.release.assert_called_once_with(db)

    def test_running_twice_is_harmless(self, db) -> None:
        init_db.create_tables()
        init_db.create_tables()

        assert db.commit.call_count == 2
        db.rollback.assert_not_called()

    def test_failure_raises_bootstrap_error(self, db) -> None:
        db.cur.execute.side_effect = psycopg2.ProgrammingError("permission denied for schema public")

        with pytest.raises(BootstrapError):
            init_db.create_tables()

        db.rollback.assert_called_once()
        db.release.assert_called_once_with(db)

    def test_uninitialized_pool_raises_bootstrap_error(self, monkeypatch) -> None:
        def no_pool():
            raise RuntimeError("Database pool not initialized. Call init_pool() first.")

        monkeypatch.setattr(init_db, "get_connection", no_pool)

        with pytest.raises(BootstrapError):
            init_db.create_tables()
