"""Unit tests for the connection pool wrapper in db/connection.py."""

import itertools
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from psycopg2 import pool

from db import connection
from models.record_type import RecordType
from services.record_service import RecordService


@pytest.fixture
def reset_pool(monkeypatch):
    """Start each test without a pool; restore module state afterwards."""
    monkeypatch.setattr(connection, "_pool", None)
    monkeypatch.setattr(connection, "_slots", None)
    yield
    connection.close_pool()


@pytest.fixture
def fake_pool(monkeypatch, reset_pool) -> MagicMock:
    """Patch ThreadedConnectionPool with a mock factory."""
    factory = MagicMock()
    factory.return_value.getconn.side_effect = lambda: MagicMock(closed=0)
    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", factory)
    return factory


@pytest.fixture
def slow_server(monkeypatch, reset_pool) -> dict:
    """
    Real ThreadedConnectionPool over fake psycopg2 connections whose
    statements take a little while, so concurrent requests overlap.
    Tracks how many connections are checked out at once.
    """
    ids = itertools.count(1)
    lock = threading.Lock()
    stats = {"open": 0, "peak": 0}

    def execute(sql, params=None):
        with lock:
            stats["open"] += 1
            stats["peak"] = max(stats["peak"], stats["open"])
        time.sleep(0.05)
        with lock:
            stats["open"] -= 1

    def connect(*args, **kwargs):
        conn = MagicMock(closed=0)
        cur = conn.cursor.return_value.__enter__.return_value
        cur.execute.side_effect = execute
        cur.fetchone.side_effect = lambda: {"id": next(ids), "type": "burst"}
        return conn

    monkeypatch.setattr(pool.psycopg2, "connect", connect)
    return stats


class TestPoolLifecycle:
    def test_get_connection_before_init_fails(self, reset_pool) -> None:
        with pytest.raises(RuntimeError):
            connection.get_connection()

    def test_init_passes_bounds_and_sslmode(self, fake_pool, monkeypatch) -> None:
        monkeypatch.setattr(connection, "DATABASE_URL", "postgresql://u:p@db:5432/x")
        monkeypatch.setattr(connection, "DB_SSLMODE", "require")

        connection.init_pool(2, 8)

        fake_pool.assert_called_once_with(2, 8, "postgresql://u:p@db:5432/x", sslmode="require")

    def test_init_twice_keeps_first_pool(self, fake_pool) -> None:
        connection.init_pool()
        connection.init_pool()

        fake_pool.assert_called_once()

    def test_close_pool_closes_all(self, fake_pool) -> None:
        connection.init_pool()
        instance = fake_pool.return_value

        connection.close_pool()

        instance.closeall.assert_called_once()
        with pytest.raises(RuntimeError):
            connection.get_connection()


class TestRelease:
    def test_healthy_connection_returned_for_reuse(self, fake_pool) -> None:
        connection.init_pool()
        conn = connection.get_connection()

        connection.release_connection(conn)

        fake_pool.return_value.putconn.assert_called_once_with(conn, close=False)

    def test_broken_connection_discarded(self, fake_pool) -> None:
        connection.init_pool()
        conn = connection.get_connection()
        conn.closed = 2

        connection.release_connection(conn)

        fake_pool.return_value.putconn.assert_called_once_with(conn, close=True)

    def test_failed_checkout_frees_its_slot(self, fake_pool) -> None:
        connection.init_pool(1, 1, timeout=0.1)
        fake_pool.return_value.getconn.side_effect = pool.PoolError("boom")

        with pytest.raises(pool.PoolError):
            connection.get_connection()

        fake_pool.return_value.getconn.side_effect = lambda: MagicMock(closed=0)
        assert connection.get_connection() is not None


class TestCheckoutWaits:
    def test_checkout_waits_for_a_released_connection(self, fake_pool) -> None:
        connection.init_pool(1, 1, timeout=5)
        held = connection.get_connection()
        threading.Timer(0.1, connection.release_connection, args=(held,)).start()

        started = time.monotonic()
        conn = connection.get_connection()

        assert conn is not None
        assert time.monotonic() - started >= 0.05

    def test_checkout_times_out_when_nothing_frees(self, fake_pool) -> None:
        connection.init_pool(1, 1, timeout=0.1)
        connection.get_connection()

        with pytest.raises(pool.PoolError):
            connection.get_connection()

    def test_more_concurrent_creates_than_connections(self, slow_server) -> None:
        connection.init_pool(1, 3, timeout=10)
        service = RecordService()

        with ThreadPoolExecutor(max_workers=12) as executor:
            stored = list(executor.map(
                lambda i: service.create(RecordType.ALERT, {"type": f"burst-{i}"}),
                range(24),
            ))

        assert len(stored) == 24
        assert len({a.id for a in stored}) == 24
        assert slow_server["peak"] <= 3
