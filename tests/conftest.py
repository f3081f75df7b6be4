"""Shared fixtures for the API test suite.

Unit tests never touch PostgreSQL: repositories are replaced by in-memory
doubles, or the psycopg2 connection is mocked. Integration tests live in
tests/integration/ and need TEST_DATABASE_URL.
"""

import itertools
import threading
from dataclasses import replace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import main
from repositories import REPOSITORIES


class InMemoryRepository:
    """Stand-in for a RecordRepository that keeps rows in a list."""

    def __init__(self, model: type, columns: tuple[str, ...]):
        self.model = model
        self.columns = columns
        self.rows: list = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, values: dict):
        with self._lock:
            record = self.model(id=next(self._ids), **{c: values[c] for c in self.columns})
            self.rows.append(record)
            return replace(record)

    def list_all(self) -> list:
        with self._lock:
            return [replace(r) for r in self.rows]


@pytest.fixture
def memory_repositories(monkeypatch) -> dict:
    """Swap every registered repository for an in-memory one."""
    fakes = {}
    for record_type, repo in list(REPOSITORIES.items()):
        fake = InMemoryRepository(repo.model, repo.columns)
        monkeypatch.setitem(REPOSITORIES, record_type, fake)
        fakes[record_type] = fake
    return fakes


@pytest.fixture
def lifecycle(monkeypatch) -> dict:
    """Replace the pool/bootstrap calls made by the app lifespan."""
    mocks = {
        "init_pool": MagicMock(),
        "create_tables": MagicMock(),
        "close_pool": MagicMock(),
    }
    for name, mock in mocks.items():
        monkeypatch.setattr(main, name, mock)
    return mocks


@pytest.fixture
def client(memory_repositories, lifecycle) -> TestClient:
    """Test client over the real app with in-memory storage."""
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture
def mock_conn() -> MagicMock:
    """A psycopg2 connection double whose cursor is `mock_conn.cur`."""
    conn = MagicMock()
    conn.closed = 0
    cur = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cur
    conn.cur = cur
    return conn
