"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.

Request handlers run concurrently on the web server's worker threads,
usually more of them than there are connections. psycopg2's
ThreadedConnectionPool refuses a checkout once it is exhausted, so
checkouts are gated by a semaphore sized to the pool: a request waits
for a free connection (up to DB_POOL_TIMEOUT seconds) instead of failing.
"""

import threading
from typing import Optional

import psycopg2
from psycopg2 import pool
from config import DATABASE_URL, DB_SSLMODE, DB_POOL_MIN, DB_POOL_MAX, DB_POOL_TIMEOUT
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[pool.ThreadedConnectionPool] = None
_slots: Optional[threading.BoundedSemaphore] = None
_timeout: float = DB_POOL_TIMEOUT


def init_pool(
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
    timeout: float = DB_POOL_TIMEOUT,
) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        timeout: Seconds a checkout waits while all connections are in use.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool, _slots, _timeout
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(
            min_conn, max_conn, DATABASE_URL, sslmode=DB_SSLMODE
        )
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    _slots = threading.BoundedSemaphore(max_conn)
    _timeout = timeout
    logger.info(
        f"Database connection pool initialized ({min_conn}-{max_conn} connections, "
        f"{timeout:g}s checkout timeout)."
    )


def get_connection():
    """
    Get a connection from the pool, waiting while all of them are in use.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
        psycopg2.pool.PoolError: If no connection frees up within the timeout.
    """
    if _pool is None or _slots is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    if not _slots.acquire(timeout=_timeout):
        raise pool.PoolError(f"no connection became free within {_timeout:g}s")
    try:
        return _pool.getconn()
    except Exception:
        _slots.release()
        raise


def release_connection(conn) -> None:
    """
    Return a connection back to the pool and free its slot.

    Broken connections are discarded instead of being handed out again.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is None:
        return
    try:
        _pool.putconn(conn, close=bool(conn.closed))
    finally:
        if _slots is not None:
            _slots.release()


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool, _slots
    if _pool is not None:
        _pool.closeall()
        _pool = None
        _slots = None
        logger.info("Database connection pool closed.")
