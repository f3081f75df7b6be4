"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import get_connection, release_connection
from utils.errors import BootstrapError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Alerts raised by the detection pipeline
CREATE TABLE IF NOT EXISTS alerts (
    id              SERIAL PRIMARY KEY,
    type            TEXT NOT NULL
);

-- Anonymous demographic/emotion readings
CREATE TABLE IF NOT EXISTS personal_data (
    id              SERIAL PRIMARY KEY,
    age             INTEGER NOT NULL,
    sex             TEXT NOT NULL,
    emotion         TEXT NOT NULL
);

-- Vehicular incidents; date is kept as the free-form text the client sent
CREATE TABLE IF NOT EXISTS vehicular (
    id              SERIAL PRIMARY KEY,
    type            TEXT NOT NULL,
    description     TEXT NOT NULL,
    date            TEXT NOT NULL,
    location        TEXT NOT NULL,
    plates          TEXT NOT NULL
);

-- Registered cameras
CREATE TABLE IF NOT EXISTS cameras (
    id              SERIAL PRIMARY KEY,
    number          TEXT NOT NULL,
    address         TEXT NOT NULL,
    type            TEXT NOT NULL,
    location        TEXT NOT NULL,
    resolution      TEXT NOT NULL
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        BootstrapError: If the database is unreachable or the script fails.
    """
    try:
        conn = get_connection()
    except (psycopg2.Error, RuntimeError) as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise BootstrapError("Could not obtain a database connection") from e
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise BootstrapError("Could not create the database schema") from e
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")
