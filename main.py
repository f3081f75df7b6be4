"""
main.py
-------
Entry point for the Incident Records API.

Responsibilities:
    - Initialize the database connection pool and schema on startup.
    - Build the FastAPI application with all routers and middleware.
    - Close the pool on shutdown.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import psycopg2
import uvicorn
from fastapi import FastAPI

from config import HOST, PORT
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers import (
    alert_handler,
    camera_handler,
    personal_data_handler,
    start_handler,
    vehicular_handler,
)
from handlers.error_handler import UnhandledErrorMiddleware, register_error_handlers
from security.cors import add_cors
from security.headers import SecurityHeadersMiddleware
from utils.errors import BootstrapError
from utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: open the pool and create missing tables.
    Any failure here aborts startup; the server never serves
    requests against a database it could not bootstrap.
    """
    logger.info("Initializing database...")
    try:
        init_pool()
    except psycopg2.OperationalError as e:
        raise BootstrapError("Could not connect to the database") from e
    try:
        create_tables()
    except BootstrapError:
        close_pool()
        raise

    yield

    close_pool()
    logger.info("Incident Records API stopped.")


def create_app() -> FastAPI:
    """Build the application: routers, middleware, error envelopes."""
    app = FastAPI(title="Incident Records API", lifespan=lifespan)

    # ── 1. Routers ────────────────────────────────────────
    app.include_router(start_handler.router)
    app.include_router(alert_handler.router)
    app.include_router(personal_data_handler.router)
    app.include_router(vehicular_handler.router)
    app.include_router(camera_handler.router)

    # ── 2. Middleware (last added runs first) ─────────────
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    add_cors(app)

    # ── 3. Error envelopes ────────────────────────────────
    register_error_handlers(app)
    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    logger.info(f"Incident Records API listening on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, server_header=False, log_config=None)


if __name__ == "__main__":
    main()
