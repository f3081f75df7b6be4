"""
security/cors.py
----------------
Cross-origin policy. Only the origins listed in ALLOWED_ORIGINS
may call the API from a browser.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import ALLOWED_ORIGINS
from utils.logger import get_logger

logger = get_logger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]
ALLOWED_HEADERS = ["Content-Type"]


def add_cors(app: FastAPI, origins: list[str] | None = None) -> None:
    """
    Install the CORS middleware on `app`.

    Args:
        app: The FastAPI application.
        origins: Allowed origins; defaults to ALLOWED_ORIGINS from config.
    """
    origins = ALLOWED_ORIGINS if origins is None else origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
    logger.info(f"CORS enabled for: {', '.join(origins) or '(none)'}")
