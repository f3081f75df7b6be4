"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "incidents")
DB_USER: str = os.getenv("DB_USER", "incidents_user")
DB_PASS: str = os.getenv("DB_PASS", "")

# A full connection string (e.g. from a hosting provider) wins over the parts.
DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)
DB_SSLMODE: str = os.getenv("DB_SSLMODE", "prefer")

DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "10"))
# Seconds a request waits for a free connection before giving up.
DB_POOL_TIMEOUT: float = float(os.getenv("DB_POOL_TIMEOUT", "30"))

# ── HTTP server ───────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "4000"))


def parse_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list, ignoring blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ── CORS ──────────────────────────────────────────────────
ALLOWED_ORIGINS: list[str] = parse_origins(
    os.getenv("ALLOWED_ORIGINS", "http://localhost:4000")
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
