"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can start with no configuration at all, using a local SQLite file.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Travel API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "travel.db")

    # Seconds a connection waits for a competing writer to release the
    # database lock before failing with ``database is locked``.
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "30"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Environment variables must be set before this module is imported;
# the dataclass defaults are evaluated once.
settings = Settings()
