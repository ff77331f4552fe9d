"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so the service can be configured the same way
under Docker, systemd or a plain shell.  Defaults are provided for all
fields; override them via environment variables before importing this
module.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "School Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``; ``:memory:`` keeps the
    # data in process for the lifetime of the store.
    database_url: str = os.getenv("DATABASE_URL", "schools.db")
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "5.0"))

    # /addSchool historically accepts any finite latitude/longitude while
    # /listSchools rejects points outside ±90/±180.  Setting this flag
    # applies the same range check on creation.
    enforce_school_coordinate_ranges: bool = _env_flag("ENFORCE_SCHOOL_COORDINATE_RANGES")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
