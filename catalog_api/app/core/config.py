"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which every resource router is mounted.  The resources
    # themselves live at ``<prefix>/games``, ``<prefix>/books`` and so on.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # When false the in-memory collections start empty instead of being
    # filled with the fixture records from ``app.data.seed``.
    seed_collections: bool = os.getenv("SEED_COLLECTIONS", "true").lower() in {"1", "true", "yes"}

    # Path of the SQLite database used by the notes resources.  If a
    # relative path is provided, it is resolved relative to the package
    # root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "catalog.db")

    # Bind address for ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
