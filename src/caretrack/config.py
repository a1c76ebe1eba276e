"""Configuration utilities for CARETRACK.

This module centralizes small helpers and constants related to application
configuration: where the database lives and how Alembic finds the packaged
migrations.
"""

import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config
from platformdirs import user_data_dir
from sqlalchemy.engine import URL

APP_NAME = "caretrack"
DB_URL_ENVVAR = "CARETRACK_DB_URL"
DEFAULT_DB_FILENAME = "caretrack.db"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


def default_db_path(ensure_exists: bool = True) -> Path:
    """Return the per-user SQLite file used when no URL is configured.

    Args:
        ensure_exists: Create the data directory if it is missing. Callers
            that only display the path pass False.
    """
    data_dir = user_data_dir(APP_NAME, appauthor=False, ensure_exists=ensure_exists)
    return Path(data_dir) / DEFAULT_DB_FILENAME


def get_db_url(ensure_exists: bool = True) -> str:
    """Get the database URL.

    Args:
        ensure_exists: Passed to :func:`default_db_path` when the default
            SQLite file is used.

    Returns:
        The value of `CARETRACK_DB_URL` when set and non-empty; otherwise a
        SQLite URL pointing at :func:`default_db_path`.
    """
    if url := os.environ.get(DB_URL_ENVVAR):
        return url
    path = default_db_path(ensure_exists=ensure_exists)
    return URL.create("sqlite+pysqlite", database=str(path)).render_as_string()


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for CARETRACK's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → CARETRACK's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///:memory:`). Can be
            `None` (default) only in contexts where Alembic won't need to
            connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to CARETRACK's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("caretrack.adapters.db.alembic")),
    )
    return cfg
