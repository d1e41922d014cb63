"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerimport.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "LEDGERIMPORT_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".ledgerimport"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file to use.

    An explicit path wins, then LEDGERIMPORT_DB_PATH, then
    ~/.ledgerimport/ledgerimport.db. The parent directory is created if missing.
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path:
        path = Path(database_path).expanduser()
    else:
        path = DEFAULT_DB_DIR / "ledgerimport.db"

    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
