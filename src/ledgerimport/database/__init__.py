"""Storage for rules, ledger entries and import batches."""

from ledgerimport.database.base import Database
from ledgerimport.database.factories import DB_PATH_ENV_VAR, create_sqlite_database
from ledgerimport.database.sqlalchemy_db import SQLAlchemyDatabase

__all__ = ["DB_PATH_ENV_VAR", "Database", "SQLAlchemyDatabase", "create_sqlite_database"]
