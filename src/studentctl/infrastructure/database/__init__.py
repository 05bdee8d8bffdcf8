"""SQLite database engine and schema via SQLAlchemy Core."""

from studentctl.infrastructure.database.engine import create_db_engine, init_database
from studentctl.infrastructure.database.schema import metadata, students

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "students",
]
