"""Database engine setup for SQLite.

The engine is the one storage handle in the process.  It is created by
whoever owns the process lifecycle (the CLI context, or a test fixture),
injected into :class:`StudentRepository`, and disposed by that same owner.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from studentctl.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(db_path: Path, *, timeout: float = 5.0) -> Engine:
    """Create a SQLite engine with foreign keys enabled.

    *timeout* is the driver's lock-wait timeout in seconds.  SQL echo goes
    through the ``sqlalchemy.engine`` logger, not ``create_engine(echo=...)``.
    """
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"timeout": timeout},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(db_path: Path, *, timeout: float = 5.0) -> Engine:
    """Initialize the student database at *db_path*.

    Creates the parent directory and the ``students`` table.
    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path, timeout=timeout)
    metadata.create_all(engine)
    logger.debug("Database ready at %s", db_path)
    return engine
