"""Student repository — the persistence gateway over the ``students`` table.

Every statement is built with SQLAlchemy Core constructs, so all values
travel as bound parameters.  Driver errors are caught here, logged with
the failing operation, and re-raised as :class:`StorageError`; nothing
from SQLAlchemy escapes this module.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from studentctl.domain.student import Student
from studentctl.infrastructure.database.schema import students
from studentctl.infrastructure.errors import StorageError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection, Select
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _driver_message(exc: Exception) -> str:
    """Prefer the DBAPI message over SQLAlchemy's wrapped one."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class StudentRepository:
    """Encapsulates SQL for student records.

    The engine is injected and owned by the caller; the repository never
    creates or disposes it.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Error translation and transactions
    # ------------------------------------------------------------------

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OverflowError) as exc:
            # sqlite3 raises OverflowError unwrapped for integers beyond 64 bits.
            message = _driver_message(exc)
            logger.error("Storage failure in %s: %s", operation, message)
            raise StorageError(message, operation=operation) from exc

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside an explicit BEGIN/COMMIT bracket.

        Commits when the block exits cleanly and rolls back on any
        exception.  A failed rollback is logged and never replaces the
        original error.  The connection is always closed afterwards,
        which hands it back to the pool in its default autocommit state.
        """
        with self._guard("transaction"):
            conn = self._engine.connect()
        try:
            txn = conn.begin()
            try:
                yield conn
                with self._guard("commit"):
                    txn.commit()
            except Exception:
                try:
                    txn.rollback()
                except SQLAlchemyError:
                    logger.warning("Rollback failed", exc_info=True)
                raise
        finally:
            try:
                conn.close()
            except SQLAlchemyError:
                logger.warning("Failed to release connection", exc_info=True)

    def _fetch(self, stmt: Select[tuple[object, ...]], operation: str) -> list[Student]:
        with self._guard(operation), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [Student.from_row(row) for row in rows]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, student: Student) -> int:
        """Insert *student* and return the identifier storage assigned."""
        with self._guard("create"), self._engine.begin() as conn:
            result = conn.execute(insert(students).values(**student.to_row()))
            new_id = int(result.inserted_primary_key[0])
        logger.debug("Inserted student %d", new_id)
        return new_id

    def update(self, student: Student, *, conn: Connection | None = None) -> bool:
        """Replace every mutable column of the row keyed by ``student.student_id``.

        Returns False when no row matched.
        """
        stmt = (
            update(students)
            .where(students.c.student_id == student.student_id)
            .values(**student.to_row(), updated_at=func.current_timestamp())
        )
        with self._guard("update"):
            if conn is not None:
                return conn.execute(stmt).rowcount > 0
            with self._engine.begin() as own_conn:
                return own_conn.execute(stmt).rowcount > 0

    def delete(self, student_id: int, *, conn: Connection | None = None) -> bool:
        """Delete one row. Returns False when no row matched."""
        stmt = delete(students).where(students.c.student_id == student_id)
        with self._guard("delete"):
            if conn is not None:
                return conn.execute(stmt).rowcount > 0
            with self._engine.begin() as own_conn:
                return own_conn.execute(stmt).rowcount > 0

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_all(self) -> list[Student]:
        """All records, ordered by identifier."""
        return self._fetch(select(students).order_by(students.c.student_id), "get_all")

    def get_by_id(self, student_id: int) -> Student | None:
        stmt = select(students).where(students.c.student_id == student_id)
        rows = self._fetch(stmt, "get_by_id")
        return rows[0] if rows else None

    def find_by_name(self, fragment: str) -> list[Student]:
        """Case-insensitive substring match on first OR last name."""
        stmt = (
            select(students)
            .where(
                students.c.first_name.icontains(fragment, autoescape=True)
                | students.c.last_name.icontains(fragment, autoescape=True)
            )
            .order_by(students.c.first_name.collate("NOCASE"), students.c.student_id)
        )
        return self._fetch(stmt, "find_by_name")

    def find_by_major(self, fragment: str) -> list[Student]:
        """Case-insensitive substring match on major, highest GPA first."""
        stmt = (
            select(students)
            .where(students.c.major.icontains(fragment, autoescape=True))
            .order_by(students.c.gpa.desc(), students.c.student_id)
        )
        return self._fetch(stmt, "find_by_major")

    def find_by_min_gpa(self, threshold: float) -> list[Student]:
        """Records with ``gpa >= threshold``, highest GPA first."""
        stmt = (
            select(students)
            .where(students.c.gpa >= threshold)
            .order_by(students.c.gpa.desc(), students.c.student_id)
        )
        return self._fetch(stmt, "find_by_min_gpa")
