"""Shared pytest fixtures and test helpers for studentctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from studentctl.infrastructure.database.engine import init_database
from studentctl.infrastructure.repositories.students import StudentRepository
from studentctl.services.students import StudentService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with the students table created."""
    engine = init_database(tmp_path / "students.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def repository(db_engine: Engine) -> StudentRepository:
    return StudentRepository(db_engine)


@pytest.fixture
def service(repository: StudentRepository) -> StudentService:
    return StudentService(repository)


@pytest.fixture
def _isolated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_db")`` on command test
    classes.  Env overrides are cleared so the host config cannot leak in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STUDENTCTL_CONFIG", raising=False)
    monkeypatch.delenv("STUDENTCTL_DB_PATH", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service and command test modules)
# ---------------------------------------------------------------------------

ADA: dict[str, Any] = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@x.com",
    "phone": "1234567890",
    "date_of_birth": date(1900, 1, 1),
    "major": "Math",
    "gpa": 4.0,
}


def student_fields(**overrides: Any) -> dict[str, Any]:
    """A valid set of record fields, with selected fields replaced."""
    return {**ADA, **overrides}


def create_student(service: StudentService, **overrides: Any) -> int:
    """Create a student via StudentService, asserting success."""
    result = service.create_student(**student_fields(**overrides))
    assert result.ok, result.error
    return int(result.data["id"])
