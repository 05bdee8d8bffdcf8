"""Student record — the single entity managed by studentctl.

The record shape is storage-agnostic: the identifier is assigned by the
database on creation and ``None`` until then.  Row-level bookkeeping
(``created_at``/``updated_at``) stays in the storage layer and never
appears here.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel

# Column order used when rendering and when mapping to storage rows.
RECORD_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "date_of_birth",
    "major",
    "gpa",
)


class Student(BaseModel):
    """One student's stored profile."""

    model_config = {"frozen": True}

    student_id: int | None = None
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date
    major: str
    gpa: float

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_row(self) -> dict[str, Any]:
        """Column values for insert/update (identifier excluded)."""
        return {name: getattr(self, name) for name in RECORD_FIELDS}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Student:
        """Build a record from a storage row mapping, ignoring extra columns."""
        return cls(
            student_id=row["student_id"],
            **{name: row[name] for name in RECORD_FIELDS},
        )
