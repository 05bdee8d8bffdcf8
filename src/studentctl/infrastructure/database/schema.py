"""SQLAlchemy Core table definitions for the studentctl database.

One table, ``students``.  ``email`` is unique under ``NOCASE`` collation
so the database backs up the service-level case-insensitive check.
The timestamp columns are maintained by the database and the repository;
they are not part of the record shape.
"""

from __future__ import annotations

from sqlalchemy import (
    REAL,
    Column,
    Date,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)

metadata = MetaData()

students = Table(
    "students",
    metadata,
    Column("student_id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", Text, nullable=False),
    Column("last_name", Text, nullable=False),
    Column("email", Text(collation="NOCASE"), nullable=False, unique=True),
    Column("phone", Text, nullable=False),
    Column("date_of_birth", Date, nullable=False),
    Column("major", Text, nullable=False),
    Column("gpa", REAL, nullable=False),
    Column("created_at", Text, server_default=func.current_timestamp()),
    Column("updated_at", Text, server_default=func.current_timestamp()),
)

Index("ix_students_last_name", students.c.last_name)
Index("ix_students_major", students.c.major)
