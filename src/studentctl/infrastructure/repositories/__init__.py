"""Repository layer for SQL access patterns."""

from studentctl.infrastructure.repositories.students import StudentRepository

__all__ = ["StudentRepository"]
