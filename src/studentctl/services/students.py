"""StudentService — validation, uniqueness, and persistence orchestration.

Pipeline for writes: EXISTS (update/delete) → VALIDATE → UNIQUE → PERSIST.
This is the only place business rules live; the repository does SQL and
the domain module does field syntax.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from studentctl.domain.student import Student
from studentctl.domain.validation import is_valid_gpa, validate_student
from studentctl.infrastructure.errors import StorageError
from studentctl.services.base import BaseService
from studentctl.services.result import (
    DUPLICATE_EMAIL,
    NOT_FOUND,
    STORAGE_ERROR,
    VALIDATION_FAILED,
    ServiceResult,
)

logger = logging.getLogger(__name__)


class _NoRowsAffected(Exception):
    """Raised inside a transaction block to force a rollback."""


def _record(student: Student) -> dict[str, Any]:
    return student.model_dump(mode="json")


def _listing(students: list[Student], **extra: Any) -> dict[str, Any]:
    return {"items": [_record(s) for s in students], "count": len(students), **extra}


def _not_found(op: str, student_id: int) -> ServiceResult:
    return ServiceResult.failure(
        op, NOT_FOUND, f"Student with ID {student_id} not found", id=student_id
    )


class StudentService(BaseService):
    """Create, read, update, delete, and filter student records."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_student(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        date_of_birth: date,
        major: str,
        gpa: float,
    ) -> ServiceResult:
        """Validate, check email uniqueness, then insert.

        Returns the storage-assigned identifier as ``data["id"]``.
        """
        op = "create_student"
        fields = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone": phone,
            "date_of_birth": date_of_birth,
            "major": major,
            "gpa": gpa,
        }

        vr = validate_student(**fields)
        if not vr.valid:
            return self._rejected(op, VALIDATION_FAILED, vr.error or "", field=vr.field)

        try:
            if self._email_exists(email):
                return self._rejected(
                    op, DUPLICATE_EMAIL, "Email already exists in the database", email=email
                )
            student = Student(**fields)
            new_id = self._repo.create(student)
        except StorageError as exc:
            return self._storage_failure(op, exc)

        logger.info("Created student %d (%s)", new_id, student.display_name)
        return ServiceResult.success(op, id=new_id)

    def update_student(
        self,
        student_id: int,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        date_of_birth: date,
        major: str,
        gpa: float,
    ) -> ServiceResult:
        """Replace every mutable field of an existing record.

        The record's own current email never counts as a duplicate.
        """
        op = "update_student"
        fields = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone": phone,
            "date_of_birth": date_of_birth,
            "major": major,
            "gpa": gpa,
        }

        try:
            existing = self._repo.get_by_id(student_id)
            if existing is None:
                return _not_found(op, student_id)

            vr = validate_student(**fields)
            if not vr.valid:
                return self._rejected(op, VALIDATION_FAILED, vr.error or "", field=vr.field)

            email_changed = existing.email.casefold() != email.casefold()
            if email_changed and self._email_exists(email):
                return self._rejected(
                    op,
                    DUPLICATE_EMAIL,
                    "Email already exists for another student",
                    email=email,
                )

            updated = self._repo.update(Student(student_id=student_id, **fields))
        except StorageError as exc:
            return self._storage_failure(op, exc)

        if not updated:
            return ServiceResult.failure(
                op, STORAGE_ERROR, "Failed to update student record", id=student_id
            )

        logger.info("Updated student %d", student_id)
        return ServiceResult.success(op, id=student_id, updated=True)

    def delete_student(self, student_id: int) -> ServiceResult:
        """Delete an existing record inside an explicit transaction.

        Zero affected rows or any storage error rolls the transaction back.
        """
        op = "delete_student"
        try:
            if self._repo.get_by_id(student_id) is None:
                return _not_found(op, student_id)

            with self._repo.transaction() as conn:
                if not self._repo.delete(student_id, conn=conn):
                    raise _NoRowsAffected
        except _NoRowsAffected:
            return ServiceResult.failure(
                op, STORAGE_ERROR, "Failed to delete student record", id=student_id
            )
        except StorageError as exc:
            return self._storage_failure(op, exc)

        logger.info("Deleted student %d", student_id)
        return ServiceResult.success(op, id=student_id, deleted=True)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_students(self) -> ServiceResult:
        op = "list_students"
        try:
            rows = self._repo.get_all()
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_listing(rows))

    def get_student(self, student_id: int) -> ServiceResult:
        op = "get_student"
        try:
            student = self._repo.get_by_id(student_id)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        if student is None:
            return _not_found(op, student_id)
        return ServiceResult(ok=True, op=op, data=_record(student))

    def search_by_name(self, fragment: str | None) -> ServiceResult:
        """Substring search over first and last names; blank input finds nothing."""
        op = "search_by_name"
        query = (fragment or "").strip()
        if not query:
            return ServiceResult(ok=True, op=op, data=_listing([], query=query))
        try:
            rows = self._repo.find_by_name(query)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_listing(rows, query=query))

    def filter_by_major(self, fragment: str | None) -> ServiceResult:
        op = "filter_by_major"
        query = (fragment or "").strip()
        if not query:
            return ServiceResult(ok=True, op=op, data=_listing([], query=query))
        try:
            rows = self._repo.find_by_major(query)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_listing(rows, query=query))

    def filter_by_min_gpa(self, threshold: float) -> ServiceResult:
        """Records at or above *threshold*; an out-of-range threshold finds nothing."""
        op = "filter_by_min_gpa"
        if not is_valid_gpa(threshold):
            return ServiceResult(ok=True, op=op, data=_listing([], min_gpa=threshold))
        try:
            rows = self._repo.find_by_min_gpa(threshold)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_listing(rows, min_gpa=threshold))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _email_exists(self, email: str) -> bool:
        # Scans every record; there is no lookup by email.
        target = email.casefold()
        return any(s.email.casefold() == target for s in self._repo.get_all())

    @staticmethod
    def _rejected(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.info("%s rejected (%s): %s", op, code, message)
        return ServiceResult.failure(op, code, message, **detail)
