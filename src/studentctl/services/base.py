"""BaseService — abstract foundation for studentctl services.

Every service receives a :class:`StudentRepository` at construction time.
The repository wraps the injected engine and owns all SQL; services own
the business rules and, where needed, the transaction boundary via
``self._repo.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from studentctl.services.result import STORAGE_ERROR, ServiceResult

if TYPE_CHECKING:
    from studentctl.infrastructure.errors import StorageError
    from studentctl.infrastructure.repositories.students import StudentRepository

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class StudentService(BaseService):
            def delete_student(self, student_id: int) -> ServiceResult:
                with self._repo.transaction() as conn:
                    ...
    """

    def __init__(self, repository: StudentRepository) -> None:
        self._repo = repository

    @staticmethod
    def _storage_failure(op: str, exc: StorageError) -> ServiceResult:
        """Surface a storage error as-is; no retry, no transient/permanent split."""
        logger.debug("%s failed in storage operation %s", op, exc.operation)
        return ServiceResult.failure(
            op,
            STORAGE_ERROR,
            f"Database error: {exc.message}",
            operation=exc.operation,
        )
