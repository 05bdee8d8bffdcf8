"""Storage-layer exceptions raised by the repository boundary."""

from __future__ import annotations


class StorageError(Exception):
    """A database operation failed.

    Wraps the driver-level exception so SQLAlchemy errors never cross the
    repository boundary.  ``operation`` names the repository method.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
