"""Closed set of failures raised by the repository layer.

Every repository failure is one of four kinds. Callers branch on
:attr:`RepositoryError.kind`; the message is fixed per failure and kept for
human-readable output.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


NO_CHANGES_TO_UPDATE = "No changes to update"
DATABASE_ERROR = "Database error"


class RepositoryError(Exception):
    """Base class for semantic repository failures."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(RepositoryError):
    """Raised when a payload is rejected before the store is touched."""

    kind = ErrorKind.VALIDATION


class NotFoundError(RepositoryError):
    """Raised when a referenced row does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(RepositoryError):
    """Raised when a uniqueness invariant would be violated."""

    kind = ErrorKind.CONFLICT


class InternalFailure(RepositoryError):
    """Raised for store failures that no other kind explains."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = DATABASE_ERROR) -> None:
        super().__init__(message)


__all__ = [
    "DATABASE_ERROR",
    "NO_CHANGES_TO_UPDATE",
    "ConflictError",
    "ErrorKind",
    "InternalFailure",
    "NotFoundError",
    "RepositoryError",
    "ValidationFailure",
]
