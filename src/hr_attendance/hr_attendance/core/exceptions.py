from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from .enums import ErrorKind


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    kind = ErrorKind.VALIDATION

    def __init__(self, errors: Sequence[FieldError]):
        self.errors = list(errors)
        super().__init__(", ".join(e.message for e in self.errors))


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""

    kind = ErrorKind.NOT_FOUND


class DuplicateError(DomainError):
    """Raised when a create/update would break a uniqueness rule."""

    kind = ErrorKind.DUPLICATE

    def __init__(self, message: str, *, field: str):
        super().__init__(message)
        self.field = field


class ConflictError(DomainError):
    """Raised when attendance is already marked for the day; the caller should update instead."""

    kind = ErrorKind.CONFLICT


class InternalError(DomainError):
    """Unexpected storage or runtime failure."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
