"""Tagged results returned by service operations.

Services raise ``DomainError`` subclasses internally; the public operations
are wrapped with :func:`returns_result` so callers always get a ``Result``
carrying either the value or exactly one error.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

from .enums import ErrorKind
from .exceptions import DomainError, InternalError
from .logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[DomainError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def returns_result(action: str) -> Callable[[Callable[..., T]], Callable[..., Result[T]]]:
    """Wrap a service method so failures come back as ``Result.failure``.

    ``action`` completes the sentence "Server error while ..." used for
    unexpected failures.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T]]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
            try:
                return Result.success(func(*args, **kwargs))
            except DomainError as e:
                logger.info("%s failed (%s): %s", func.__qualname__, e.kind.value, e.message)
                return Result.failure(e)
            except Exception as e:
                logger.exception("Error while %s", action)
                return Result.failure(InternalError(f"Server error while {action}", cause=e))

        return wrapper

    return decorator
