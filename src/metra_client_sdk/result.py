from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ApiError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of one resource-client operation: a value or a typed error."""

    value: T | None = None
    error: ApiError | None = None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ApiError) -> "ApiResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
