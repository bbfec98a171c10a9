# premium_estate/domain/result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ListingsError

T = TypeVar("T")

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a repository call: exactly one of value / error is meaningful.

    Callers that only need something to show use `error_message`; callers that
    want to branch on the failure kind inspect `error` (a ListingsError).
    """

    value: T | None = None
    error: ListingsError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ListingsError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return self.error.message or UNKNOWN_ERROR_MESSAGE

    def get_or_raise(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

