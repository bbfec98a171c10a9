# premium_estate/domain/errors.py
from __future__ import annotations


class ListingsError(Exception):
    """Base for every failure a listings fetch can end in."""

    kind: str = "unknown"

    @property
    def message(self) -> str:
        return str(self)


class TransportError(ListingsError):
    """No response was obtained (DNS, connect, timeout, TLS, protocol)."""

    kind = "transport"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


class HttpError(ListingsError):
    kind = "http"

    def __init__(self, status_code: int, reason: str = "") -> None:
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class EmptyBodyError(ListingsError):
    """A 2xx response came back without a usable payload."""

    kind = "empty_body"

    def __init__(self, detail: str = "Empty response body") -> None:
        super().__init__(detail)
