"""Custom exception hierarchy for the Hetzner Cloud client."""
from __future__ import annotations

from typing import Any


class HetznerError(RuntimeError):
    """Base error for Hetzner Cloud client failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ConfigurationError(HetznerError):
    """Raised when the client is built with a missing credential or bad base URL."""


class SerializationError(HetznerError):
    """Raised when request parameters cannot be encoded as JSON."""


class InvalidResponseBody(HetznerError):
    """Raised when a non-empty response body is not valid JSON."""


class ApiError(HetznerError):
    """Raised when the API answers with a structured error payload."""

    def __init__(
        self,
        message: str,
        *,
        code: str | int | None = None,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, details=details)
        self.code = code if code is not None else status_code

    def to_dict(self) -> dict[str, Any]:
        return {"message": str(self), "code": self.code}


class TransportError(HetznerError):
    """Raised when the HTTP exchange itself fails (DNS, TLS, timeout, refused)."""


class MissingFieldError(HetznerError, KeyError):
    """Raised when a required field is absent from a decoded payload."""

    def __init__(self, field: str, *, owner: str | None = None) -> None:
        location = f" in {owner}" if owner else ""
        super().__init__(f"Required field '{field}' is missing{location}")
        self.field = field
        self.owner = owner

    def __str__(self) -> str:
        return self.args[0]


class PaginationError(HetznerError):
    """Raised when following page links does not terminate."""
