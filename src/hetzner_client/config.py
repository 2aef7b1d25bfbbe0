"""Configuration helpers for the Hetzner Cloud client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlparse

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.hetzner.cloud"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "hetzner-python"
API_VERSION_PREFIX = "/v1"


def normalize_base_url(base_url: str) -> str:
    """Return the API host URL without a trailing slash or ``/v1`` suffix.

    Operation templates already start with ``/v1``, so both
    ``https://api.hetzner.cloud`` and ``https://api.hetzner.cloud/v1``
    resolve to the same endpoints.
    """

    if not base_url or not base_url.strip():
        raise ConfigurationError("A base URL is required.")
    normalized = base_url.strip().rstrip("/")
    parsed = urlparse(normalized)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigurationError(f"Invalid base URL: {base_url!r}")
    if normalized.endswith(API_VERSION_PREFIX):
        normalized = normalized[: -len(API_VERSION_PREFIX)]
    return normalized


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `HetznerClient`."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool | str = True
    default_headers: Mapping[str, str] | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        self.base_url = normalize_base_url(self.base_url)
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("Timeout must be a positive number of seconds.")

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

    def url_for(self, uri: str) -> str:
        return f"{self.base_url}/{uri.lstrip('/')}"
