"""Fluent construction of `HetznerClient` instances."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from .auth.base import AuthStrategy
from .client import HetznerClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .transport import Transport


class ClientFactory:
    """Collect client settings step by step, then build the client with `make`.

    Every ``with_*`` method returns the factory so calls can be chained::

        client = HetznerClient.factory().with_token(token).with_timeout(10).make()
    """

    def __init__(self) -> None:
        self._token: str | None = None
        self._auth_strategy: AuthStrategy | None = None
        self._base_url = DEFAULT_BASE_URL
        self._timeout = DEFAULT_TIMEOUT
        self._verify_ssl: bool | str = True
        self._headers: dict[str, str] = {}
        self._session: requests.Session | None = None
        self._transport: Transport | None = None

    def with_token(self, token: str) -> ClientFactory:
        self._token = token
        return self

    def with_auth_strategy(self, auth_strategy: AuthStrategy) -> ClientFactory:
        self._auth_strategy = auth_strategy
        return self

    def with_base_url(self, base_url: str) -> ClientFactory:
        self._base_url = base_url
        return self

    def with_timeout(self, timeout: float) -> ClientFactory:
        self._timeout = timeout
        return self

    def with_verify_ssl(self, verify_ssl: bool | str) -> ClientFactory:
        self._verify_ssl = verify_ssl
        return self

    def with_headers(self, headers: Mapping[str, str]) -> ClientFactory:
        """Merge ``headers`` into the headers sent with every request."""
        self._headers.update(headers)
        return self

    def with_session(self, session: requests.Session) -> ClientFactory:
        self._session = session
        return self

    def with_transport(self, transport: Transport) -> ClientFactory:
        self._transport = transport
        return self

    def make(self) -> HetznerClient:
        options: dict[str, Any] = {
            "token": self._token,
            "auth_strategy": self._auth_strategy,
            "base_url": self._base_url,
            "timeout": self._timeout,
            "verify_ssl": self._verify_ssl,
            "default_headers": dict(self._headers) or None,
            "session": self._session,
            "transport": self._transport,
        }
        return HetznerClient(**options)
