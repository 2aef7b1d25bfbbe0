"""API token (bearer) authentication."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from .base import AuthStrategy


@dataclass(slots=True)
class BearerTokenAuth(AuthStrategy):
    """Apply a Hetzner Cloud project API token."""

    token: str

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self.token}"

    def validate(self) -> None:
        if not isinstance(self.token, str) or not self.token.strip():
            raise ConfigurationError("An API token is required to talk to the Hetzner Cloud API.")

    def update_token(self, token: str) -> None:
        self.token = token

    def __repr__(self) -> str:
        return "BearerTokenAuth(token=***)"
