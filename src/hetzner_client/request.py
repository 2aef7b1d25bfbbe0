"""Immutable description of one API call prior to dispatch."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .exceptions import SerializationError


class PayloadPolicy(str, Enum):
    """How an operation transmits its parameter map."""

    QUERY = "query"
    BODY = "body"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """One API call: method, substituted URI and parameters."""

    operation_id: str
    method: str
    uri: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    policy: PayloadPolicy = PayloadPolicy.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def has_query(self) -> bool:
        return self.policy is PayloadPolicy.QUERY

    @property
    def has_body(self) -> bool:
        return self.policy is PayloadPolicy.BODY

    def query(self) -> dict[str, Any] | None:
        """Return the parameters as query values, or ``None`` for non-query operations.

        Booleans are rendered the way the API expects them (``true``/``false``);
        list values are kept so the transport repeats the key once per item.
        """

        if not self.has_query:
            return None
        rendered: dict[str, Any] = {}
        for key, value in self.parameters.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                rendered[key] = [_render_query_value(item) for item in value]
            else:
                rendered[key] = _render_query_value(value)
        return rendered

    def body(self) -> bytes | None:
        """Return the JSON document sent with write operations."""

        if not self.has_body:
            return None
        try:
            encoded = json.dumps(dict(self.parameters), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Failed to encode parameters to JSON: {exc}", details=str(exc)
            ) from exc
        return encoded.encode("utf-8")

    def options(self) -> dict[str, Any]:
        """Keyword arguments handed to the HTTP transport."""

        if self.has_query:
            return {"params": self.query()}
        if self.has_body:
            return {"data": self.body()}
        return {}


def _render_query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value
