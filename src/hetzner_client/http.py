"""HTTP utilities for Hetzner Cloud API access."""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from requests import Response, Session
from requests.structures import CaseInsensitiveDict

from .exceptions import ApiError


@dataclass(frozen=True, slots=True)
class RawReply:
    """Status, headers and undecoded body of one HTTP reply."""

    status_code: int
    headers: Mapping[str, Any] = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""
    reason: str | None = None

    @classmethod
    def from_response(cls, response: Response) -> RawReply:
        return cls(
            status_code=response.status_code,
            headers=_collect_headers(response),
            body=response.content or b"",
            reason=response.reason,
        )

    @classmethod
    def json(
        cls,
        payload: Mapping[str, Any],
        *,
        status_code: int = 200,
        headers: Mapping[str, Any] | None = None,
    ) -> RawReply:
        """Build a reply carrying ``payload`` as its JSON body."""

        return cls(
            status_code=status_code,
            headers=CaseInsensitiveDict(headers or {}),
            body=json.dumps(payload).encode("utf-8"),
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


def ensure_success(reply: RawReply) -> None:
    """Raise `ApiError` if the reply signals a failure."""

    if reply.status_code < 400:
        return
    error = _error_payload(reply.body)
    message = error.get("message") or reply.reason or f"HTTP {reply.status_code}"
    raise ApiError(
        str(message),
        code=error.get("code"),
        status_code=reply.status_code,
        details=error.get("details"),
    )


def send(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    data: bytes | None = None,
    headers: MutableMapping[str, str] | None = None,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> RawReply:
    """Make a request and return the undecoded reply."""

    response = session.request(
        method=method,
        url=url,
        params=params,
        data=data,
        headers=headers,
        timeout=timeout,
        verify=verify,
    )
    return RawReply.from_response(response)


def _collect_headers(response: Response) -> CaseInsensitiveDict:
    """Keep repeated headers as lists; ``response.headers`` joins them with commas."""

    raw_headers = getattr(response.raw, "headers", None)
    if not hasattr(raw_headers, "getlist"):
        return CaseInsensitiveDict(response.headers)
    headers: CaseInsensitiveDict = CaseInsensitiveDict()
    for name in raw_headers.keys():
        values = raw_headers.getlist(name)
        headers[name] = values[0] if len(values) == 1 else list(values)
    return headers


def _error_payload(body: bytes) -> dict[str, Any]:
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    if not isinstance(payload, Mapping):
        return {}
    error = payload.get("error")
    return dict(error) if isinstance(error, Mapping) else {}
