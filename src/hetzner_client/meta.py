"""Out-of-band response metadata taken from HTTP headers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from requests.structures import CaseInsensitiveDict

REQUEST_ID_HEADER = "x-request-id"
RATE_LIMIT_LIMIT_HEADER = "x-ratelimit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"


@dataclass(frozen=True, slots=True)
class MetaInformation:
    """Request id and rate-limit counters, passed through verbatim."""

    request_id: str | None = None
    rate_limit_limit: str | None = None
    rate_limit_remaining: str | None = None
    rate_limit_reset: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any] | None) -> MetaInformation:
        lookup: CaseInsensitiveDict = CaseInsensitiveDict(headers or {})
        return cls(
            request_id=_first_value(lookup.get(REQUEST_ID_HEADER)),
            rate_limit_limit=_first_value(lookup.get(RATE_LIMIT_LIMIT_HEADER)),
            rate_limit_remaining=_first_value(lookup.get(RATE_LIMIT_REMAINING_HEADER)),
            rate_limit_reset=_first_value(lookup.get(RATE_LIMIT_RESET_HEADER)),
        )

    def to_dict(self) -> dict[str, str | None]:
        return {
            REQUEST_ID_HEADER: self.request_id,
            RATE_LIMIT_LIMIT_HEADER: self.rate_limit_limit,
            RATE_LIMIT_REMAINING_HEADER: self.rate_limit_remaining,
            RATE_LIMIT_RESET_HEADER: self.rate_limit_reset,
        }


def _first_value(value: Any) -> str | None:
    # repeated headers arrive as a list; values are otherwise kept verbatim
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    return str(value)
