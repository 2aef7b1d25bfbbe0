"""Response envelopes: decoded body plus header metadata."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidResponseBody, MissingFieldError
from .meta import MetaInformation
from .models import Action, Record
from .pagination import PaginationView, pagination_of

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .http import RawReply


def decode_body(body: bytes | str | None) -> Mapping[str, Any]:
    """Parse a response body; an empty body decodes to an empty mapping."""

    if body is None or len(body) == 0:
        return {}
    try:
        decoded = json.loads(body)
    except ValueError as exc:
        raise InvalidResponseBody(
            "Response did not contain valid JSON", details=str(exc)
        ) from exc
    if not isinstance(decoded, Mapping):
        raise InvalidResponseBody(
            f"Response JSON root must be an object, got {type(decoded).__name__}"
        )
    return decoded


@dataclass(frozen=True, slots=True)
class Response:
    """Decoded JSON body and `MetaInformation` of one API reply."""

    data: Mapping[str, Any]
    meta: MetaInformation = field(default_factory=MetaInformation)

    @classmethod
    def from_reply(cls, reply: RawReply, **fields: Any) -> Response:
        return cls(
            data=decode_body(reply.body),
            meta=MetaInformation.from_headers(reply.headers),
            **fields,
        )

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.data))

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def pagination(self) -> PaginationView:
        return pagination_of(self.data)

    @property
    def action(self) -> Action | None:
        raw = self.data.get("action")
        return Action(raw) if raw is not None else None

    @property
    def next_actions(self) -> list[Action]:
        return [Action(item) for item in self.data.get("next_actions") or []]

    def _required(self, key: str) -> Any:
        if key not in self.data:
            raise MissingFieldError(key, owner=type(self).__name__)
        return self.data[key]


@dataclass(frozen=True, slots=True)
class EntityResponse(Response):
    """Reply carrying one required object under ``key``."""

    key: str = ""
    model: type[Record] = Record

    @property
    def entity(self) -> Any:
        return self.model(self._required(self.key))


@dataclass(frozen=True, slots=True)
class CollectionResponse(Response):
    """Paginated reply carrying a list under ``key``; an absent list reads as empty."""

    key: str = ""
    model: type[Record] = Record

    @property
    def items(self) -> list[Any]:
        return [self.model(item) for item in self.data.get(self.key) or []]

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.data.get(self.key) or [])


@dataclass(frozen=True, slots=True)
class ActionResponse(Response):
    """Reply of an action endpoint; ``action`` is required."""

    @property
    def action(self) -> Action:
        return Action(self._required("action"))


@dataclass(frozen=True, slots=True)
class ConsoleResponse(ActionResponse):
    """Reply of ``request_console``."""

    @property
    def wss_url(self) -> str:
        return self._required("wss_url")

    @property
    def password(self) -> str:
        return self._required("password")


@dataclass(frozen=True, slots=True)
class ZoneFileResponse(Response):
    """Reply of a zone export."""

    @property
    def zone_file(self) -> str:
        return self.data.get("zone_file") or ""


__all__ = [
    "ActionResponse",
    "CollectionResponse",
    "ConsoleResponse",
    "EntityResponse",
    "Response",
    "ZoneFileResponse",
    "decode_body",
]
