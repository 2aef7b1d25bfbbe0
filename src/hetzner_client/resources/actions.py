"""Global action lookups."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action
from ..responses import CollectionResponse, EntityResponse
from .base import ResourceBase


class ActionsResource(ResourceBase):
    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        """List actions; the API requires at least one ``id`` filter."""
        return self._list("actions.list", key="actions", model=Action, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Action]:
        return self._iterate("actions.list", key="actions", model=Action, parameters=parameters)

    def retrieve(self, action_id: str | int) -> EntityResponse:
        return self._entity("actions.retrieve", action_id, key="action", model=Action)
