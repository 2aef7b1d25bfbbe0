"""Floating IP operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, FloatingIP
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class FloatingIPsResource(ResourceBase):
    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = FloatingIPActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            "floating_ips.list", key="floating_ips", model=FloatingIP, parameters=parameters
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[FloatingIP]:
        return self._iterate(
            "floating_ips.list", key="floating_ips", model=FloatingIP, parameters=parameters
        )

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        """Create a floating IP; ``type`` plus ``server`` or ``home_location`` are required."""
        return self._entity(
            "floating_ips.create", key="floating_ip", model=FloatingIP, parameters=parameters
        )

    def retrieve(self, floating_ip_id: str | int) -> EntityResponse:
        return self._entity(
            "floating_ips.retrieve", floating_ip_id, key="floating_ip", model=FloatingIP
        )

    def update(self, floating_ip_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "floating_ips.update",
            floating_ip_id,
            key="floating_ip",
            model=FloatingIP,
            parameters=parameters,
        )

    def delete(self, floating_ip_id: str | int) -> Response:
        return self._delete("floating_ips.delete", floating_ip_id)


class FloatingIPActionsResource(ResourceBase):
    def list(
        self, floating_ip_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "floating_ip_actions.list",
            floating_ip_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )

    def retrieve(self, floating_ip_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("floating_ip_actions.retrieve", floating_ip_id, action_id)

    def assign(self, floating_ip_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("floating_ip_actions.assign", floating_ip_id, parameters=parameters)

    def unassign(self, floating_ip_id: str | int) -> ActionResponse:
        return self._action("floating_ip_actions.unassign", floating_ip_id)

    def change_reverse_dns(
        self, floating_ip_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action(
            "floating_ip_actions.change_dns_ptr", floating_ip_id, parameters=parameters
        )

    def change_protection(
        self, floating_ip_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action(
            "floating_ip_actions.change_protection", floating_ip_id, parameters=parameters
        )
