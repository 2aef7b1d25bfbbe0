"""Primary IP operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, PrimaryIP
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class PrimaryIPsResource(ResourceBase):
    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = PrimaryIPActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            "primary_ips.list", key="primary_ips", model=PrimaryIP, parameters=parameters
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[PrimaryIP]:
        return self._iterate(
            "primary_ips.list", key="primary_ips", model=PrimaryIP, parameters=parameters
        )

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "primary_ips.create", key="primary_ip", model=PrimaryIP, parameters=parameters
        )

    def retrieve(self, primary_ip_id: str | int) -> EntityResponse:
        return self._entity(
            "primary_ips.retrieve", primary_ip_id, key="primary_ip", model=PrimaryIP
        )

    def update(self, primary_ip_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "primary_ips.update",
            primary_ip_id,
            key="primary_ip",
            model=PrimaryIP,
            parameters=parameters,
        )

    def delete(self, primary_ip_id: str | int) -> Response:
        return self._delete("primary_ips.delete", primary_ip_id)


class PrimaryIPActionsResource(ResourceBase):
    def list_all(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        """List actions across every primary IP of the project."""
        return self._list(
            "primary_ip_actions.list_all", key="actions", model=Action, parameters=parameters
        )

    def retrieve_by_id(self, action_id: str | int) -> ActionResponse:
        return self._action("primary_ip_actions.retrieve_by_id", action_id)

    def list(
        self, primary_ip_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "primary_ip_actions.list",
            primary_ip_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )

    def retrieve(self, primary_ip_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("primary_ip_actions.retrieve", primary_ip_id, action_id)

    def assign(self, primary_ip_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        """Assign to a resource (``assignee_id``, ``assignee_type``); the resource must be off."""
        return self._action("primary_ip_actions.assign", primary_ip_id, parameters=parameters)

    def unassign(self, primary_ip_id: str | int) -> ActionResponse:
        return self._action("primary_ip_actions.unassign", primary_ip_id)

    def change_reverse_dns(
        self, primary_ip_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action(
            "primary_ip_actions.change_dns_ptr", primary_ip_id, parameters=parameters
        )

    def change_protection(
        self, primary_ip_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action(
            "primary_ip_actions.change_protection", primary_ip_id, parameters=parameters
        )
