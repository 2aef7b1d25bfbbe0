"""Firewall operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, Firewall
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class FirewallsResource(ResourceBase):
    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = FirewallActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("firewalls.list", key="firewalls", model=Firewall, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Firewall]:
        return self._iterate(
            "firewalls.list", key="firewalls", model=Firewall, parameters=parameters
        )

    def get_by_name(self, name: str) -> Firewall | None:
        return self._find_by_name("firewalls.list", key="firewalls", model=Firewall, name=name)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        """Create a firewall; the reply lists one action per resource it was applied to."""
        return self._entity(
            "firewalls.create", key="firewall", model=Firewall, parameters=parameters
        )

    def retrieve(self, firewall_id: str | int) -> EntityResponse:
        return self._entity("firewalls.retrieve", firewall_id, key="firewall", model=Firewall)

    def update(self, firewall_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "firewalls.update", firewall_id, key="firewall", model=Firewall, parameters=parameters
        )

    def delete(self, firewall_id: str | int) -> Response:
        return self._delete("firewalls.delete", firewall_id)


class FirewallActionsResource(ResourceBase):
    def list(
        self, firewall_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "firewall_actions.list", firewall_id, key="actions", model=Action, parameters=parameters
        )

    def retrieve(self, firewall_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("firewall_actions.retrieve", firewall_id, action_id)

    def apply_to_resources(
        self, firewall_id: str | int, parameters: Mapping[str, Any]
    ) -> CollectionResponse:
        return self._list(
            "firewall_actions.apply_to_resources",
            firewall_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )

    def remove_from_resources(
        self, firewall_id: str | int, parameters: Mapping[str, Any]
    ) -> CollectionResponse:
        return self._list(
            "firewall_actions.remove_from_resources",
            firewall_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )

    def set_rules(self, firewall_id: str | int, parameters: Mapping[str, Any]) -> CollectionResponse:
        """Replace all rules; an empty ``rules`` list removes every rule."""
        return self._list(
            "firewall_actions.set_rules",
            firewall_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )
