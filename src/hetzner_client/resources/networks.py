"""Private network operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, Network
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class NetworksResource(ResourceBase):
    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = NetworkActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("networks.list", key="networks", model=Network, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Network]:
        return self._iterate("networks.list", key="networks", model=Network, parameters=parameters)

    def get_by_name(self, name: str) -> Network | None:
        return self._find_by_name("networks.list", key="networks", model=Network, name=name)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("networks.create", key="network", model=Network, parameters=parameters)

    def retrieve(self, network_id: str | int) -> EntityResponse:
        return self._entity("networks.retrieve", network_id, key="network", model=Network)

    def update(self, network_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "networks.update", network_id, key="network", model=Network, parameters=parameters
        )

    def delete(self, network_id: str | int) -> Response:
        return self._delete("networks.delete", network_id)


class NetworkActionsResource(ResourceBase):
    """Routes, subnets and IP range of a network.

    Routes and subnets have no identifier of their own: ``delete_route`` takes
    the ``destination`` and ``gateway`` of the route, ``delete_subnet`` the
    ``ip_range`` of the subnet.
    """

    def list(
        self, network_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "network_actions.list", network_id, key="actions", model=Action, parameters=parameters
        )

    def retrieve(self, network_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("network_actions.retrieve", network_id, action_id)

    def add_route(self, network_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("network_actions.add_route", network_id, parameters=parameters)

    def delete_route(self, network_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("network_actions.delete_route", network_id, parameters=parameters)

    def add_subnet(self, network_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("network_actions.add_subnet", network_id, parameters=parameters)

    def delete_subnet(self, network_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("network_actions.delete_subnet", network_id, parameters=parameters)

    def change_ip_range(self, network_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("network_actions.change_ip_range", network_id, parameters=parameters)

    def change_protection(
        self, network_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("network_actions.change_protection", network_id, parameters=parameters)
