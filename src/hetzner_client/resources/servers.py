"""Server operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, Metrics, Server
from ..responses import (
    ActionResponse,
    CollectionResponse,
    ConsoleResponse,
    EntityResponse,
    Response,
)
from .base import ResourceBase


class ServersResource(ResourceBase):
    """Create, inspect and remove cloud servers."""

    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = ServerActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("servers.list", key="servers", model=Server, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Server]:
        return self._iterate("servers.list", key="servers", model=Server, parameters=parameters)

    def get_by_name(self, name: str) -> Server | None:
        return self._find_by_name("servers.list", key="servers", model=Server, name=name)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        """Create a server.

        The reply carries the new server, the creation action, any follow-up
        ``next_actions`` and, when no SSH key was given, a ``root_password``.
        """
        return self._entity("servers.create", key="server", model=Server, parameters=parameters)

    def retrieve(self, server_id: str | int) -> EntityResponse:
        return self._entity("servers.retrieve", server_id, key="server", model=Server)

    def update(self, server_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "servers.update", server_id, key="server", model=Server, parameters=parameters
        )

    def delete(self, server_id: str | int) -> Response:
        return self._delete("servers.delete", server_id)

    def metrics(
        self, server_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> EntityResponse:
        """Fetch time series (``type``, ``start``, ``end``, optional ``step``)."""
        return self._entity(
            "servers.metrics", server_id, key="metrics", model=Metrics, parameters=parameters
        )


class ServerActionsResource(ResourceBase):
    """Power, rebuild, networking and rescue actions on a server."""

    def list(
        self, server_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "server_actions.list", server_id, key="actions", model=Action, parameters=parameters
        )

    def retrieve(self, server_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("server_actions.retrieve", server_id, action_id)

    def power_on(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.poweron", server_id)

    def power_off(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.poweroff", server_id)

    def reboot(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.reboot", server_id)

    def shutdown(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.shutdown", server_id)

    def reset(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.reset", server_id)

    def reset_password(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.reset_password", server_id)

    def change_protection(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.change_protection", server_id, parameters=parameters)

    def change_type(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.change_type", server_id, parameters=parameters)

    def rebuild(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.rebuild", server_id, parameters=parameters)

    def create_image(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.create_image", server_id, parameters=parameters)

    def request_console(self, server_id: str | int) -> ConsoleResponse:
        return self._call(
            "server_actions.request_console", server_id, response_type=ConsoleResponse
        )

    def attach_to_network(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.attach_to_network", server_id, parameters=parameters)

    def detach_from_network(
        self, server_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("server_actions.detach_from_network", server_id, parameters=parameters)

    def change_alias_ips(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.change_alias_ips", server_id, parameters=parameters)

    def attach_iso(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.attach_iso", server_id, parameters=parameters)

    def detach_iso(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.detach_iso", server_id)

    def add_to_placement_group(
        self, server_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action(
            "server_actions.add_to_placement_group", server_id, parameters=parameters
        )

    def remove_from_placement_group(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.remove_from_placement_group", server_id)

    def enable_backups(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.enable_backup", server_id)

    def disable_backups(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.disable_backup", server_id)

    def enable_rescue_mode(
        self, server_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> ActionResponse:
        """Enable rescue mode; the reply also carries the ``root_password``."""
        return self._action("server_actions.enable_rescue", server_id, parameters=parameters)

    def disable_rescue_mode(self, server_id: str | int) -> ActionResponse:
        return self._action("server_actions.disable_rescue", server_id)

    def change_reverse_dns(self, server_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("server_actions.change_dns_ptr", server_id, parameters=parameters)
