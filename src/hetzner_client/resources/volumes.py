"""Volume operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, Volume
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class VolumesResource(ResourceBase):
    """Block storage volumes."""

    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = VolumeActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("volumes.list", key="volumes", model=Volume, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Volume]:
        return self._iterate("volumes.list", key="volumes", model=Volume, parameters=parameters)

    def get_by_name(self, name: str) -> Volume | None:
        """Find a volume by its exact name.

        Args:
            name: The volume name.

        Returns:
            The volume if found, else None.
        """
        return self._find_by_name("volumes.list", key="volumes", model=Volume, name=name)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("volumes.create", key="volume", model=Volume, parameters=parameters)

    def retrieve(self, volume_id: str | int) -> EntityResponse:
        return self._entity("volumes.retrieve", volume_id, key="volume", model=Volume)

    def update(self, volume_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "volumes.update", volume_id, key="volume", model=Volume, parameters=parameters
        )

    def delete(self, volume_id: str | int) -> Response:
        return self._delete("volumes.delete", volume_id)


class VolumeActionsResource(ResourceBase):
    def list(
        self, volume_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "volume_actions.list", volume_id, key="actions", model=Action, parameters=parameters
        )

    def retrieve(self, volume_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("volume_actions.retrieve", volume_id, action_id)

    def attach(self, volume_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        """Attach to a server (``server``, optional ``automount``)."""
        return self._action("volume_actions.attach", volume_id, parameters=parameters)

    def detach(self, volume_id: str | int) -> ActionResponse:
        return self._action("volume_actions.detach", volume_id)

    def resize(self, volume_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        """Grow the volume to ``size`` GB; volumes can not shrink."""
        return self._action("volume_actions.resize", volume_id, parameters=parameters)

    def change_protection(self, volume_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("volume_actions.change_protection", volume_id, parameters=parameters)
