"""Placement group operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import PlacementGroup
from ..responses import CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class PlacementGroupsResource(ResourceBase):
    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            "placement_groups.list",
            key="placement_groups",
            model=PlacementGroup,
            parameters=parameters,
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[PlacementGroup]:
        return self._iterate(
            "placement_groups.list",
            key="placement_groups",
            model=PlacementGroup,
            parameters=parameters,
        )

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "placement_groups.create",
            key="placement_group",
            model=PlacementGroup,
            parameters=parameters,
        )

    def retrieve(self, placement_group_id: str | int) -> EntityResponse:
        return self._entity(
            "placement_groups.retrieve",
            placement_group_id,
            key="placement_group",
            model=PlacementGroup,
        )

    def update(
        self, placement_group_id: str | int, parameters: Mapping[str, Any]
    ) -> EntityResponse:
        return self._entity(
            "placement_groups.update",
            placement_group_id,
            key="placement_group",
            model=PlacementGroup,
            parameters=parameters,
        )

    def delete(self, placement_group_id: str | int) -> Response:
        return self._delete("placement_groups.delete", placement_group_id)
