"""Read-only catalog families: ISOs, locations, server types and load balancer types."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Iso, LoadBalancerType, Location, Record, ServerType
from ..responses import CollectionResponse, EntityResponse
from .base import ResourceBase


class _CatalogResource(ResourceBase):
    family: str = ""
    collection_key: str = ""
    entity_key: str = ""
    model: type[Record] = Record

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            f"{self.family}.list",
            key=self.collection_key,
            model=self.model,
            parameters=parameters,
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Any]:
        return self._iterate(
            f"{self.family}.list",
            key=self.collection_key,
            model=self.model,
            parameters=parameters,
        )

    def retrieve(self, identifier: str | int) -> EntityResponse:
        return self._entity(
            f"{self.family}.retrieve", identifier, key=self.entity_key, model=self.model
        )

    def get_by_name(self, name: str) -> Any | None:
        return self._find_by_name(
            f"{self.family}.list", key=self.collection_key, model=self.model, name=name
        )


class IsosResource(_CatalogResource):
    family = "isos"
    collection_key = "isos"
    entity_key = "iso"
    model = Iso


class LocationsResource(_CatalogResource):
    family = "locations"
    collection_key = "locations"
    entity_key = "location"
    model = Location


class ServerTypesResource(_CatalogResource):
    family = "server_types"
    collection_key = "server_types"
    entity_key = "server_type"
    model = ServerType


class LoadBalancerTypesResource(_CatalogResource):
    family = "load_balancer_types"
    collection_key = "load_balancer_types"
    entity_key = "load_balancer_type"
    model = LoadBalancerType
