"""Load balancer operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, LoadBalancer, Metrics
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class LoadBalancersResource(ResourceBase):
    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = LoadBalancerActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            "load_balancers.list", key="load_balancers", model=LoadBalancer, parameters=parameters
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[LoadBalancer]:
        return self._iterate(
            "load_balancers.list", key="load_balancers", model=LoadBalancer, parameters=parameters
        )

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "load_balancers.create", key="load_balancer", model=LoadBalancer, parameters=parameters
        )

    def retrieve(self, load_balancer_id: str | int) -> EntityResponse:
        return self._entity(
            "load_balancers.retrieve", load_balancer_id, key="load_balancer", model=LoadBalancer
        )

    def update(self, load_balancer_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "load_balancers.update",
            load_balancer_id,
            key="load_balancer",
            model=LoadBalancer,
            parameters=parameters,
        )

    def delete(self, load_balancer_id: str | int) -> Response:
        return self._delete("load_balancers.delete", load_balancer_id)

    def metrics(self, load_balancer_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "load_balancers.metrics",
            load_balancer_id,
            key="metrics",
            model=Metrics,
            parameters=parameters,
        )


class LoadBalancerActionsResource(ResourceBase):
    """Services, targets, networking and protection of a load balancer."""

    def list(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "load_balancer_actions.list",
            load_balancer_id,
            key="actions",
            model=Action,
            parameters=parameters,
        )

    def retrieve(self, load_balancer_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("load_balancer_actions.retrieve", load_balancer_id, action_id)

    def _verb(
        self, verb: str, load_balancer_id: str | int, parameters: Mapping[str, Any] | None
    ) -> ActionResponse:
        return self._action(
            f"load_balancer_actions.{verb}", load_balancer_id, parameters=parameters
        )

    def add_service(self, load_balancer_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._verb("add_service", load_balancer_id, parameters)

    def update_service(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("update_service", load_balancer_id, parameters)

    def delete_service(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        """Remove the service listening on ``listen_port``."""
        return self._verb("delete_service", load_balancer_id, parameters)

    def add_target(self, load_balancer_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._verb("add_target", load_balancer_id, parameters)

    def remove_target(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("remove_target", load_balancer_id, parameters)

    def change_algorithm(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("change_algorithm", load_balancer_id, parameters)

    def change_reverse_dns(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("change_dns_ptr", load_balancer_id, parameters)

    def change_protection(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("change_protection", load_balancer_id, parameters)

    def change_type(self, load_balancer_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._verb("change_type", load_balancer_id, parameters)

    def attach_to_network(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("attach_to_network", load_balancer_id, parameters)

    def detach_from_network(
        self, load_balancer_id: str | int, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._verb("detach_from_network", load_balancer_id, parameters)

    def enable_public_interface(self, load_balancer_id: str | int) -> ActionResponse:
        return self._verb("enable_public_interface", load_balancer_id, None)

    def disable_public_interface(self, load_balancer_id: str | int) -> ActionResponse:
        return self._verb("disable_public_interface", load_balancer_id, None)
