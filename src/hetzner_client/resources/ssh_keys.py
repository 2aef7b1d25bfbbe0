"""SSH key operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import SshKey
from ..responses import CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class SshKeysResource(ResourceBase):
    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("ssh_keys.list", key="ssh_keys", model=SshKey, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[SshKey]:
        return self._iterate("ssh_keys.list", key="ssh_keys", model=SshKey, parameters=parameters)

    def get_by_name(self, name: str) -> SshKey | None:
        return self._find_by_name("ssh_keys.list", key="ssh_keys", model=SshKey, name=name)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("ssh_keys.create", key="ssh_key", model=SshKey, parameters=parameters)

    def retrieve(self, ssh_key_id: str | int) -> EntityResponse:
        return self._entity("ssh_keys.retrieve", ssh_key_id, key="ssh_key", model=SshKey)

    def update(self, ssh_key_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "ssh_keys.update", ssh_key_id, key="ssh_key", model=SshKey, parameters=parameters
        )

    def delete(self, ssh_key_id: str | int) -> Response:
        return self._delete("ssh_keys.delete", ssh_key_id)
