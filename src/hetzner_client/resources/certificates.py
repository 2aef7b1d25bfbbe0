"""TLS certificate operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Certificate
from ..responses import CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class CertificatesResource(ResourceBase):
    """Uploaded and managed (Let's Encrypt) certificates."""

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list(
            "certificates.list", key="certificates", model=Certificate, parameters=parameters
        )

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Certificate]:
        return self._iterate(
            "certificates.list", key="certificates", model=Certificate, parameters=parameters
        )

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "certificates.create", key="certificate", model=Certificate, parameters=parameters
        )

    def retrieve(self, certificate_id: str | int) -> EntityResponse:
        return self._entity(
            "certificates.retrieve", certificate_id, key="certificate", model=Certificate
        )

    def update(self, certificate_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "certificates.update",
            certificate_id,
            key="certificate",
            model=Certificate,
            parameters=parameters,
        )

    def delete(self, certificate_id: str | int) -> Response:
        return self._delete("certificates.delete", certificate_id)
