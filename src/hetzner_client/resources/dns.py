"""DNS zones, zone actions and RRsets."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, DnsZone, RRSet
from ..responses import (
    ActionResponse,
    CollectionResponse,
    EntityResponse,
    Response,
    ZoneFileResponse,
)
from .base import ResourceBase

Zone = str | int


class DnsZonesResource(ResourceBase):
    """Manage DNS zones.

    A zone is addressed either by its numeric ID or by its name
    (``example.com``); both are accepted wherever ``zone`` appears.
    """

    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = DnsZoneActionsResource(transport)
        self.rrsets = DnsRrsetsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("zones.list", key="zones", model=DnsZone, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[DnsZone]:
        return self._iterate("zones.list", key="zones", model=DnsZone, parameters=parameters)

    def create(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("zones.create", key="zone", model=DnsZone, parameters=parameters)

    def retrieve(self, zone: Zone) -> EntityResponse:
        return self._entity("zones.retrieve", zone, key="zone", model=DnsZone)

    def update(self, zone: Zone, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("zones.update", zone, key="zone", model=DnsZone, parameters=parameters)

    def delete(self, zone: Zone) -> Response:
        return self._delete("zones.delete", zone)

    def export(self, zone: Zone) -> ZoneFileResponse:
        """Export the zone in BIND zone file format."""
        return self._call("zones.export", zone, response_type=ZoneFileResponse)

    def import_zone(self, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("zones.import", key="zone", model=DnsZone, parameters=parameters)


class DnsZoneActionsResource(ResourceBase):
    def list(self, zone: Zone, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("zone_actions.list", zone, key="actions", model=Action, parameters=parameters)

    def retrieve(self, zone: Zone, action_id: str | int) -> ActionResponse:
        return self._action("zone_actions.retrieve", zone, action_id)

    def change_default_ttl(self, zone: Zone, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("zone_actions.change_default_ttl", zone, parameters=parameters)

    def change_nameservers(self, zone: Zone, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("zone_actions.change_nameservers", zone, parameters=parameters)

    def change_protection(self, zone: Zone, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("zone_actions.change_protection", zone, parameters=parameters)


class DnsRrsetsResource(ResourceBase):
    """Resource record sets, addressed by zone, record name and record type.

    The zone apex is named ``@``.
    """

    def list(self, zone: Zone, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("rrsets.list", zone, key="rrsets", model=RRSet, parameters=parameters)

    def iter_all(self, zone: Zone, parameters: Mapping[str, Any] | None = None) -> Iterator[RRSet]:
        return self._iterate("rrsets.list", zone, key="rrsets", model=RRSet, parameters=parameters)

    def create(self, zone: Zone, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity("rrsets.create", zone, key="rrset", model=RRSet, parameters=parameters)

    def retrieve(self, zone: Zone, name: str, rr_type: str) -> EntityResponse:
        return self._entity("rrsets.retrieve", zone, name, rr_type, key="rrset", model=RRSet)

    def update(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> EntityResponse:
        return self._entity(
            "rrsets.update", zone, name, rr_type, key="rrset", model=RRSet, parameters=parameters
        )

    def delete(self, zone: Zone, name: str, rr_type: str) -> ActionResponse:
        return self._action("rrsets.delete", zone, name, rr_type)

    def change_protection(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("rrsets.change_protection", zone, name, rr_type, parameters=parameters)

    def change_ttl(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("rrsets.change_ttl", zone, name, rr_type, parameters=parameters)

    def set_records(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("rrsets.set_records", zone, name, rr_type, parameters=parameters)

    def add_records(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("rrsets.add_records", zone, name, rr_type, parameters=parameters)

    def remove_records(
        self, zone: Zone, name: str, rr_type: str, parameters: Mapping[str, Any]
    ) -> ActionResponse:
        return self._action("rrsets.remove_records", zone, name, rr_type, parameters=parameters)
