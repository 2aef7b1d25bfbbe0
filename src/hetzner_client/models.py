"""Read-only views over decoded API objects.

Every field is declared either required or optional. Reading a required
field whose key is absent raises `MissingFieldError`; an optional field
falls back to its declared default (``None`` or an empty container). A key
that is present with a JSON ``null`` value reads as ``None`` in both cases.
Nested objects are wrapped into their record type on every access.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import MissingFieldError

_MISSING = object()


class field:  # noqa: N801 - reads like ``property`` at declaration sites
    """Descriptor exposing one key of the underlying mapping."""

    def __init__(
        self,
        key: str | None = None,
        *,
        required: bool = True,
        default: Any = None,
        factory: Callable[[], Any] | None = None,
        model: type[Record] | None = None,
        many: bool = False,
    ) -> None:
        self.key = key
        self.required = required
        self.default = default
        self.factory = factory
        self.model = model
        self.many = many
        self.name = key or ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.key is None:
            self.key = name

    def __get__(self, instance: Record | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        value = instance._data.get(self.key, _MISSING)
        if value is _MISSING:
            if self.required:
                raise MissingFieldError(self.key, owner=type(instance).__name__)
            return self.factory() if self.factory is not None else self.default
        if value is None or self.model is None:
            return value
        if self.many:
            return [self.model(item) for item in value]
        return self.model(value)


def optional(key: str | None = None, **kwargs: Any) -> field:
    return field(key, required=False, **kwargs)


class Record:
    """Base class for typed views; wraps the decoded mapping without copying it."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        if not isinstance(data, Mapping):
            raise TypeError(f"{type(self).__name__} expects a mapping, got {type(data).__name__}")
        self._data = data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and dict(self._data) == dict(other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        ident = self._data.get("id")
        name = self._data.get("name")
        return f"{type(self).__name__}(id={ident!r}, name={name!r})"


class Action(Record):
    """An asynchronous task triggered by the API."""

    id = field()
    command = field()
    status = field()
    progress = field()
    started = field()
    finished = optional()
    resources = optional(factory=list)
    error = optional()

    @property
    def is_running(self) -> bool:
        return self.status == "running"


class Location(Record):
    id = field()
    name = field()
    description = optional()
    country = optional()
    city = optional()
    latitude = optional()
    longitude = optional()
    network_zone = optional()


class Datacenter(Record):
    id = field()
    name = field()
    description = optional()
    location = field(model=Location)
    server_types = optional(factory=dict)


class ServerType(Record):
    id = field()
    name = field()
    description = optional()
    cores = field()
    memory = field()
    disk = field()
    storage_type = optional()
    cpu_type = optional()
    architecture = optional()
    deprecated = optional()
    prices = optional(factory=list)


class Image(Record):
    id = field()
    type = field()
    status = field()
    name = optional()
    description = optional()
    image_size = optional()
    disk_size = optional()
    created = optional()
    os_flavor = optional()
    os_version = optional()
    rapid_deploy = optional(default=False)
    architecture = optional()
    protection = optional(factory=dict)
    labels = optional(factory=dict)


class Iso(Record):
    id = field()
    name = field()
    description = optional()
    type = optional()
    architecture = optional()
    deprecation = optional()


class Server(Record):
    """A cloud server.

    The identity, state, placement and protection fields are required; network
    attachments, traffic counters and labels are optional.
    """

    id = field()
    name = field()
    status = field()
    created = field()
    public_net = field()
    private_net = optional(factory=list)
    server_type = field(model=ServerType)
    datacenter = field(model=Datacenter)
    image = field(model=Image)
    iso = optional(model=Iso)
    rescue_enabled = field()
    locked = field()
    backup_window = optional()
    outgoing_traffic = optional()
    ingoing_traffic = optional()
    included_traffic = optional()
    protection = field()
    labels = optional(factory=dict)
    volumes = optional(factory=list)
    load_balancers = optional(factory=list)
    placement_group = optional()
    primary_disk_size = optional()


class SshKey(Record):
    id = field()
    name = field()
    fingerprint = field()
    public_key = field()
    labels = optional(factory=dict)
    created = optional()


class Certificate(Record):
    id = field()
    name = field()
    type = optional()
    certificate = optional()
    domain_names = optional(factory=list)
    fingerprint = optional()
    not_valid_before = optional()
    not_valid_after = optional()
    status = optional()
    used_by = optional(factory=list)
    labels = optional(factory=dict)
    created = optional()


class Volume(Record):
    id = field()
    name = field()
    size = field()
    server = optional()
    location = field(model=Location)
    linux_device = optional()
    format = optional()
    status = field()
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class Network(Record):
    id = field()
    name = field()
    ip_range = field()
    subnets = optional(factory=list)
    routes = optional(factory=list)
    servers = optional(factory=list)
    load_balancers = optional(factory=list)
    expose_routes_to_vswitch = optional(default=False)
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class Firewall(Record):
    id = field()
    name = field()
    rules = optional(factory=list)
    applied_to = optional(factory=list)
    labels = optional(factory=dict)
    created = optional()


class FloatingIP(Record):
    id = field()
    name = optional()
    description = optional()
    ip = field()
    type = field()
    server = optional()
    dns_ptr = optional(factory=list)
    home_location = field(model=Location)
    blocked = optional(default=False)
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class PrimaryIP(Record):
    id = field()
    name = field()
    ip = field()
    type = field()
    assignee_id = optional()
    assignee_type = optional()
    auto_delete = optional(default=False)
    blocked = optional(default=False)
    datacenter = optional(model=Datacenter)
    dns_ptr = optional(factory=list)
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class PlacementGroup(Record):
    id = field()
    name = field()
    type = field()
    servers = optional(factory=list)
    labels = optional(factory=dict)
    created = optional()


class LoadBalancerType(Record):
    id = field()
    name = field()
    description = optional()
    max_connections = optional()
    max_services = optional()
    max_targets = optional()
    max_assigned_certificates = optional()
    prices = optional(factory=list)


class LoadBalancer(Record):
    id = field()
    name = field()
    public_net = field()
    private_net = optional(factory=list)
    location = field(model=Location)
    load_balancer_type = field(model=LoadBalancerType)
    algorithm = optional(factory=dict)
    services = optional(factory=list)
    targets = optional(factory=list)
    outgoing_traffic = optional()
    ingoing_traffic = optional()
    included_traffic = optional()
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class Metrics(Record):
    start = field()
    end = field()
    step = field()
    time_series = optional(factory=dict)

    def series(self, name: str) -> list[Any]:
        return list(((self.time_series or {}).get(name) or {}).get("values", []))


class Pricing(Record):
    currency = field()
    vat_rate = field()
    image = optional()
    floating_ip = optional()
    floating_ips = optional(factory=list)
    primary_ips = optional(factory=list)
    server_backup = optional()
    server_types = optional(factory=list)
    load_balancer_types = optional(factory=list)
    volume = optional()
    traffic = optional()


class DnsZone(Record):
    id = field()
    name = field()
    ttl = optional()
    mode = optional()
    status = optional()
    record_count = optional()
    primary_nameservers = optional(factory=list)
    authoritative_nameservers = optional(factory=dict)
    registrar = optional()
    protection = optional(factory=dict)
    labels = optional(factory=dict)
    created = optional()


class RRSet(Record):
    id = optional()
    name = field()
    type = field()
    ttl = optional()
    records = optional(factory=list)
    zone = optional()
    protection = optional(factory=dict)
    labels = optional(factory=dict)

    def values(self) -> list[Any]:
        return [record.get("value") for record in self.records if isinstance(record, Mapping)]

    def __repr__(self) -> str:
        return f"RRSet(name={self._data.get('name')!r}, type={self._data.get('type')!r})"


__all__ = [
    "Action",
    "Certificate",
    "Datacenter",
    "DnsZone",
    "Firewall",
    "FloatingIP",
    "Image",
    "Iso",
    "LoadBalancer",
    "LoadBalancerType",
    "Location",
    "Metrics",
    "Network",
    "PlacementGroup",
    "Pricing",
    "PrimaryIP",
    "RRSet",
    "Record",
    "Server",
    "ServerType",
    "SshKey",
    "Volume",
    "field",
    "optional",
]
