"""Endpoint table and the generic request builder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from string import Formatter
from typing import Any
from urllib.parse import quote

from .request import ApiRequest, PayloadPolicy

QUERY = PayloadPolicy.QUERY
BODY = PayloadPolicy.BODY
NONE = PayloadPolicy.NONE


@dataclass(frozen=True, slots=True)
class Operation:
    """HTTP method, URI template and payload policy of one endpoint."""

    method: str
    template: str
    policy: PayloadPolicy

    @property
    def path_parameters(self) -> tuple[str, ...]:
        return tuple(name for _, name, _, _ in Formatter().parse(self.template) if name)


def _list(template: str) -> Operation:
    return Operation("GET", template, QUERY)


def _get(template: str) -> Operation:
    return Operation("GET", template, NONE)


def _post(template: str) -> Operation:
    return Operation("POST", template, BODY)


def _put(template: str) -> Operation:
    return Operation("PUT", template, BODY)


def _delete(template: str) -> Operation:
    return Operation("DELETE", template, NONE)


def _crud(family: str, path: str, id_name: str, *, create: bool = True) -> dict[str, Operation]:
    item = f"{path}/{{{id_name}}}"
    table = {
        f"{family}.list": _list(path),
        f"{family}.retrieve": _get(item),
        f"{family}.update": _put(item),
        f"{family}.delete": _delete(item),
    }
    if create:
        table[f"{family}.create"] = _post(path)
    return table


def _actions(family: str, path: str, id_name: str, *verbs: str) -> dict[str, Operation]:
    base = f"{path}/{{{id_name}}}/actions"
    table = {
        f"{family}.list": _list(base),
        f"{family}.retrieve": _get(f"{base}/{{action_id}}"),
    }
    for verb in verbs:
        table[f"{family}.{verb}"] = _post(f"{base}/{verb}")
    return table


_RRSET = "/v1/zones/{zone}/rrsets/{rr_name}/{rr_type}"

OPERATIONS: dict[str, Operation] = {
    # Global actions
    "actions.list": _list("/v1/actions"),
    "actions.retrieve": _get("/v1/actions/{action_id}"),
    # Billing
    "billing.list_pricing": _list("/v1/pricing"),
    # Certificates
    **_crud("certificates", "/v1/certificates", "certificate_id"),
    # Servers
    **_crud("servers", "/v1/servers", "server_id"),
    "servers.metrics": _list("/v1/servers/{server_id}/metrics"),
    **_actions(
        "server_actions",
        "/v1/servers",
        "server_id",
        "poweron",
        "poweroff",
        "reboot",
        "shutdown",
        "reset",
        "reset_password",
        "change_protection",
        "change_type",
        "rebuild",
        "create_image",
        "request_console",
        "attach_to_network",
        "detach_from_network",
        "change_alias_ips",
        "attach_iso",
        "detach_iso",
        "add_to_placement_group",
        "remove_from_placement_group",
        "enable_backup",
        "disable_backup",
        "enable_rescue",
        "disable_rescue",
        "change_dns_ptr",
    ),
    # Server types, locations, ISOs
    "server_types.list": _list("/v1/server_types"),
    "server_types.retrieve": _get("/v1/server_types/{server_type_id}"),
    "locations.list": _list("/v1/locations"),
    "locations.retrieve": _get("/v1/locations/{location_id}"),
    "isos.list": _list("/v1/isos"),
    "isos.retrieve": _get("/v1/isos/{iso_id}"),
    # Images
    **_crud("images", "/v1/images", "image_id", create=False),
    **_actions("image_actions", "/v1/images", "image_id", "change_protection"),
    # SSH keys
    **_crud("ssh_keys", "/v1/ssh_keys", "ssh_key_id"),
    # Placement groups
    **_crud("placement_groups", "/v1/placement_groups", "placement_group_id"),
    # Primary IPs
    **_crud("primary_ips", "/v1/primary_ips", "primary_ip_id"),
    **_actions(
        "primary_ip_actions",
        "/v1/primary_ips",
        "primary_ip_id",
        "assign",
        "unassign",
        "change_dns_ptr",
        "change_protection",
    ),
    "primary_ip_actions.list_all": _list("/v1/primary_ips/actions"),
    "primary_ip_actions.retrieve_by_id": _get("/v1/actions/{action_id}"),
    # Floating IPs
    **_crud("floating_ips", "/v1/floating_ips", "floating_ip_id"),
    **_actions(
        "floating_ip_actions",
        "/v1/floating_ips",
        "floating_ip_id",
        "assign",
        "unassign",
        "change_dns_ptr",
        "change_protection",
    ),
    # Load balancers
    **_crud("load_balancers", "/v1/load_balancers", "load_balancer_id"),
    "load_balancers.metrics": _list("/v1/load_balancers/{load_balancer_id}/metrics"),
    **_actions(
        "load_balancer_actions",
        "/v1/load_balancers",
        "load_balancer_id",
        "add_service",
        "update_service",
        "delete_service",
        "add_target",
        "remove_target",
        "change_algorithm",
        "change_dns_ptr",
        "change_protection",
        "change_type",
        "attach_to_network",
        "detach_from_network",
        "enable_public_interface",
        "disable_public_interface",
    ),
    "load_balancer_types.list": _list("/v1/load_balancer_types"),
    "load_balancer_types.retrieve": _get("/v1/load_balancer_types/{load_balancer_type_id}"),
    # Volumes
    **_crud("volumes", "/v1/volumes", "volume_id"),
    **_actions(
        "volume_actions",
        "/v1/volumes",
        "volume_id",
        "attach",
        "detach",
        "resize",
        "change_protection",
    ),
    # Firewalls
    **_crud("firewalls", "/v1/firewalls", "firewall_id"),
    **_actions(
        "firewall_actions",
        "/v1/firewalls",
        "firewall_id",
        "apply_to_resources",
        "remove_from_resources",
        "set_rules",
    ),
    # Networks
    **_crud("networks", "/v1/networks", "network_id"),
    **_actions(
        "network_actions",
        "/v1/networks",
        "network_id",
        "add_route",
        "delete_route",
        "add_subnet",
        "delete_subnet",
        "change_ip_range",
        "change_protection",
    ),
    # DNS zones
    **_crud("zones", "/v1/zones", "zone"),
    "zones.export": _get("/v1/zones/{zone}/export"),
    "zones.import": _post("/v1/zones/import"),
    **_actions(
        "zone_actions",
        "/v1/zones",
        "zone",
        "change_default_ttl",
        "change_nameservers",
        "change_protection",
    ),
    "rrsets.list": _list("/v1/zones/{zone}/rrsets"),
    "rrsets.create": _post("/v1/zones/{zone}/rrsets"),
    "rrsets.retrieve": _get(_RRSET),
    "rrsets.update": _put(_RRSET),
    "rrsets.delete": _delete(_RRSET),
    "rrsets.change_protection": _post(f"{_RRSET}/actions/change_protection"),
    "rrsets.change_ttl": _post(f"{_RRSET}/actions/change_ttl"),
    "rrsets.set_records": _post(f"{_RRSET}/actions/set_records"),
    "rrsets.add_records": _post(f"{_RRSET}/actions/add_records"),
    "rrsets.remove_records": _post(f"{_RRSET}/actions/remove_records"),
}


def get_operation(operation_id: str) -> Operation:
    try:
        return OPERATIONS[operation_id]
    except KeyError:
        raise KeyError(f"Unknown operation: {operation_id}") from None


def build_request(
    operation_id: str,
    *path_params: str | int,
    parameters: Mapping[str, Any] | None = None,
) -> ApiRequest:
    """Build the `ApiRequest` for ``operation_id`` with its path parameters substituted."""

    operation = get_operation(operation_id)
    names = operation.path_parameters
    if len(path_params) != len(names):
        raise TypeError(
            f"{operation_id} expects {len(names)} path parameter(s) "
            f"({', '.join(names) or 'none'}), got {len(path_params)}"
        )
    substitutions: dict[str, str] = {}
    for name, value in zip(names, path_params):
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValueError(f"Path parameter '{name}' of {operation_id} must not be empty.")
        substitutions[name] = quote(text, safe="@")

    if parameters and operation.policy is PayloadPolicy.NONE:
        raise ValueError(f"{operation_id} does not accept parameters.")

    return ApiRequest(
        operation_id=operation_id,
        method=operation.method,
        uri=operation.template.format(**substitutions),
        parameters=dict(parameters or {}),
        policy=operation.policy,
    )


__all__ = ["OPERATIONS", "Operation", "build_request", "get_operation"]
