"""High-level Hetzner Cloud REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import requests

from .auth.base import AuthStrategy
from .auth.bearer import BearerTokenAuth
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .operations import build_request
from .resources import (
    ActionsResource,
    BillingResource,
    CertificatesResource,
    DnsZonesResource,
    FirewallsResource,
    FloatingIPsResource,
    ImagesResource,
    IsosResource,
    LoadBalancersResource,
    LoadBalancerTypesResource,
    LocationsResource,
    NetworksResource,
    PlacementGroupsResource,
    PrimaryIPsResource,
    ServersResource,
    ServerTypesResource,
    SshKeysResource,
    VolumesResource,
)
from .responses import Response
from .transport import Transport

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .factory import ClientFactory


logger = logging.getLogger(__name__)


class HetznerClient:
    """Expose every Hetzner Cloud resource family over one shared transport.

    The token and base URL are checked when the client is built; no request
    is sent until a resource method is called. Pass ``transport`` to route
    every call through a custom (for example a fake) transport.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        auth_strategy: AuthStrategy | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool | str = True,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
        transport: Transport | None = None,
    ) -> None:
        if transport is None:
            auth = auth_strategy or BearerTokenAuth(token or "")
            auth.validate()
            config = ClientConfig(
                base_url=base_url,
                timeout=timeout,
                verify_ssl=verify_ssl,
                default_headers=default_headers,
            )
            transport = Transport(config, auth, session=session)
        self._transport = transport
        self.config = transport.config

        self.actions = ActionsResource(transport)
        self.billing = BillingResource(transport)
        self.certificates = CertificatesResource(transport)
        self.dns_zones = DnsZonesResource(transport)
        self.firewalls = FirewallsResource(transport)
        self.floating_ips = FloatingIPsResource(transport)
        self.images = ImagesResource(transport)
        self.isos = IsosResource(transport)
        self.load_balancers = LoadBalancersResource(transport)
        self.load_balancer_types = LoadBalancerTypesResource(transport)
        self.locations = LocationsResource(transport)
        self.networks = NetworksResource(transport)
        self.placement_groups = PlacementGroupsResource(transport)
        self.primary_ips = PrimaryIPsResource(transport)
        self.servers = ServersResource(transport)
        self.server_types = ServerTypesResource(transport)
        self.ssh_keys = SshKeysResource(transport)
        self.volumes = VolumesResource(transport)
        logger.debug("Hetzner client ready for %s", self.config.base_url)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> HetznerClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    @property
    def transport(self) -> Transport:
        return self._transport

    def request(
        self,
        operation_id: str,
        *path_params: str | int,
        parameters: Mapping[str, Any] | None = None,
    ) -> Response:
        """Dispatch any operation from the endpoint table by its identifier.

        >>> client.request("servers.retrieve", 42).get("server")
        """

        api_request = build_request(operation_id, *path_params, parameters=parameters)
        return self._transport.dispatch(api_request)

    def close(self) -> None:
        self._transport.close()

    @staticmethod
    def factory() -> ClientFactory:
        from .factory import ClientFactory

        return ClientFactory()
