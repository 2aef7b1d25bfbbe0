"""Resource-family wrappers over the operation table."""
from .actions import ActionsResource
from .billing import BillingResource
from .catalog import IsosResource, LoadBalancerTypesResource, LocationsResource, ServerTypesResource
from .certificates import CertificatesResource
from .dns import DnsRrsetsResource, DnsZoneActionsResource, DnsZonesResource
from .firewalls import FirewallActionsResource, FirewallsResource
from .floating_ips import FloatingIPActionsResource, FloatingIPsResource
from .images import ImageActionsResource, ImagesResource
from .load_balancers import LoadBalancerActionsResource, LoadBalancersResource
from .networks import NetworkActionsResource, NetworksResource
from .placement_groups import PlacementGroupsResource
from .primary_ips import PrimaryIPActionsResource, PrimaryIPsResource
from .servers import ServerActionsResource, ServersResource
from .ssh_keys import SshKeysResource
from .volumes import VolumeActionsResource, VolumesResource

__all__ = [
    "ActionsResource",
    "BillingResource",
    "CertificatesResource",
    "DnsRrsetsResource",
    "DnsZoneActionsResource",
    "DnsZonesResource",
    "FirewallActionsResource",
    "FirewallsResource",
    "FloatingIPActionsResource",
    "FloatingIPsResource",
    "ImageActionsResource",
    "ImagesResource",
    "IsosResource",
    "LoadBalancerActionsResource",
    "LoadBalancerTypesResource",
    "LoadBalancersResource",
    "LocationsResource",
    "NetworkActionsResource",
    "NetworksResource",
    "PlacementGroupsResource",
    "PrimaryIPActionsResource",
    "PrimaryIPsResource",
    "ServerActionsResource",
    "ServerTypesResource",
    "ServersResource",
    "SshKeysResource",
    "VolumeActionsResource",
    "VolumesResource",
]
