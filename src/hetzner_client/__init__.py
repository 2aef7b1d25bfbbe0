"""High-level Hetzner Cloud client entrypoints."""
from .auth import AuthStrategy, BearerTokenAuth
from .client import HetznerClient
from .config import ClientConfig
from .exceptions import (
    ApiError,
    ConfigurationError,
    HetznerError,
    InvalidResponseBody,
    MissingFieldError,
    PaginationError,
    SerializationError,
    TransportError,
)
from .factory import ClientFactory
from .meta import MetaInformation
from .pagination import PaginationView
from .request import ApiRequest, PayloadPolicy
from .responses import Response

__all__ = [
    "HetznerClient",
    "ClientFactory",
    "ClientConfig",
    "AuthStrategy",
    "BearerTokenAuth",
    "ApiRequest",
    "PayloadPolicy",
    "Response",
    "MetaInformation",
    "PaginationView",
    "HetznerError",
    "ApiError",
    "ConfigurationError",
    "InvalidResponseBody",
    "MissingFieldError",
    "PaginationError",
    "SerializationError",
    "TransportError",
]
