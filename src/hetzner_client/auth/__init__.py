"""Authentication strategies for the Hetzner Cloud API."""
from .base import AuthStrategy
from .bearer import BearerTokenAuth

__all__ = ["AuthStrategy", "BearerTokenAuth"]
