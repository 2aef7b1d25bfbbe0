"""Pricing information."""

from __future__ import annotations

from ..models import Pricing
from ..responses import EntityResponse
from .base import ResourceBase


class BillingResource(ResourceBase):
    def list_pricing(self) -> EntityResponse:
        """Return all prices, in the account currency, for every billable resource."""
        return self._entity("billing.list_pricing", key="pricing", model=Pricing)
