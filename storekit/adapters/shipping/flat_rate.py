"""Flat rate shipping adapter.

Implements ShippingPort with a single cost per destination and a
uniform delivery estimate.
"""

from collections.abc import Mapping

from storekit.core.models import ShippingQuote
from storekit.core.ports import ShippingPort


class FlatRateShippingAdapter(ShippingPort):
    """Quotes shipping from a destination -> cost table."""

    def __init__(self, rates: Mapping[str, float], estimated_days: int = 2):
        """Initialize the flat rate adapter.

        Args:
            rates: Destination country code -> shipping cost.
            estimated_days: Delivery estimate used for every destination.
        """
        self.rates = {dest.upper(): cost for dest, cost in rates.items()}
        self.estimated_days = estimated_days

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        cost = self.rates.get(destination.upper())
        if cost is None:
            return None
        return ShippingQuote(cost=cost, estimated_days=self.estimated_days)
