"""Fixed rate currency adapter.

Implements CurrencyPort from a static table of rates, each expressed
against a single reference currency. Cross rates are derived from the
table, so any pair of listed currencies can be converted.
"""

import logging
from collections.abc import Mapping

from storekit.core.ports import CurrencyPort

logger = logging.getLogger(__name__)


class FixedRateCurrencyAdapter(CurrencyPort):
    """Looks up exchange rates in an in-memory table."""

    def __init__(self, rates: Mapping[str, float]):
        """Initialize the fixed rate adapter.

        Args:
            rates: Currency code -> units per one unit of the reference
                currency. The reference currency itself maps to 1.0.

        Raises:
            ValueError: If the table is empty or holds a non-positive rate.
        """
        if not rates:
            raise ValueError("rates must contain at least one currency")
        for code, rate in rates.items():
            if rate <= 0:
                raise ValueError(f"rate for {code} must be positive, got {rate}")
        self.rates = {code.upper(): float(rate) for code, rate in rates.items()}

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return the cross rate between two listed currencies."""
        source = from_currency.upper()
        target = to_currency.upper()
        for code in (source, target):
            if code not in self.rates:
                raise ValueError(f"Unsupported currency: {code}")

        rate = self.rates[target] / self.rates[source]
        logger.debug(f"Rate {source}->{target} = {rate}")
        return rate
