"""Port interfaces for storekit's external collaborators.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory fakes live in tests/fakes/.

All ports are driven ports (the core calls out to adapters):
- CurrencyPort: Exchange rate lookup
- ShippingPort: Shipping quotes per destination
- AnalyticsPort: Page view tracking
- PaymentPort: Card charges
- EmailPort: Outgoing email
- SecurityCodePort: One-time login codes
"""

from abc import ABC, abstractmethod

from .models import ChargeResult, CreditCard, ShippingQuote


class CurrencyPort(ABC):
    """Port for looking up currency exchange rates."""

    @abstractmethod
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return how many units of to_currency one unit of from_currency buys.

        Args:
            from_currency: ISO 4217 code of the source currency.
            to_currency: ISO 4217 code of the target currency.

        Returns:
            A positive exchange rate.

        Raises:
            ValueError: If either currency is not supported.
        """


class ShippingPort(ABC):
    """Port for retrieving shipping quotes."""

    @abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Quote shipping to a destination.

        Args:
            destination: Destination country code.

        Returns:
            ShippingQuote, or None if the destination cannot be served.
        """


class AnalyticsPort(ABC):
    """Port for recording analytics events."""

    @abstractmethod
    async def track_page_view(self, path: str) -> None:
        """Record that the page at path was viewed."""


class PaymentPort(ABC):
    """Port for charging customers.

    Implementations report declined charges through ChargeResult.status
    rather than raising. Exceptions are reserved for the provider itself
    being unavailable.
    """

    @abstractmethod
    async def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        """Charge amount to the given card.

        Args:
            card: Card to charge.
            amount: Amount in the storefront's base currency.

        Returns:
            ChargeResult with SUCCESS or FAILED status.

        Raises:
            Exception: If the payment provider is unreachable.
        """


class EmailPort(ABC):
    """Port for sending email."""

    @abstractmethod
    async def send_email(self, recipient: str, message: str) -> None:
        """Send message to recipient.

        Args:
            recipient: Email address.
            message: Subject line or short body text.

        Raises:
            Exception: If the message could not be handed off.
        """


class SecurityCodePort(ABC):
    """Port for generating one-time security codes."""

    @abstractmethod
    def generate_code(self) -> int:
        """Return a fresh numeric one-time code."""
