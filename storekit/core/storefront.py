"""Storefront service: orchestrates calls to external collaborators.

Each operation is thin glue between the storefront's rules and one
collaborator port. Collaborator failures on the order path are turned
into structured results instead of being propagated.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime

from .models import CreditCard, Order, OrderResult, PaymentStatus
from .ports import (
    AnalyticsPort,
    CurrencyPort,
    EmailPort,
    PaymentPort,
    SecurityCodePort,
    ShippingPort,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

HOME_PATH = "/home"
WELCOME_MESSAGE = "Welcome aboard!"
PAYMENT_ERROR = "payment_error"


def is_valid_email(email: str) -> bool:
    """Does email look like an address that can receive mail?"""
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


def _format_amount(amount: float) -> str:
    # Whole amounts print without a trailing ".0"
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


class StorefrontService:
    """Coordinates currency, shipping, analytics, payment and email ports.

    Time-dependent operations read the current time from an injected
    clock so they can be exercised at fixed instants.
    """

    def __init__(
        self,
        currency: CurrencyPort,
        shipping: ShippingPort,
        analytics: AnalyticsPort,
        payment: PaymentPort,
        email: EmailPort,
        security: SecurityCodePort,
        clock: Callable[[], datetime] = datetime.now,
        base_currency: str = "USD",
        opening_hour: int = 8,
        closing_hour: int = 20,
        christmas_discount: float = 0.2,
    ):
        """Initialize the storefront service.

        Args:
            currency: CurrencyPort implementation for exchange rates.
            shipping: ShippingPort implementation for quotes.
            analytics: AnalyticsPort implementation for page views.
            payment: PaymentPort implementation for charges.
            email: EmailPort implementation for outgoing mail.
            security: SecurityCodePort implementation for login codes.
            clock: Returns the current local time.
            base_currency: Currency that prices are expressed in.
            opening_hour: First hour (inclusive) the store is online.
            closing_hour: Hour (exclusive) the store goes offline.
            christmas_discount: Discount fraction applied on December 25.

        Raises:
            ValueError: If opening_hour is not before closing_hour.
        """
        if opening_hour >= closing_hour:
            raise ValueError(
                f"opening_hour ({opening_hour}) must be before "
                f"closing_hour ({closing_hour})"
            )
        self.currency = currency
        self.shipping = shipping
        self.analytics = analytics
        self.payment = payment
        self.email = email
        self.security = security
        self.clock = clock
        self.base_currency = base_currency
        self.opening_hour = opening_hour
        self.closing_hour = closing_hour
        self.christmas_discount = christmas_discount

    def get_price_in_currency(self, price: float, currency: str) -> float:
        """Convert a base-currency price into the target currency.

        Raises:
            ValueError: If the currency is not supported.
        """
        rate = self.currency.get_exchange_rate(self.base_currency, currency)
        logger.debug(f"Exchange rate {self.base_currency}->{currency}: {rate}")
        return price * rate

    def get_shipping_info(self, destination: str) -> str:
        """Describe shipping cost and time to a destination."""
        quote = self.shipping.get_shipping_quote(destination)
        if quote is None:
            logger.debug(f"No shipping quote for {destination}")
            return "Shipping Unavailable"
        return f"Shipping Cost: ${_format_amount(quote.cost)} ({quote.estimated_days} Days)"

    async def render_page(self) -> str:
        """Render the home page and record the view."""
        await self.analytics.track_page_view(HOME_PATH)
        return "<div>content</div>"

    async def submit_order(self, order: Order, card: CreditCard) -> OrderResult:
        """Charge the customer for an order.

        Returns:
            OrderResult(success=True) when the charge went through,
            OrderResult(success=False, error="payment_error") otherwise.
        """
        try:
            result = await self.payment.charge(card, order.total_amount)
        except Exception as e:
            logger.error(f"Payment provider error: {e}", exc_info=True)
            return OrderResult(success=False, error=PAYMENT_ERROR)

        if result.status == PaymentStatus.FAILED:
            logger.warning(f"Charge of {order.total_amount} declined for {card!r}")
            return OrderResult(success=False, error=PAYMENT_ERROR)

        logger.info(f"Order charged: {order.total_amount}")
        return OrderResult(success=True)

    async def sign_up(self, email: str) -> bool:
        """Register an email address and send a welcome message.

        Returns:
            False if the address is invalid, True once the welcome
            message has been sent.
        """
        if not is_valid_email(email):
            logger.info(f"Rejected sign-up for invalid email {email!r}")
            return False

        await self.email.send_email(email, WELCOME_MESSAGE)
        return True

    async def login(self, email: str) -> None:
        """Email a one-time login code to the user."""
        code = self.security.generate_code()
        await self.email.send_email(email, str(code))

    def is_online(self) -> bool:
        """Is the store within its opening hours right now?"""
        current_hour = self.clock().hour
        return self.opening_hour <= current_hour < self.closing_hour

    def get_discount(self) -> float:
        """Return today's store-wide discount fraction."""
        today = self.clock()
        if today.month == 12 and today.day == 25:
            return self.christmas_discount
        return 0
