"""Unit tests for the StorefrontService.

Collaborators are replaced with in-memory fakes; time-dependent
operations run against a fixed clock.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from storekit.core.models import (
    ChargeResult,
    CreditCard,
    Order,
    OrderResult,
    PaymentStatus,
    ShippingQuote,
)
from storekit.core.storefront import StorefrontService, is_valid_email
from storekit.tests.fakes import (
    FakeAnalyticsPort,
    FakeCurrencyPort,
    FakeEmailPort,
    FakePaymentPort,
    FakeSecurityCodePort,
    FakeShippingPort,
)

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def currency() -> FakeCurrencyPort:
    return FakeCurrencyPort()


@pytest.fixture
def shipping() -> FakeShippingPort:
    return FakeShippingPort()


@pytest.fixture
def analytics() -> FakeAnalyticsPort:
    return FakeAnalyticsPort()


@pytest.fixture
def payment() -> FakePaymentPort:
    return FakePaymentPort()


@pytest.fixture
def email() -> FakeEmailPort:
    return FakeEmailPort()


@pytest.fixture
def security() -> FakeSecurityCodePort:
    return FakeSecurityCodePort(codes=[424242])


@pytest.fixture
def now() -> list[datetime]:
    """Mutable holder for the instant the fixed clock reports."""
    return [datetime(2024, 1, 1, 12, 0, 0)]


@pytest.fixture
def storefront(
    currency: FakeCurrencyPort,
    shipping: FakeShippingPort,
    analytics: FakeAnalyticsPort,
    payment: FakePaymentPort,
    email: FakeEmailPort,
    security: FakeSecurityCodePort,
    now: list[datetime],
) -> StorefrontService:
    """Create a StorefrontService wired to fakes and a fixed clock."""
    return StorefrontService(
        currency=currency,
        shipping=shipping,
        analytics=analytics,
        payment=payment,
        email=email,
        security=security,
        clock=lambda: now[0],
    )


@pytest.fixture
def order() -> Order:
    return Order(total_amount=10)


@pytest.fixture
def card() -> CreditCard:
    return CreditCard(number="1234")


def test_rejects_inverted_store_hours(
    currency: FakeCurrencyPort,
    shipping: FakeShippingPort,
    analytics: FakeAnalyticsPort,
    payment: FakePaymentPort,
    email: FakeEmailPort,
    security: FakeSecurityCodePort,
) -> None:
    with pytest.raises(ValueError, match="must be before"):
        StorefrontService(
            currency=currency,
            shipping=shipping,
            analytics=analytics,
            payment=payment,
            email=email,
            security=security,
            opening_hour=20,
            closing_hour=8,
        )


# ============================================================================
# get_price_in_currency
# ============================================================================


class TestGetPriceInCurrency:
    """Test currency conversion."""

    def test_converts_with_exchange_rate(
        self, storefront: StorefrontService, currency: FakeCurrencyPort
    ) -> None:
        currency.set_rate("AUD", 1.5)

        assert storefront.get_price_in_currency(10, "AUD") == 15

    def test_looks_up_rate_from_base_currency(
        self, storefront: StorefrontService, currency: FakeCurrencyPort
    ) -> None:
        storefront.get_price_in_currency(10, "EUR")

        assert currency.rate_calls == [("USD", "EUR")]

    def test_unsupported_currency_propagates(
        self, storefront: StorefrontService, currency: FakeCurrencyPort
    ) -> None:
        currency.set_should_fail(True, "Unsupported currency: XYZ")

        with pytest.raises(ValueError, match="XYZ"):
            storefront.get_price_in_currency(10, "XYZ")

    def test_stubbed_port(self, storefront: StorefrontService) -> None:
        """A MagicMock stands in for the port just as well as a fake."""
        storefront.currency = MagicMock()
        storefront.currency.get_exchange_rate.return_value = 2.0

        assert storefront.get_price_in_currency(10, "GBP") == 20
        storefront.currency.get_exchange_rate.assert_called_once_with("USD", "GBP")


# ============================================================================
# get_shipping_info
# ============================================================================


class TestGetShippingInfo:
    """Test shipping descriptions."""

    def test_unavailable_when_no_quote(self, storefront: StorefrontService) -> None:
        result = storefront.get_shipping_info("US")

        assert "unavailable" in result.lower()

    def test_formats_quote(
        self, storefront: StorefrontService, shipping: FakeShippingPort
    ) -> None:
        shipping.set_quote("US", ShippingQuote(cost=10, estimated_days=2))

        result = storefront.get_shipping_info("US")

        assert result == "Shipping Cost: $10 (2 Days)"
        assert "$10" in result
        assert "2 days" in result.lower()
        assert shipping.quote_calls == ["US"]

    def test_whole_float_cost_prints_without_decimals(
        self, storefront: StorefrontService, shipping: FakeShippingPort
    ) -> None:
        """Configured costs are floats; 10.0 still reads as $10."""
        shipping.set_quote("US", ShippingQuote(cost=10.0, estimated_days=2))

        assert storefront.get_shipping_info("US") == "Shipping Cost: $10 (2 Days)"

    def test_fractional_cost_keeps_decimals(
        self, storefront: StorefrontService, shipping: FakeShippingPort
    ) -> None:
        shipping.set_quote("CA", ShippingQuote(cost=12.5, estimated_days=4))

        assert storefront.get_shipping_info("CA") == "Shipping Cost: $12.5 (4 Days)"


# ============================================================================
# render_page
# ============================================================================


class TestRenderPage:
    """Test page rendering."""

    @pytest.mark.asyncio
    async def test_returns_content(self, storefront: StorefrontService) -> None:
        result = await storefront.render_page()

        assert "content" in result.lower()

    @pytest.mark.asyncio
    async def test_tracks_home_page_view(
        self, storefront: StorefrontService, analytics: FakeAnalyticsPort
    ) -> None:
        await storefront.render_page()

        assert analytics.page_views == ["/home"]


# ============================================================================
# submit_order
# ============================================================================


class TestSubmitOrder:
    """Test order submission."""

    @pytest.mark.asyncio
    async def test_charges_customer(
        self,
        storefront: StorefrontService,
        payment: FakePaymentPort,
        order: Order,
        card: CreditCard,
    ) -> None:
        await storefront.submit_order(order, card)

        assert payment.charge_calls == [(card, order.total_amount)]

    @pytest.mark.asyncio
    async def test_success_when_payment_succeeds(
        self, storefront: StorefrontService, order: Order, card: CreditCard
    ) -> None:
        result = await storefront.submit_order(order, card)

        assert result == OrderResult(success=True)

    @pytest.mark.asyncio
    async def test_error_when_payment_fails(
        self,
        storefront: StorefrontService,
        payment: FakePaymentPort,
        order: Order,
        card: CreditCard,
    ) -> None:
        payment.set_status(PaymentStatus.FAILED)

        result = await storefront.submit_order(order, card)

        assert result == OrderResult(success=False, error="payment_error")

    @pytest.mark.asyncio
    async def test_provider_outage_becomes_structured_error(
        self,
        storefront: StorefrontService,
        payment: FakePaymentPort,
        order: Order,
        card: CreditCard,
    ) -> None:
        payment.set_should_fail(True)

        result = await storefront.submit_order(order, card)

        assert result.success is False
        assert result.error == "payment_error"

    @pytest.mark.asyncio
    async def test_with_async_mock(
        self, storefront: StorefrontService, order: Order, card: CreditCard
    ) -> None:
        """Resolved values from an AsyncMock drive the same branches."""
        storefront.payment = AsyncMock()
        storefront.payment.charge.return_value = ChargeResult(status=PaymentStatus.SUCCESS)

        result = await storefront.submit_order(order, card)

        storefront.payment.charge.assert_awaited_once_with(card, 10)
        assert result.success is True


# ============================================================================
# sign_up
# ============================================================================


class TestSignUp:
    """Test sign-up."""

    @pytest.mark.asyncio
    async def test_invalid_email(
        self, storefront: StorefrontService, email: FakeEmailPort
    ) -> None:
        result = await storefront.sign_up("invalid-email")

        assert result is False
        assert email.send_call_count == 0

    @pytest.mark.asyncio
    async def test_valid_email(self, storefront: StorefrontService) -> None:
        assert await storefront.sign_up("name@domain.com") is True

    @pytest.mark.asyncio
    async def test_sends_welcome_email(
        self, storefront: StorefrontService, email: FakeEmailPort
    ) -> None:
        await storefront.sign_up("name@domain.com")

        assert email.send_call_count == 1
        recipient, message = email.sent[0]
        assert recipient == "name@domain.com"
        assert "welcome" in message.lower()


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("name@domain.com", True),
        ("first.last@sub.domain.org", True),
        ("invalid-email", False),
        ("name@domain", False),
        ("name @domain.com", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_email(address: str, expected: bool) -> None:
    assert is_valid_email(address) is expected


# ============================================================================
# login
# ============================================================================


class TestLogin:
    """Test one-time code login."""

    @pytest.mark.asyncio
    async def test_emails_generated_code(
        self,
        storefront: StorefrontService,
        email: FakeEmailPort,
        security: FakeSecurityCodePort,
    ) -> None:
        await storefront.login("name@domain.com")

        assert email.get_last_email() == ("name@domain.com", str(security.generated[0]))

    @pytest.mark.asyncio
    async def test_spy_on_code_generator(
        self,
        storefront: StorefrontService,
        email: FakeEmailPort,
        security: FakeSecurityCodePort,
    ) -> None:
        """A spy wraps the real generator and records what it returned."""
        with patch.object(
            security, "generate_code", wraps=security.generate_code
        ) as spy:
            await storefront.login("name@domain.com")

        spy.assert_called_once_with()
        code = security.generated[-1]
        assert email.sent == [("name@domain.com", str(code))]


# ============================================================================
# is_online
# ============================================================================


class TestIsOnline:
    """Test opening hours against a fixed clock."""

    @pytest.mark.parametrize(
        "instant",
        [datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 19, 59)],
    )
    def test_within_opening_hours(
        self, storefront: StorefrontService, now: list[datetime], instant: datetime
    ) -> None:
        now[0] = instant

        assert storefront.is_online() is True

    @pytest.mark.parametrize(
        "instant",
        [datetime(2024, 1, 1, 7, 59), datetime(2024, 1, 1, 20, 1)],
    )
    def test_outside_opening_hours(
        self, storefront: StorefrontService, now: list[datetime], instant: datetime
    ) -> None:
        now[0] = instant

        assert storefront.is_online() is False


# ============================================================================
# get_discount
# ============================================================================


class TestGetDiscount:
    """Test the holiday discount against a fixed clock."""

    def test_christmas_day(self, storefront: StorefrontService, now: list[datetime]) -> None:
        now[0] = datetime(2024, 12, 25)

        assert storefront.get_discount() == 0.2

    def test_other_days(self, storefront: StorefrontService, now: list[datetime]) -> None:
        now[0] = datetime(2024, 12, 24)

        assert storefront.get_discount() == 0

    def test_default_clock_is_patchable(
        self,
        currency: FakeCurrencyPort,
        shipping: FakeShippingPort,
        analytics: FakeAnalyticsPort,
        payment: FakePaymentPort,
        email: FakeEmailPort,
        security: FakeSecurityCodePort,
    ) -> None:
        """Replacing the clock attribute freezes time for an existing service."""
        service = StorefrontService(
            currency=currency,
            shipping=shipping,
            analytics=analytics,
            payment=payment,
            email=email,
            security=security,
        )
        with patch.object(service, "clock", return_value=datetime(2024, 12, 25, 9, 30)):
            assert service.get_discount() == 0.2
            assert service.is_online() is True
