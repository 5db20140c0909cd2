"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeCurrencyPort: Configurable exchange rates
- FakeShippingPort: Configurable shipping quotes
- FakeAnalyticsPort: Captured page views
- FakePaymentPort: Configurable charge outcomes, captured charges
- FakeEmailPort: Captured outgoing email
- FakeSecurityCodePort: Predictable code sequence
"""

from .analytics import FakeAnalyticsPort
from .currency import FakeCurrencyPort
from .email import FakeEmailPort
from .payment import FakePaymentPort
from .security import FakeSecurityCodePort
from .shipping import FakeShippingPort

__all__ = [
    "FakeAnalyticsPort",
    "FakeCurrencyPort",
    "FakeEmailPort",
    "FakePaymentPort",
    "FakeSecurityCodePort",
    "FakeShippingPort",
]
