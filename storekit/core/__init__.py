"""Core domain logic for storekit.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    ChargeResult,
    Coupon,
    CreditCard,
    Order,
    OrderResult,
    PaymentStatus,
    ShippingQuote,
)
from .rules import (
    FetchError,
    calculate_discount,
    can_drive,
    fetch_data,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from .stack import EmptyStackError, Stack

__all__ = [
    "ChargeResult",
    "Coupon",
    "CreditCard",
    "EmptyStackError",
    "FetchError",
    "Order",
    "OrderResult",
    "PaymentStatus",
    "ShippingQuote",
    "Stack",
    "calculate_discount",
    "can_drive",
    "fetch_data",
    "get_coupons",
    "is_price_in_range",
    "is_valid_username",
    "validate_user_input",
]
