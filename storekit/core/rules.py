"""Business rules for pricing, coupons and user input.

Pure functions with no side effects. Invalid input is reported as a
descriptive message starting with "Invalid" rather than raised, so
callers branch on the return value.
"""

import asyncio
from numbers import Real
from typing import Any

from .models import Coupon

COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)

# Minimum driving age by country code
LEGAL_DRIVING_AGES: dict[str, int] = {
    "US": 16,
    "UK": 17,
}

SIGNUP_USERNAME_MIN_LENGTH = 3
SIGNUP_USERNAME_MAX_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 100

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15


class FetchError(Exception):
    """Raised when fetching remote data fails.

    Attributes:
        reason: Human-readable description of the failure.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount or age
    return isinstance(value, Real) and not isinstance(value, bool)


def get_coupons() -> tuple[Coupon, ...]:
    """Return the catalog of available coupons."""
    return COUPONS


def calculate_discount(price: Any, discount_code: Any) -> float | str:
    """Apply a coupon to a price.

    Args:
        price: Non-negative number.
        discount_code: Coupon code, matched case-sensitively.

    Returns:
        The discounted price for a known code, the unchanged price for an
        unknown code, or an "Invalid ..." message for bad input.
    """
    if not _is_number(price) or price < 0:
        return "Invalid price"

    if not isinstance(discount_code, str):
        return "Invalid discount code"

    for coupon in COUPONS:
        if coupon.code == discount_code:
            return price * (1 - coupon.discount)

    return price


def validate_user_input(username: Any, age: Any) -> str:
    """Validate sign-up input.

    Username and age are checked independently and every failing check
    contributes one clause to the returned message.
    """
    errors: list[str] = []

    if (
        not isinstance(username, str)
        or not SIGNUP_USERNAME_MIN_LENGTH <= len(username) <= SIGNUP_USERNAME_MAX_LENGTH
    ):
        errors.append("Invalid username")

    if not _is_number(age) or not MIN_AGE <= age <= MAX_AGE:
        errors.append("Invalid age")

    return ", ".join(errors) if errors else "Validation successful"


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    """Is price within [min_price, max_price]?"""
    return min_price <= price <= max_price


def is_valid_username(username: Any) -> bool:
    """Does username satisfy the display-name length rule?"""
    if not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def can_drive(age: int, country_code: str) -> bool | str:
    """Is a person of this age allowed to drive in the given country?

    Returns:
        True or False for a known country code and numeric age,
        "Invalid country code" or "Invalid age" otherwise.
    """
    if not isinstance(country_code, str) or country_code not in LEGAL_DRIVING_AGES:
        return "Invalid country code"
    if not _is_number(age):
        return "Invalid age"
    return age >= LEGAL_DRIVING_AGES[country_code]


async def fetch_data(delay: float = 0.0) -> list[int]:
    """Fetch a list of numbers from the remote data source.

    The data source is not available yet, so this always fails.

    Raises:
        FetchError: Always, with reason "Operation failed".
    """
    await asyncio.sleep(delay)
    raise FetchError("Operation failed")
