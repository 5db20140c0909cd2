"""Domain models for the storekit storefront utilities.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coupon:
    """A discount code and the fraction it takes off the price."""

    code: str
    discount: float  # fraction, e.g. 0.1 for 10% off

    def __post_init__(self) -> None:
        """Validate coupon invariants on creation."""
        if not self.code or not self.code.strip():
            raise ValueError("code must be a non-empty string")
        if not 0 < self.discount < 1:
            raise ValueError(
                f"discount must be between 0 and 1 (exclusive), got {self.discount}"
            )


@dataclass(frozen=True)
class ShippingQuote:
    """Cost and delivery estimate for shipping to a destination."""

    cost: float
    estimated_days: int

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got {self.cost}")
        if self.estimated_days < 0:
            raise ValueError(
                f"estimated_days must be non-negative, got {self.estimated_days}"
            )


class PaymentStatus(Enum):
    """Outcome reported by the payment provider for a charge."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ChargeResult:
    """Result of charging a card."""

    status: PaymentStatus


@dataclass(frozen=True)
class CreditCard:
    """Card details handed to the payment provider."""

    number: str

    def __repr__(self) -> str:
        # Keep full card numbers out of logs and tracebacks
        return f"CreditCard(number='****{self.number[-4:]}')"


@dataclass(frozen=True)
class Order:
    """An order awaiting payment."""

    total_amount: float


@dataclass(frozen=True)
class OrderResult:
    """Structured outcome of submitting an order.

    error is None on success and a short machine-readable code otherwise.
    """

    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("a successful order cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("a failed order must carry an error code")
