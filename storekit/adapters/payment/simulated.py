"""Simulated payment adapter.

Implements PaymentPort without contacting a payment provider. A charge
is declined when the amount is not positive or the card number is not
a plausible card number (12 to 19 digits, spaces and dashes ignored).
"""

import logging

from storekit.core.models import ChargeResult, CreditCard, PaymentStatus
from storekit.core.ports import PaymentPort

logger = logging.getLogger(__name__)

MIN_CARD_DIGITS = 12
MAX_CARD_DIGITS = 19


class SimulatedPaymentAdapter(PaymentPort):
    """Approves or declines charges in-process."""

    def __init__(self) -> None:
        self.charges: list[tuple[CreditCard, float, PaymentStatus]] = []

    @staticmethod
    def _is_plausible_card(card: CreditCard) -> bool:
        digits = card.number.replace(" ", "").replace("-", "")
        return digits.isdigit() and MIN_CARD_DIGITS <= len(digits) <= MAX_CARD_DIGITS

    async def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        """Approve the charge if both amount and card look valid."""
        if amount <= 0:
            status = PaymentStatus.FAILED
            logger.warning(f"Declined charge of non-positive amount {amount}")
        elif not self._is_plausible_card(card):
            status = PaymentStatus.FAILED
            logger.warning(f"Declined charge to invalid card {card!r}")
        else:
            status = PaymentStatus.SUCCESS
            logger.info(f"Charged {amount} to {card!r}")

        self.charges.append((card, amount, status))
        return ChargeResult(status=status)
