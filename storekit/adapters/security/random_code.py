"""Random security code adapter.

Implements SecurityCodePort with codes drawn from the secrets module.
"""

import secrets

from storekit.core.ports import SecurityCodePort


class RandomSecurityCodeAdapter(SecurityCodePort):
    """Generates numeric codes with a fixed number of digits."""

    def __init__(self, digits: int = 6):
        if digits <= 0:
            raise ValueError(f"digits must be positive, got {digits}")
        self.digits = digits

    def generate_code(self) -> int:
        """Return a random code with exactly `digits` digits."""
        low = 10 ** (self.digits - 1)
        return low + secrets.randbelow(10**self.digits - low)
