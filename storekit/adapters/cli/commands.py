"""CLI command implementations for storekit.

Maps console commands to the rule functions and to StorefrontService
operations. Handles CLI-specific result shaping and error reporting:
every command returns a dictionary with a "status" of "success" or
"error" and the name of the operation that ran.
"""

import logging
from typing import Any

from storekit.core import rules
from storekit.core.models import CreditCard, Order
from storekit.core.storefront import StorefrontService

logger = logging.getLogger(__name__)


def _is_invalid_message(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("Invalid")


class CLICommandHandler:
    """Handles CLI commands by delegating to the core.

    Rule functions are called directly; collaborator-backed operations go
    through the StorefrontService.
    """

    def __init__(self, storefront: StorefrontService):
        """Initialize the CLI command handler.

        Args:
            storefront: StorefrontService used for collaborator-backed commands.
        """
        self.storefront = storefront

    @staticmethod
    def _success(operation: str, data: Any) -> dict[str, Any]:
        return {"status": "success", "operation": operation, "data": data}

    @staticmethod
    def _error(operation: str, message: str) -> dict[str, Any]:
        logger.warning(f"{operation} rejected: {message}")
        return {"status": "error", "operation": operation, "message": message}

    async def list_coupons(self) -> dict[str, Any]:
        """List the coupon catalog."""
        coupons = [
            {"code": coupon.code, "discount": coupon.discount}
            for coupon in rules.get_coupons()
        ]
        return self._success("coupons", coupons)

    async def calculate_discount(self, price: Any, code: Any) -> dict[str, Any]:
        """Apply a coupon code to a price.

        Returns:
            Dictionary with the discounted price, or an error for invalid
            price or code types.
        """
        result = rules.calculate_discount(price, code)
        if _is_invalid_message(result):
            return self._error("discount", result)
        return self._success("discount", result)

    async def validate_user_input(self, username: Any, age: Any) -> dict[str, Any]:
        """Validate sign-up input and report every failing field."""
        message = rules.validate_user_input(username, age)
        if _is_invalid_message(message):
            return self._error("validate", message)
        return self._success("validate", message)

    async def check_username(self, username: Any) -> dict[str, Any]:
        return self._success("username", rules.is_valid_username(username))

    async def check_price_range(
        self, price: float, min_price: float, max_price: float
    ) -> dict[str, Any]:
        return self._success(
            "price_range", rules.is_price_in_range(price, min_price, max_price)
        )

    async def check_can_drive(self, age: int, country_code: str) -> dict[str, Any]:
        result = rules.can_drive(age, country_code)
        if _is_invalid_message(result):
            return self._error("can_drive", result)
        return self._success("can_drive", result)

    async def convert_price(self, price: float, currency: str) -> dict[str, Any]:
        """Convert a base-currency price into another currency."""
        try:
            converted = self.storefront.get_price_in_currency(price, currency)
        except ValueError as e:
            return self._error("convert", str(e))
        return self._success("convert", converted)

    async def get_shipping_info(self, destination: str) -> dict[str, Any]:
        return self._success("shipping", self.storefront.get_shipping_info(destination))

    async def render_page(self) -> dict[str, Any]:
        return self._success("render", await self.storefront.render_page())

    async def submit_order(self, total_amount: float, card_number: str) -> dict[str, Any]:
        """Charge a card for an order total.

        Returns:
            Dictionary with success, or an error carrying the order's
            error code when the charge failed.
        """
        result = await self.storefront.submit_order(
            Order(total_amount=total_amount), CreditCard(number=card_number)
        )
        if not result.success:
            return self._error("order", result.error or "unknown_error")
        return self._success("order", {"success": True})

    async def sign_up(self, email: str) -> dict[str, Any]:
        if not await self.storefront.sign_up(email):
            return self._error("signup", f"Invalid email: {email}")
        return self._success("signup", f"Welcome email sent to {email}")

    async def login(self, email: str) -> dict[str, Any]:
        await self.storefront.login(email)
        return self._success("login", f"Login code sent to {email}")

    async def is_online(self) -> dict[str, Any]:
        return self._success("online", self.storefront.is_online())

    async def get_discount(self) -> dict[str, Any]:
        return self._success("holiday_discount", self.storefront.get_discount())


async def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler to execute the command with.
        command: Command name (see COMMANDS).
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            argument is missing.
    """
    if command not in COMMANDS:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")

    method_name, required = COMMANDS[command]
    missing = [name for name in required if name not in args]
    if missing:
        raise ValueError(f"Missing required parameter: {', '.join(missing)}")

    method = getattr(handler, method_name)
    return await method(**{name: args[name] for name in required})


# command -> (handler method, required argument names)
COMMANDS: dict[str, tuple[str, tuple[str, ...]]] = {
    "coupons": ("list_coupons", ()),
    "discount": ("calculate_discount", ("price", "code")),
    "validate": ("validate_user_input", ("username", "age")),
    "username": ("check_username", ("username",)),
    "price-range": ("check_price_range", ("price", "min_price", "max_price")),
    "can-drive": ("check_can_drive", ("age", "country_code")),
    "convert": ("convert_price", ("price", "currency")),
    "shipping": ("get_shipping_info", ("destination",)),
    "render": ("render_page", ()),
    "order": ("submit_order", ("total_amount", "card_number")),
    "signup": ("sign_up", ("email",)),
    "login": ("login", ("email",)),
    "online": ("is_online", ()),
    "holiday-discount": ("get_discount", ()),
}
