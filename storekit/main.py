"""Composition root for storekit.

The only module that imports both the core and the concrete adapters.
It loads settings, configures logging, builds the storefront from the
local adapters and runs the interactive console.
"""

import asyncio
import json
import logging
import sys
from typing import Any

from storekit.adapters.analytics.tracker import LoggingAnalyticsAdapter
from storekit.adapters.cli.commands import CLICommandHandler, run_command
from storekit.adapters.currency.fixed_rate import FixedRateCurrencyAdapter
from storekit.adapters.email.stdout import StdoutEmailAdapter
from storekit.adapters.payment.simulated import SimulatedPaymentAdapter
from storekit.adapters.security.random_code import RandomSecurityCodeAdapter
from storekit.adapters.shipping.flat_rate import FlatRateShippingAdapter
from storekit.config import Settings, load_settings
from storekit.core.storefront import StorefrontService

logger = logging.getLogger(__name__)

PROMPT = "storekit> "

LOG_FORMATS = {
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    "text": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def _parse_command_line(line: str) -> tuple[str, dict[str, Any]]:
    """Split 'command {json}' into the command name and its arguments.

    Raises:
        ValueError: If the arguments are not a JSON object.
    """
    name, _, raw_args = line.partition(" ")
    raw_args = raw_args.strip()
    if not raw_args:
        return name.lower(), {}

    try:
        args = json.loads(raw_args)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e.msg}") from e
    if not isinstance(args, dict):
        raise ValueError("Arguments must be a JSON object")
    return name.lower(), args


async def _dispatch(cli_handler: CLICommandHandler, line: str) -> dict[str, Any] | None:
    """Run one console line; None means the line only touched the console."""
    try:
        command, args = _parse_command_line(line)
    except ValueError as e:
        logger.warning(f"{e}. Use 'help' for command syntax.")
        return None

    try:
        return await run_command(cli_handler, command, args)
    except Exception as e:
        logger.error(f"Command {command!r} failed: {e}", exc_info=True)
        return {"status": "error", "message": str(e)}


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Read commands from stdin until 'exit' or EOF.

    Each result is printed as indented JSON. Ctrl+C abandons the current
    line without leaving the console.
    """
    logger.info("Console ready. Type 'help' for commands or 'exit' to quit.")
    loop = asyncio.get_running_loop()

    while True:
        try:
            line = (await loop.run_in_executor(None, input, PROMPT)).strip()
        except EOFError:
            logger.info("EOF received, leaving console")
            return
        except KeyboardInterrupt:
            continue

        if not line:
            continue
        if line.lower() == "exit":
            logger.info("Leaving console")
            return
        if line.lower() == "help":
            _print_cli_help()
            continue

        result = await _dispatch(cli_handler, line)
        if result is not None:
            print(json.dumps(result, indent=2, default=str))

def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  coupons
    List the available coupon codes.

  discount
    Apply a coupon code to a price.
    Required: price, code

    Example: discount {"price": 10, "code": "SAVE10"}

  validate
    Validate sign-up input.
    Required: username, age

    Example: validate {"username": "mosh", "age": 42}

  username
    Check a display name against the 5-15 character rule.
    Required: username

  price-range
    Check that a price lies within [min_price, max_price].
    Required: price, min_price, max_price

  can-drive
    Check the legal driving age for a country (US, UK).
    Required: age, country_code

    Example: can-drive {"age": 17, "country_code": "UK"}

  convert
    Convert a price into another currency.
    Required: price, currency

  shipping
    Quote shipping to a destination.
    Required: destination

  render
    Render the home page.

  order
    Charge a card for an order.
    Required: total_amount, card_number

  signup
    Sign up an email address.
    Required: email

  login
    Email a one-time login code.
    Required: email

  online
    Report whether the store is open.

  holiday-discount
    Report today's store-wide discount.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Send records from every logger to stdout.

    Unknown levels fall back to INFO and unknown formats to text.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMATS.get(log_format, LOG_FORMATS["text"])))
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), handlers=[handler])


def build_storefront(settings: Settings) -> StorefrontService:
    """Instantiate adapters from settings and wire the storefront service.

    Raises:
        ValueError: If the configured adapters or store hours are invalid.
    """
    logger.info(
        f"Wiring storefront (base currency {settings.base_currency}, "
        f"open {settings.opening_hour}:00-{settings.closing_hour}:00)"
    )
    return StorefrontService(
        currency=FixedRateCurrencyAdapter(rates=settings.exchange_rates),
        shipping=FlatRateShippingAdapter(
            rates=settings.shipping_rates,
            estimated_days=settings.shipping_days,
        ),
        analytics=LoggingAnalyticsAdapter(),
        payment=SimulatedPaymentAdapter(),
        email=StdoutEmailAdapter(),
        security=RandomSecurityCodeAdapter(),
        base_currency=settings.base_currency,
        opening_hour=settings.opening_hour,
        closing_hour=settings.closing_hour,
        christmas_discount=settings.christmas_discount,
    )


async def bootstrap() -> None:
    """Load settings, configure logging and serve the console until it exits."""
    settings = load_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)

    cli_handler = CLICommandHandler(build_storefront(settings))
    await _run_cli_interactive(cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Console closed normally
        1: Settings or wiring failed, or an unexpected error escaped
        130: Interrupted by SIGINT
    """
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Interrupted, shutting down")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
