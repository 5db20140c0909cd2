"""Stdout email adapter.

Implements EmailPort by printing each message to the terminal with
human-readable formatting.
"""

import asyncio
import logging

from storekit.core.ports import EmailPort

logger = logging.getLogger(__name__)


class StdoutEmailAdapter(EmailPort):
    """Prints outgoing email to stdout."""

    def __init__(self, sender: str = "no-reply@storekit.local"):
        """Initialize stdout email adapter.

        Args:
            sender: Address shown in the From line.
        """
        self.sender = sender

    async def send_email(self, recipient: str, message: str) -> None:
        """Print the email without blocking the event loop."""
        await asyncio.to_thread(print, self._format_email(self.sender, recipient, message))
        logger.debug(f"Email sent to {recipient}")

    @staticmethod
    def _format_email(sender: str, recipient: str, message: str) -> str:
        """Format a message as a small email envelope."""
        lines = [
            "-" * 60,
            f"From: {sender}",
            f"To: {recipient}",
            "",
            message,
            "-" * 60,
        ]
        return "\n".join(lines)
