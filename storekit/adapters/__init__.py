"""External adapters for storekit.

This package provides local implementations of the core port interfaces.
None of them reach the network; each simulates its service in-process.

Adapter Organization:

- currency/: Exchange rate lookup (fixed rate table)
- shipping/: Shipping quotes (flat rate per destination)
- analytics/: Page view tracking (log-backed)
- payment/: Card charges (simulated provider)
- email/: Outgoing email (stdout)
- security/: One-time login codes (random)
- cli/: Command handlers for the interactive console
"""
