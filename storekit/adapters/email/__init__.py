"""Email adapters for outgoing messages.

Implementations:
- StdoutEmailAdapter (prints messages to the terminal)
"""
