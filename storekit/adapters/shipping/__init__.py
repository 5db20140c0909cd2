"""Shipping adapters for destination quotes.

Implementations:
- FlatRateShippingAdapter (one flat cost per destination)
"""
