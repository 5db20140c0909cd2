"""Currency adapters for exchange rate lookup.

Implementations:
- FixedRateCurrencyAdapter (static rate table from configuration)
"""
