"""Command-line interface adapters.

Provides console commands for the storekit utilities:
- coupons, discount: Coupon catalog and price reductions
- validate, username, price-range, can-drive: Input and business rules
- convert, shipping, render, order, signup, login: Storefront operations
- online, holiday-discount: Time-dependent store status
"""
