"""Payment adapters for charging customers.

Implementations:
- SimulatedPaymentAdapter (in-process provider with basic card checks)
"""
