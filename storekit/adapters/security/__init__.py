"""Security adapters for one-time code generation.

Implementations:
- RandomSecurityCodeAdapter (six-digit codes from the secrets module)
"""
