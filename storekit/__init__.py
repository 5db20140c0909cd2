"""storekit: storefront pricing rules, input validation and collaborator wiring."""

__version__ = "0.1.0"
