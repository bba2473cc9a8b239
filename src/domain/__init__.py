"""Domain models and types for the bank-sample pricing engine.

This package contains the immutable (Pydantic) quote models, the pricing
protocol consumed by transfer preparation, and the errors it raises. They
carry no storage concerns so the quote store can be swapped or faked in tests.
"""

__all__ = [
    "errors",
    "pricing",
]
