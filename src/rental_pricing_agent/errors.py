"""
Exception hierarchy for the rental pricing agent.

Two failure classes exist in the retrieval core:
- Corpus initialization failures are fatal and raised at startup.
- Invalid arguments are rejected at call time with a clear message.

Nothing here is transient, so nothing is retried.
"""


class RentalPricingError(Exception):
    """Base class for all errors raised by this package."""


class CorpusInitializationError(RentalPricingError):
    """Raised when the reference corpus is empty or malformed."""


class InvalidArgumentError(RentalPricingError, ValueError):
    """Raised when a caller violates an operation's preconditions."""
