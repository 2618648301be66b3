"""Exception hierarchy for threshold ElGamal operations.

Every error also derives from :class:`ValueError` so callers that already
guard argument and arithmetic failures with ``except ValueError`` keep
working.
"""

from __future__ import annotations


class ThresholdElGamalError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ThresholdElGamalError, ValueError):
    """Unsupported group selector or inconsistent threshold settings."""


class RangeError(ThresholdElGamalError, ValueError):
    """A message or group element lies outside the valid field range."""


class DomainError(ThresholdElGamalError, ValueError):
    """A modular inverse was requested for a value that has none.

    Under a prime modulus this only happens for multiples of the modulus,
    which points at a broken invariant upstream.
    """


class InsufficientSharesError(ThresholdElGamalError, ValueError):
    """Fewer decryption shares were supplied than the required threshold."""
