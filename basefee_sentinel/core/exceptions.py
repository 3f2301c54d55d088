"""
Custom exceptions for the base fee sentinel.

These exceptions provide clear error semantics across the system.
Non-triggering decisions (insufficient history, zero previous value, change
below threshold) are ordinary results and never raise.
"""

from typing import Optional


class DataValidationError(Exception):
    """Raised when input data fails validation or ingestion."""
    pass


class PayloadDecodeError(DataValidationError):
    """Raised when a sample payload is not a well-formed uint256 word."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class CollectionError(Exception):
    """Raised when the ambient base fee cannot be read."""
    pass


class SourceExhaustedError(CollectionError):
    """Raised when a replayed series has no samples left."""
    pass


class RelayError(Exception):
    """Raised when an alert could not be handed to a remote relay."""
    pass


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""
    pass
