"""
Core module: Configuration, logging, and exception handling.
"""

from .config import Config, config
from .exceptions import (
    CollectionError,
    ConfigurationError,
    DataValidationError,
    PayloadDecodeError,
    RelayError,
    SourceExhaustedError,
)

__all__ = [
    "Config",
    "config",
    "CollectionError",
    "ConfigurationError",
    "DataValidationError",
    "PayloadDecodeError",
    "RelayError",
    "SourceExhaustedError",
]
