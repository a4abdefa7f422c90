"""OutputHash Core Exceptions Package - Core exception classes for error handling.

The exception hierarchy is designed to:
- Separate fatal errors (configuration, container shape, stale references)
  from the tolerated unresolved-provenance case
- Carry file names, tokens and container kinds as structured context
"""

from .core import (
    ConfigurationError,
    MissingAssetError,
    OutputHashError,
    OutputHashMismatchError,
    StaleReferenceError,
    UnresolvedHashProvenance,
    UnsupportedAssetType,
)

__all__ = [
    # Base exception
    "OutputHashError",

    # Domain-specific exceptions
    "ConfigurationError",
    "UnsupportedAssetType",
    "UnresolvedHashProvenance",
    "StaleReferenceError",
    "MissingAssetError",
    "OutputHashMismatchError",
]
