"""OutputHash Core Package - Domain models, types, and exceptions.

Modules:
    models: Chunk, Module and Asset entities
    types: Common type definitions and aliases
    exceptions: Core exception classes for error handling
    config: Pydantic configuration models
"""

from .exceptions import (
    ConfigurationError,
    MissingAssetError,
    OutputHashError,
    OutputHashMismatchError,
    StaleReferenceError,
    UnresolvedHashProvenance,
    UnsupportedAssetType,
)
from .models import Asset, AssetStore, Chunk, Module
from .types import DigestEncoding, ValidationMode

__all__ = [
    # Domain Models
    "Asset",
    "AssetStore",
    "Chunk",
    "Module",

    # Types
    "DigestEncoding",
    "ValidationMode",

    # Exceptions
    "OutputHashError",
    "ConfigurationError",
    "UnsupportedAssetType",
    "UnresolvedHashProvenance",
    "StaleReferenceError",
    "MissingAssetError",
    "OutputHashMismatchError",
]
