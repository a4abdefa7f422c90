"""OutputHash Core Types Package - Common type definitions and aliases."""

from .common import (
    ChunkId,
    Content,
    DigestEncoding,
    ValidationMode,
)

__all__ = [
    # Enums
    "DigestEncoding",
    "ValidationMode",

    # Aliases
    "ChunkId",
    "Content",
]
