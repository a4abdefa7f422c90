"""OutputHash Core Types - Common type definitions and aliases."""

from enum import Enum
from typing import Union


# Chunk ids come from the build tool, numbered or named
ChunkId = Union[int, str]

# Raw content held by a leaf container
Content = Union[str, bytes]


class DigestEncoding(Enum):
    """Text encodings a digest can be rendered in."""

    HEX = "hex"
    BASE64 = "base64"
    BASE64URL = "base64url"
    LATIN1 = "latin1"

    @classmethod
    def from_string(cls, value: str) -> "DigestEncoding":
        """Convert string to DigestEncoding, raising ValueError for unknown names."""
        return cls(value.lower())


class ValidationMode(Enum):
    """How the post-pass stale token scan reports its findings."""

    STRICT = "strict"  # raise StaleReferenceError
    REPORT = "report"  # log and record on the result
    OFF = "off"

    @property
    def enabled(self) -> bool:
        return self is not ValidationMode.OFF
