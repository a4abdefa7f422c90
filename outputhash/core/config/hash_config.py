"""
Hash configuration for OutputHash.

Mirrors the build's own output hashing options (function, digest, digest
length, salt) so rehashed names look exactly like names the build would have
produced for the same content.
"""

import hashlib
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..types import DigestEncoding


def is_supported_algorithm(name: str) -> bool:
    """Return True if hashlib can produce a fixed-size digest for name."""
    try:
        hashlib.new(name).digest()
    except (ValueError, TypeError):
        # TypeError: variable-length digests (shake_*) need an explicit length
        return False
    return True


class HashConfig(BaseModel):
    """Digest settings used to compute file name hashes."""

    algorithm: str = Field(
        default='md5',
        description="Digest function name as accepted by hashlib.new"
    )

    digest_encoding: DigestEncoding = Field(
        default=DigestEncoding.HEX,
        description="Text encoding of the rendered digest"
    )

    short_length: int = Field(
        default=20,
        ge=1,
        description="Number of digest characters embedded in file names"
    )

    salt: Optional[bytes] = Field(
        default=None,
        description="Optional salt appended to the content before digesting"
    )

    @field_validator('algorithm')
    def validate_algorithm(cls, v: str) -> str:
        """Reject digest functions hashlib does not provide."""
        name = v.strip().lower()
        if not is_supported_algorithm(name):
            raise ValueError(f"unsupported hash algorithm '{v}'")
        return name

    @field_validator('digest_encoding', mode='before')
    def normalize_encoding(cls, v):
        if isinstance(v, str):
            return DigestEncoding.from_string(v.strip())
        return v
