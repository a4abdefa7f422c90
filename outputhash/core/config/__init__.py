"""
Configuration management package for OutputHash.

This package provides:
- Type-safe hash settings validated with Pydantic
- A settings model loaded from config files, environment variables and
  runtime overrides
"""

from .hash_config import HashConfig, is_supported_algorithm
from .output_hash_config import OutputHashConfig

__all__ = [
    "HashConfig",
    "OutputHashConfig",
    "is_supported_algorithm",
]
