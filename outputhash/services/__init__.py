"""OutputHash services - the rehash pass and its supporting primitives."""

from .base_service import BaseService
from .chunk_rehasher import ChunkRehasher
from .content_matcher import ContentMatcher, build_token_pattern
from .hash_computer import HashComputer
from .output_validator import OutputValidator
from .reference_propagator import ReferencePropagator
from .rehash_coordinator import RehashCoordinator

__all__ = [
    "BaseService",
    "ChunkRehasher",
    "ContentMatcher",
    "HashComputer",
    "OutputValidator",
    "ReferencePropagator",
    "RehashCoordinator",
    "build_token_pattern",
]
