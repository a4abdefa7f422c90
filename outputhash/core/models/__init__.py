"""OutputHash Core Models Package - Domain model definitions.

These models mirror what the build hands over (chunks with their modules and
named assets keyed by file name in an asset store) plus the results a rehash
pass reports back.
"""

from .asset import Asset, AssetStore
from .chunk import Chunk, Module
from .result import ChunkRehashOutcome, HashResult, RehashResult, RenamedFile

__all__ = [
    "Asset",
    "AssetStore",
    "Chunk",
    "Module",
    "HashResult",
    "RenamedFile",
    "ChunkRehashOutcome",
    "RehashResult",
]
