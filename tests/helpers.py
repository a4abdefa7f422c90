"""Builders for chunks and asset stores used across tests."""

from typing import Dict, List

from outputhash.core.models import Asset, Chunk


def make_store(files: Dict[str, object]) -> Dict[str, Asset]:
    """Build an asset store from file name to content."""
    return {name: Asset(name=name, source=content) for name, content in files.items()}


def make_chunk(chunk_id, rendered_hash: str, files: List[str], has_runtime: bool = False, modules=None) -> Chunk:
    return Chunk(
        id=chunk_id,
        files=list(files),
        rendered_hash=rendered_hash,
        hash=rendered_hash,
        has_runtime=has_runtime,
        modules=list(modules or []),
    )
