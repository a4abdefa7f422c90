"""OutputHash result models - what a rehash pass reports back to the caller."""

from dataclasses import dataclass, field
from typing import Dict, List

from ..types import ChunkId


@dataclass(frozen=True)
class HashResult:
    """Digest of a file's content.

    Attributes:
        full_hash: Complete encoded digest
        short_hash: Prefix embedded in file names
    """

    full_hash: str
    short_hash: str


@dataclass(frozen=True)
class RenamedFile:
    """A primary file renamed to embed its new content hash."""

    chunk_id: ChunkId
    old_name: str
    new_name: str
    old_token: str
    new_token: str

    @property
    def changed(self) -> bool:
        return self.old_name != self.new_name


@dataclass
class ChunkRehashOutcome:
    """Renames and skipped files for a single chunk."""

    chunk_id: ChunkId
    renamed: List[RenamedFile] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)


@dataclass
class RehashResult:
    """Summary of a complete rehash pass.

    Attributes:
        name_map: Old token to new token for every rehashed file
        renamed: Every primary file rename in processing order
        unresolved: Primary files skipped because their hash provenance is unknown
        stale_files: Files still holding an old token (report mode only)
        ordered_chunk_ids: Chunk ids in the order they were processed
    """

    name_map: Dict[str, str] = field(default_factory=dict)
    renamed: List[RenamedFile] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)
    stale_files: List[str] = field(default_factory=list)
    ordered_chunk_ids: List[ChunkId] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.stale_files

    def add_outcome(self, outcome: ChunkRehashOutcome) -> None:
        self.renamed.extend(outcome.renamed)
        self.unresolved.extend(outcome.unresolved)

    def changed_tokens(self) -> Dict[str, str]:
        """Entries of name_map whose hash actually changed."""
        return {old: new for old, new in self.name_map.items() if old != new}
