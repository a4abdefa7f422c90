"""Rehash coordinator for OutputHash - orchestrates the rehash and repropagate pass."""

from typing import Dict, List, Optional, Sequence, Union

from loguru import logger

from outputhash.core.config import OutputHashConfig
from outputhash.core.exceptions import StaleReferenceError
from outputhash.core.models import AssetStore, Chunk, RehashResult
from outputhash.core.types import ValidationMode
from .base_service import BaseService
from .chunk_rehasher import ChunkRehasher
from .content_matcher import ContentMatcher, build_token_pattern
from .hash_computer import HashComputer
from .reference_propagator import ReferencePropagator


class RehashCoordinator(BaseService):
    """Runs the rehash pass over every chunk of a build.

    Chunks are processed one at a time in dependency order; each chunk sees
    the token mapping produced by every chunk processed before it. The chunk
    list and asset store passed to run() are mutated in place and not kept
    after it returns.
    """

    def __init__(
        self,
        config: OutputHashConfig | None = None,
        hash_computer: Optional[HashComputer] = None,
        matcher: Optional[ContentMatcher] = None
    ):
        """Initialize rehash coordinator.

        Args:
            config: Rewriter configuration
            hash_computer: Optional hash computer, built from config.hash when omitted
            matcher: Optional content matcher shared by propagation and validation

        Raises:
            ConfigurationError: If the hash settings are invalid
        """
        super().__init__(config)
        self._matcher = matcher or ContentMatcher()
        self._rehasher = ChunkRehasher(self._config, hash_computer)
        self._propagator = ReferencePropagator(self._config, self._matcher)

    @staticmethod
    def order_chunks(chunks: Sequence[Chunk]) -> List[Chunk]:
        """Order chunks so runtime chunks come last, then by id.

        Runtime chunks embed the file names of the chunks they load, so they
        can only be rehashed once those names are final. Numbered chunks sort
        before named ones.
        """
        return sorted(chunks, key=lambda chunk: (chunk.has_runtime, isinstance(chunk.id, str), chunk.id))

    @staticmethod
    def stale_tokens(name_map: Dict[str, str]) -> List[str]:
        """Old tokens that must no longer appear anywhere.

        A token that is also some file's new hash is excluded, which covers
        hashes that did not change.
        """
        new_tokens = set(name_map.values())
        return [old for old in name_map if old not in new_tokens]

    def run(
        self,
        chunks: Sequence[Chunk],
        assets: AssetStore,
        validate: Union[bool, ValidationMode, None] = None
    ) -> RehashResult:
        """Rehash every chunk and propagate the new names.

        Args:
            chunks: All chunks of the build
            assets: Asset store keyed by file name
            validate: True/False to force strict/off, None for config.validation_mode

        Returns:
            Summary of the pass

        Raises:
            StaleReferenceError: If strict validation finds old tokens left behind
            UnsupportedAssetType: If a file's content container is unknown
            MissingAssetError: If a chunk lists a file missing from the store
        """
        mode = self._resolve_mode(validate)
        ordered = self.order_chunks(chunks)

        name_map: Dict[str, str] = {}
        result = RehashResult(name_map=name_map, ordered_chunk_ids=[chunk.id for chunk in ordered])

        for chunk in ordered:
            # Pick up names finalized by earlier chunks before hashing this one
            self._propagator.propagate(chunk, assets, name_map, include_primary=True)
            result.add_outcome(self._rehasher.rehash(chunk, assets, name_map))
            self._propagator.propagate(chunk, assets, name_map)

        changed = result.changed_tokens()
        logger.info(
            f"Rehashed {len(ordered)} chunk(s): {len(changed)} hash(es) changed, "
            f"{len(result.unresolved)} file(s) left unresolved"
        )

        if mode.enabled:
            stale = self.find_stale_files(ordered, assets, name_map)
            if stale:
                if mode is ValidationMode.STRICT:
                    raise StaleReferenceError(stale, self.stale_tokens(name_map))
                logger.warning(f"{len(stale)} file(s) still reference old hashes: {', '.join(stale)}")
                result.stale_files = stale

        return result

    def find_stale_files(
        self,
        chunks: Sequence[Chunk],
        assets: AssetStore,
        name_map: Dict[str, str]
    ) -> List[str]:
        """Scan every file of every chunk for tokens that should have been replaced.

        Files outside the replacement filter are scanned too: they are the
        ones a narrow filter could have missed.
        """
        tokens = self.stale_tokens(name_map)
        if not tokens:
            return []

        pattern = build_token_pattern(tokens)
        stale: List[str] = []
        for chunk in chunks:
            for file_name in chunk.files:
                if file_name in stale:
                    continue
                asset = self.get_asset(assets, file_name, chunk)
                if self._matcher.contains(asset.source, pattern, file_name):
                    stale.append(file_name)
        return stale

    def _resolve_mode(self, validate: Union[bool, ValidationMode, None]) -> ValidationMode:
        if validate is None:
            return self._config.validation_mode
        if isinstance(validate, ValidationMode):
            return validate
        return ValidationMode.STRICT if validate else ValidationMode.OFF
