"""Chunk rehasher for OutputHash - renames a chunk's primary files after their final content."""

from typing import Dict, Optional

from loguru import logger

from outputhash.core.config import OutputHashConfig
from outputhash.core.models import AssetStore, Chunk, ChunkRehashOutcome, RenamedFile
from .base_service import BaseService
from .hash_computer import HashComputer


class ChunkRehasher(BaseService):
    """Recomputes the hash of each primary file in a chunk and renames it.

    The old token in a primary file name is either the chunk's own rendered
    hash or, for extra primary files some build steps add (an extracted
    stylesheet, for instance), the rendered hash of one of the chunk's
    modules. Secondary file content is never touched here.
    """

    def __init__(
        self,
        config: OutputHashConfig | None = None,
        hash_computer: Optional[HashComputer] = None
    ):
        """Initialize chunk rehasher.

        Args:
            config: Rewriter configuration
            hash_computer: Optional hash computer, built from config.hash when omitted
        """
        super().__init__(config)
        self._hash_computer = hash_computer or HashComputer(self._config.hash)

    @property
    def hash_computer(self) -> HashComputer:
        return self._hash_computer

    def rehash(self, chunk: Chunk, assets: AssetStore, name_map: Dict[str, str]) -> ChunkRehashOutcome:
        """Rehash and rename every primary file of chunk.

        Mutates chunk (file list and hash fields), its modules, the asset
        store and name_map in place.

        Args:
            chunk: Chunk whose primary files are renamed
            assets: Asset store keyed by file name
            name_map: Accumulated old token to new token mapping

        Returns:
            Renames performed and primary files skipped for this chunk

        Raises:
            MissingAssetError: If a primary file is not in the asset store
        """
        outcome = ChunkRehashOutcome(chunk_id=chunk.id)

        for old_name in [f for f in chunk.files if self.is_primary(f)]:
            asset = self.get_asset(assets, old_name, chunk)
            result = self._hash_computer.compute(asset.buffer())

            old_token = self._claim_token(chunk, old_name, result.full_hash, result.short_hash)
            if old_token is None:
                logger.warning(
                    f"Cannot tell which hash {old_name} embeds (chunk {chunk.id}); leaving it unchanged"
                )
                outcome.unresolved.append(old_name)
                continue

            name_map[old_token] = result.short_hash
            new_name = old_name.replace(old_token, result.short_hash, 1)

            chunk.rename_file(old_name, new_name)
            asset.name = new_name
            if new_name != old_name:
                del assets[old_name]
                assets[new_name] = asset

            logger.debug(f"Renamed {old_name} -> {new_name} (chunk {chunk.id})")
            outcome.renamed.append(
                RenamedFile(
                    chunk_id=chunk.id,
                    old_name=old_name,
                    new_name=new_name,
                    old_token=old_token,
                    new_token=result.short_hash,
                )
            )

        return outcome

    def _claim_token(self, chunk: Chunk, file_name: str, full_hash: str, short_hash: str) -> Optional[str]:
        """Find the old token and move its owner's hash fields to the new digest."""
        if chunk.rendered_hash and chunk.rendered_hash in file_name:
            old_token = chunk.rendered_hash
            chunk.update_hash(full_hash, short_hash)
            return old_token

        module = chunk.find_module_in(file_name)
        if module is None:
            return None
        old_token = module.rendered_hash
        module.update_hash(full_hash, short_hash)
        return old_token
