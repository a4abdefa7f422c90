"""Reference propagator for OutputHash - rewrites old hash tokens inside chunk files."""

import re
from typing import List, Mapping, Optional, Pattern, Union

from loguru import logger

from outputhash.core.config import OutputHashConfig
from outputhash.core.models import AssetStore, Chunk
from .base_service import BaseService
from .content_matcher import ContentMatcher


class ReferencePropagator(BaseService):
    """Replaces every known old token with its new value in a chunk's files.

    Only files whose name matches the replacement filter are rewritten. We
    assume hashes are unique enough that replacing them never hits unrelated
    content.
    """

    def __init__(
        self,
        config: OutputHashConfig | None = None,
        matcher: Optional[ContentMatcher] = None,
        inclusion_filter: Union[str, Pattern, None] = None
    ):
        """Initialize reference propagator.

        Args:
            config: Rewriter configuration
            matcher: Optional content matcher
            inclusion_filter: Pattern overriding config.replacement_filter
        """
        super().__init__(config)
        self._matcher = matcher or ContentMatcher()
        if inclusion_filter is None:
            self._filter = self._config.replacement_pattern
        elif isinstance(inclusion_filter, str):
            self._filter = re.compile(inclusion_filter)
        else:
            self._filter = inclusion_filter

    @property
    def inclusion_filter(self) -> Pattern:
        return self._filter

    def should_rewrite(self, file_name: str, include_primary: bool = False) -> bool:
        """Check whether file_name receives content propagation."""
        if not include_primary and self.is_primary(file_name):
            return False
        return self._filter.search(file_name) is not None

    def propagate(
        self,
        chunk: Chunk,
        assets: AssetStore,
        name_map: Mapping[str, str],
        include_primary: bool = False
    ) -> List[str]:
        """Rewrite old tokens in the chunk's files.

        Args:
            chunk: Chunk whose files are rewritten
            assets: Asset store keyed by file name
            name_map: Old token to new token mapping accumulated so far
            include_primary: Also rewrite primary files matching the filter

        Returns:
            Names of the files that were rewritten

        Raises:
            MissingAssetError: If a selected file is not in the asset store
            UnsupportedAssetType: If a file's content container is unknown
        """
        replacements = [(old, new) for old, new in name_map.items() if old != new]
        if not replacements:
            return []

        rewritten: List[str] = []
        for file_name in chunk.files:
            if not self.should_rewrite(file_name, include_primary):
                continue

            asset = self.get_asset(assets, file_name, chunk)
            source = asset.source
            for old, new in replacements:
                source = self._matcher.replace(source, old, new, file_name)
            asset.source = source
            rewritten.append(file_name)

        if rewritten:
            logger.debug(
                f"Propagated {len(replacements)} hash(es) into {len(rewritten)} file(s) of chunk {chunk.id}"
            )
        return rewritten
