"""Base service class for OutputHash services."""

from abc import ABC

from outputhash.core.config import OutputHashConfig
from outputhash.core.exceptions import MissingAssetError
from outputhash.core.models import Asset, AssetStore, Chunk


class BaseService(ABC):
    """Base service class providing shared configuration and asset lookups."""

    def __init__(self, config: OutputHashConfig | None = None):
        """Initialize service with configuration.

        Args:
            config: Rewriter configuration, defaults when omitted
        """
        self._config = config if config is not None else OutputHashConfig()
        self._primary_extensions = tuple(self._config.primary_extensions)

    @property
    def config(self) -> OutputHashConfig:
        """Get configuration instance."""
        return self._config

    def is_primary(self, file_name: str) -> bool:
        """Check whether file_name is one of a chunk's primary outputs."""
        return file_name.endswith(self._primary_extensions)

    @staticmethod
    def get_asset(assets: AssetStore, file_name: str, chunk: Chunk) -> Asset:
        """Look up a chunk's file in the asset store.

        Raises:
            MissingAssetError: If the store has no entry for file_name
        """
        try:
            return assets[file_name]
        except KeyError:
            raise MissingAssetError(file_name, chunk.id) from None
