"""Entry points for build integrations.

A build integration calls OutputHashPass.process() once the build has
rendered every chunk but before it writes anything, and after_emit() once
the files are on disk.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from loguru import logger

from outputhash.core.config import OutputHashConfig
from outputhash.core.models import AssetStore, Chunk, RehashResult
from outputhash.core.types import ValidationMode
from outputhash.log import setup_logging
from outputhash.services import HashComputer, OutputValidator, RehashCoordinator


class OutputHashPass:
    """Post-build rehash pass configured once per build."""

    def __init__(self, config: OutputHashConfig | None = None):
        """Initialize the pass.

        Args:
            config: Rewriter configuration, loaded hierarchically when omitted.
                Debug logging is switched on when config.debug is set.

        Raises:
            ConfigurationError: If the loaded configuration or its hash settings
                are invalid. A config built directly with OutputHashConfig(...)
                has already raised pydantic's ValidationError by then.
        """
        self._config = config if config is not None else OutputHashConfig.load_hierarchical()
        if self._config.debug:
            setup_logging(verbose=True)
        self._hash_computer = HashComputer(self._config.hash)
        self._validator = OutputValidator(self._hash_computer, self._config.output_pattern)

    @property
    def config(self) -> OutputHashConfig:
        return self._config

    def process(
        self,
        chunks: Sequence[Chunk],
        assets: AssetStore,
        validate: Union[bool, ValidationMode, None] = None
    ) -> RehashResult:
        """Rehash the build's chunks in place before they are written."""
        coordinator = RehashCoordinator(self._config, self._hash_computer)
        return coordinator.run(chunks, assets, validate)

    def after_emit(self, output_dir: Path, asset_names: Iterable[str]) -> List[str]:
        """Check written files if validate_output is enabled.

        Returns:
            Names of the assets that were checked (empty when disabled)
        """
        if not self._config.validate_output:
            logger.debug("Output validation disabled; skipping written file check")
            return []
        return self._validator.validate(output_dir, asset_names)


def rehash_output(
    chunks: Sequence[Chunk],
    assets: AssetStore,
    config: Optional[OutputHashConfig] = None,
    validate: Union[bool, ValidationMode, None] = None
) -> RehashResult:
    """Run a single rehash pass with the given (or default) configuration."""
    return OutputHashPass(config if config is not None else OutputHashConfig()).process(chunks, assets, validate)
