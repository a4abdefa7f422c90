"""Output validator for OutputHash - checks written files against the hash in their names."""

import re
from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Union

from loguru import logger

from outputhash.core.exceptions import OutputHashMismatchError
from .hash_computer import HashComputer


class OutputValidator:
    """Re-reads emitted files and confirms each name embeds its content hash.

    This runs after the build wrote its output and is independent of the
    in-memory pass; it only reads from disk.
    """

    def __init__(
        self,
        hash_computer: HashComputer,
        pattern: Union[str, Pattern, None] = None
    ):
        """Initialize output validator.

        Args:
            hash_computer: Hash computer configured like the build
            pattern: Only asset names matching this are checked (default: all)
        """
        self._hash_computer = hash_computer
        if pattern is None:
            pattern = '^.*$'
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @staticmethod
    def target_file(asset_name: str) -> str:
        """Strip a query string the way the build does when writing the file."""
        query_index = asset_name.find('?')
        if query_index >= 0:
            return asset_name[:query_index]
        return asset_name

    def check(self, output_dir: Path, asset_name: str) -> Optional[OutputHashMismatchError]:
        """Check a single written asset.

        Returns:
            The mismatch error, or None if the name embeds the content hash

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(output_dir) / self.target_file(asset_name)
        short_hash = self._hash_computer.compute(path.read_bytes()).short_hash
        if short_hash in asset_name:
            return None
        return OutputHashMismatchError(asset_name, short_hash)

    def validate(self, output_dir: Path, asset_names: Iterable[str]) -> List[str]:
        """Check every matching asset under output_dir.

        Args:
            output_dir: Directory the build wrote its output to
            asset_names: Names of the emitted assets

        Returns:
            Names of the assets that were checked

        Raises:
            OutputHashMismatchError: For the last mismatching asset; every
                mismatch is logged
        """
        checked: List[str] = []
        error: Optional[OutputHashMismatchError] = None

        for asset_name in asset_names:
            if not self._pattern.search(asset_name):
                continue
            mismatch = self.check(output_dir, asset_name)
            checked.append(asset_name)
            if mismatch is not None:
                logger.error(str(mismatch))
                error = mismatch

        if error is not None:
            raise error

        logger.debug(f"Validated hashes of {len(checked)} written file(s) in {output_dir}")
        return checked
