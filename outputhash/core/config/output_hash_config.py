"""
Unified configuration for OutputHash.

This module provides a single, type-safe configuration model for the rehash
pass with hierarchical loading from user and project config files,
environment variables and runtime overrides.
"""

import json
import re
from pathlib import Path
from typing import Any, Optional, Pattern

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError
from ..types import ValidationMode
from .hash_config import HashConfig


class OutputHashConfig(BaseSettings):
    """
    Unified configuration for OutputHash.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (OUTPUTHASH_*)
    3. Project config file (.outputhash.json)
    4. User config file (~/.outputhash/config.json)
    5. Default values (lowest priority)

    Environment Variable Examples:
        OUTPUTHASH_HASH__ALGORITHM=sha256
        OUTPUTHASH_HASH__SHORT_LENGTH=8
        OUTPUTHASH_REPLACEMENT_FILTER=\\.map$
        OUTPUTHASH_VALIDATION_MODE=report

    Constructing the model directly raises pydantic's ValidationError for
    bad values; load_hierarchical() reports them as ConfigurationError.
    """

    model_config = SettingsConfigDict(
        env_prefix='OUTPUTHASH_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    hash: HashConfig = Field(
        default_factory=HashConfig,
        description="Digest settings for file name hashes"
    )

    primary_extensions: list[str] = Field(
        default_factory=lambda: ['.js', '.css'],
        description="File extensions that mark a chunk's primary output files"
    )

    replacement_filter: Optional[str] = Field(
        default=None,
        description="Regex selecting files whose content receives new hashes (None matches all)"
    )

    validation_mode: ValidationMode = Field(
        default=ValidationMode.REPORT,
        description="Post-pass stale hash scan: strict, report or off"
    )

    validate_output: bool = Field(
        default=False,
        description="Check written files against the hash in their names"
    )

    validate_output_pattern: str = Field(
        default='^.*$',
        description="Regex selecting which written assets are checked"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator('primary_extensions')
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Require at least one extension, normalized to a leading dot."""
        if not v:
            raise ValueError("at least one primary extension is required")
        return [ext if ext.startswith('.') else f'.{ext}' for ext in v]

    @field_validator('replacement_filter', 'validate_output_pattern')
    def validate_regex(cls, v: Optional[str]) -> Optional[str]:
        """Fail on bad patterns at load time rather than in the middle of a pass."""
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid regular expression: {e}")
        return v

    @field_validator('validation_mode', mode='before')
    def normalize_validation_mode(cls, v):
        if isinstance(v, bool):
            return ValidationMode.STRICT if v else ValidationMode.OFF
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def replacement_pattern(self) -> Pattern[str]:
        """Compiled inclusion filter for content propagation."""
        return re.compile(self.replacement_filter or '^.*$')

    @property
    def output_pattern(self) -> Pattern[str]:
        """Compiled filter for the on-disk output check."""
        return re.compile(self.validate_output_pattern)

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          **override_values: Any) -> 'OutputHashConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .outputhash.json
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If the merged configuration does not validate
        """
        config_data: dict[str, Any] = {}

        user_config_path = Path.home() / '.outputhash' / 'config.json'
        config_data.update(cls._read_config_file(user_config_path))

        if project_dir is None:
            project_dir = Path.cwd()
        config_data.update(cls._read_config_file(project_dir / '.outputhash.json'))

        config_data.update(override_values)

        try:
            config = cls(**config_data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first.get('loc', ()))
            raise ConfigurationError(key or None, first.get('input'), first.get('msg'), cause=e)

        return config

    @staticmethod
    def _read_config_file(path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load config {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {path}: top level must be an object")
            return {}
        return data

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format."""
        return self.model_dump(mode='json', exclude_none=True)

    def save_to_file(self, file_path: Path) -> None:
        """Save configuration to a JSON file."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def __repr__(self) -> str:
        return (
            f"OutputHashConfig("
            f"hash.algorithm={self.hash.algorithm}, "
            f"hash.short_length={self.hash.short_length}, "
            f"replacement_filter={self.replacement_filter}, "
            f"validation_mode={self.validation_mode.value})"
        )
