"""Hash computer for OutputHash - content digests rendered as file name tokens."""

import base64
import hashlib
from typing import Any, Dict, Union

from pydantic import ValidationError

from outputhash.core.config import HashConfig, is_supported_algorithm
from outputhash.core.exceptions import ConfigurationError
from outputhash.core.models import HashResult
from outputhash.core.types import Content, DigestEncoding


class HashComputer:
    """Computes full and short content hashes with the build's hash settings."""

    def __init__(self, config: Union[HashConfig, Dict[str, Any], None] = None):
        """Initialize hash computer.

        Args:
            config: Hash settings as a model or plain dictionary

        Raises:
            ConfigurationError: If the settings are invalid
        """
        if config is None:
            config = HashConfig()
        elif isinstance(config, dict):
            try:
                config = HashConfig(**config)
            except ValidationError as e:
                first = e.errors()[0]
                key = ".".join(str(part) for part in first.get("loc", ()))
                raise ConfigurationError(key or None, first.get("input"), first.get("msg"), cause=e)

        # Models built with model_construct skip validation
        if not is_supported_algorithm(config.algorithm):
            raise ConfigurationError("algorithm", config.algorithm, "unsupported hash algorithm")
        if config.short_length < 1:
            raise ConfigurationError("short_length", config.short_length, "must be at least 1")

        self._config = config
        self._encoding = DigestEncoding(config.digest_encoding)

    @property
    def config(self) -> HashConfig:
        return self._config

    def compute(self, content: Content) -> HashResult:
        """Digest content (plus salt) and cut the short token from it.

        Args:
            content: File bytes; text is encoded as UTF-8

        Returns:
            HashResult with the full and short hash
        """
        if isinstance(content, str):
            content = content.encode("utf-8")

        hasher = hashlib.new(self._config.algorithm)
        hasher.update(content)
        if self._config.salt:
            hasher.update(self._config.salt)

        full_hash = self._encode(hasher.digest())
        return HashResult(full_hash=full_hash, short_hash=full_hash[: self._config.short_length])

    def _encode(self, digest: bytes) -> str:
        if self._encoding is DigestEncoding.HEX:
            return digest.hex()
        if self._encoding is DigestEncoding.BASE64:
            return base64.b64encode(digest).decode("ascii")
        if self._encoding is DigestEncoding.BASE64URL:
            return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
        return digest.decode("latin-1")
