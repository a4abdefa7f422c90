"""OutputHash Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the OutputHash rewriter. Every
error carries enough context (file name, token, container kind) to diagnose a
failed pass without re-running it.
"""

from typing import Any, Dict, List, Optional


class OutputHashError(Exception):
    """Base exception for all OutputHash-specific errors.

    This is the root exception class that all other OutputHash exceptions
    inherit from. It provides common functionality for error handling,
    context tracking, and debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize OutputHash error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file names, chunk IDs)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "OutputHashError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ConfigurationError(OutputHashError):
    """Raised when hashing or rewriting configuration is invalid.

    Configuration errors are always raised before the pass mutates anything.
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason


class UnsupportedAssetType(OutputHashError):
    """Raised when a content container has a shape the matcher does not know."""

    def __init__(
        self,
        asset_type: str,
        file_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize unsupported asset error.

        Args:
            asset_type: Concrete type name of the offending container
            file_name: Asset the container belongs to, when known
            context: Optional additional context
        """
        message = (
            f"Unknown asset type ({asset_type}). "
            "Only raw, wrapped, cached and concatenated sources can be rewritten"
        )
        super().__init__(message, context)
        self.asset_type = asset_type
        self.file_name = file_name
        if file_name:
            self.context.setdefault("file", file_name)


class UnresolvedHashProvenance(OutputHashError):
    """A primary file whose hash token belongs neither to its chunk nor a module.

    The rehash pass never raises this; the file is skipped and reported. The
    class exists so callers can turn the reported names into an error.
    """

    def __init__(
        self,
        file_name: str,
        chunk_id: Any = None,
        context: Optional[Dict[str, Any]] = None
    ):
        message = f"Cannot determine which hash '{file_name}' embeds"
        super().__init__(message, context)
        self.file_name = file_name
        self.chunk_id = chunk_id
        if chunk_id is not None:
            self.context.setdefault("chunk", chunk_id)


class StaleReferenceError(OutputHashError):
    """Raised when files still contain old hashes after the pass completed."""

    def __init__(
        self,
        files: List[str],
        tokens: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize stale reference error.

        Args:
            files: Every file that still matches an old token
            tokens: The old tokens that were searched for
            context: Optional additional context
        """
        listing = "\n".join(files)
        super().__init__(f"Some files still had the old hashes:\n{listing}", context)
        self.files = list(files)
        self.tokens = list(tokens or [])


class MissingAssetError(OutputHashError):
    """Raised when a chunk lists a file that is not in the asset store."""

    def __init__(
        self,
        file_name: str,
        chunk_id: Any = None,
        context: Optional[Dict[str, Any]] = None
    ):
        message = f"Asset '{file_name}' is listed by a chunk but missing from the asset store"
        super().__init__(message, context)
        self.file_name = file_name
        self.chunk_id = chunk_id
        if chunk_id is not None:
            self.context.setdefault("chunk", chunk_id)


class OutputHashMismatchError(OutputHashError):
    """Raised when a written file's name does not embed its content hash."""

    def __init__(
        self,
        asset_name: str,
        expected_hash: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize output mismatch error.

        Args:
            asset_name: Name of the asset as emitted
            expected_hash: Short hash computed from the file on disk
            context: Optional additional context
        """
        message = f"The hash in {asset_name} does not match the hash of the content ({expected_hash})"
        super().__init__(message, context)
        self.asset_name = asset_name
        self.expected_hash = expected_hash
