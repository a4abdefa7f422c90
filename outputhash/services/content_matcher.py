"""Content matcher for OutputHash - literal token search and replace over content containers.

Tokens are hash strings and are always treated as literals: they are escaped
before being used as a search pattern. A container is either raw text/bytes or
one of the ContentSource shapes; anything else raises UnsupportedAssetType.
"""

import re
from functools import lru_cache
from typing import Any, Iterable, Pattern, Union

from outputhash.core.exceptions import UnsupportedAssetType
from outputhash.interfaces.content_source import ContentSource

Container = Union[str, bytes, ContentSource]
PatternLike = Union[str, Pattern]


@lru_cache(maxsize=256)
def _literal(token: str, as_bytes: bool) -> Pattern:
    if as_bytes:
        return re.compile(re.escape(token.encode("utf-8")))
    return re.compile(re.escape(token))


@lru_cache(maxsize=256)
def _bytes_pattern(pattern: str, flags: int) -> Pattern:
    return re.compile(pattern.encode("utf-8"), flags & ~re.UNICODE)


def build_token_pattern(tokens: Iterable[str]) -> Pattern:
    """Build one pattern matching any of the given literal tokens.

    Longer tokens come first so a token that is a prefix of another never
    shadows it.
    """
    unique = sorted(set(tokens), key=lambda t: (-len(t), t))
    if not unique:
        raise ValueError("at least one token is required")
    return re.compile("|".join(re.escape(token) for token in unique))


def _coerce_pattern(pattern: PatternLike, as_bytes: bool) -> Pattern:
    if isinstance(pattern, str):
        return _literal(pattern, as_bytes)
    if as_bytes and isinstance(pattern.pattern, str):
        return _bytes_pattern(pattern.pattern, pattern.flags)
    return pattern


def replace_in_content(container: Any, old: str, new: str) -> Container:
    """Return container with every literal occurrence of old replaced by new.

    Raises:
        UnsupportedAssetType: If the container shape is unknown
    """
    if isinstance(container, str):
        return _literal(old, False).sub(lambda _: new, container)
    if isinstance(container, bytes):
        replacement = new.encode("utf-8")
        return _literal(old, True).sub(lambda _: replacement, container)
    if isinstance(container, ContentSource):
        return container.replace_token(old, new)
    raise UnsupportedAssetType(type(container).__name__)


def content_contains(container: Any, pattern: PatternLike) -> bool:
    """Check whether any part of container matches pattern.

    A str pattern is a single literal token; a compiled pattern may be a
    union of several tokens (see build_token_pattern).

    Raises:
        UnsupportedAssetType: If the container shape is unknown
    """
    if isinstance(container, (str, bytes)):
        regex = _coerce_pattern(pattern, isinstance(container, bytes))
        return regex.search(container) is not None
    if isinstance(container, ContentSource):
        return container.contains(pattern)
    raise UnsupportedAssetType(type(container).__name__)


class ContentMatcher:
    """Locates and rewrites hash tokens inside asset content."""

    def replace(self, container: Any, old: str, new: str, file_name: str | None = None) -> Container:
        """Replace old with new everywhere in container.

        Args:
            container: Raw text/bytes or a ContentSource
            old: Token to replace
            new: Replacement token
            file_name: Asset name, attached to errors for diagnostics
        """
        if old == new:
            return container
        try:
            return replace_in_content(container, old, new)
        except UnsupportedAssetType as e:
            if file_name and e.file_name is None:
                e.file_name = file_name
                e.add_context("file", file_name)
            e.add_context("token", old)
            raise

    def contains(self, container: Any, pattern: PatternLike, file_name: str | None = None) -> bool:
        """Check whether container matches pattern."""
        try:
            return content_contains(container, pattern)
        except UnsupportedAssetType as e:
            if file_name and e.file_name is None:
                e.file_name = file_name
                e.add_context("file", file_name)
            raise
