"""Cached content: an inner source memoized as a rendered value."""

from typing import Any, Optional, Pattern, Union

from outputhash.core.types import Content
from outputhash.interfaces.content_source import ContentSource
from outputhash.services.content_matcher import content_contains, replace_in_content


class CachedSource(ContentSource):
    """Container that memoizes the rendering of an inner source.

    Either part may be missing: a cached source restored from a previous
    build can hold only its rendering.
    """

    def __init__(self, inner: Any = None, cached: Optional[Content] = None):
        """Initialize cached source.

        Args:
            inner: Nested container, if still available
            cached: Previously rendered content, if any
        """
        if inner is None and cached is None:
            raise ValueError("CachedSource needs an inner source or a cached value")
        self._inner = inner
        self._cached = cached

    @property
    def inner(self) -> Any:
        return self._inner

    @property
    def is_cached(self) -> bool:
        return self._cached is not None

    def source(self) -> Content:
        if self._cached is None:
            if isinstance(self._inner, ContentSource):
                self._cached = self._inner.source()
            else:
                self._cached = self._inner
        return self._cached

    def replace_token(self, old: str, new: str) -> "CachedSource":
        if self._inner is None:
            return CachedSource(cached=replace_in_content(self._cached, old, new))
        # The rendering is stale once the inner source changes
        return CachedSource(replace_in_content(self._inner, old, new))

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        if self._inner is None:
            return content_contains(self._cached, pattern)
        return content_contains(self._inner, pattern)

    def __repr__(self) -> str:
        return f"CachedSource(inner={self._inner!r}, cached={self.is_cached})"
