"""Wrapped content: an inner source carried together with its source map."""

from typing import Any, Optional, Pattern, Union

from outputhash.core.types import Content
from outputhash.interfaces.content_source import ContentSource
from outputhash.services.content_matcher import content_contains, replace_in_content


class WrappedSource(ContentSource):
    """Container delegating its content to a nested source.

    The attached source map describes the inner content and is carried
    through replacements unchanged; hash tokens inside a map asset are
    rewritten through that asset's own container.
    """

    def __init__(self, inner: Any, source_map: Optional[Content] = None):
        """Initialize wrapped source.

        Args:
            inner: Nested container (raw text/bytes or another ContentSource)
            source_map: Optional source map for the inner content
        """
        self._inner = inner
        self._source_map = source_map

    @property
    def inner(self) -> Any:
        return self._inner

    def source_map(self) -> Optional[Content]:
        return self._source_map

    def source(self) -> Content:
        if isinstance(self._inner, ContentSource):
            return self._inner.source()
        return self._inner

    def replace_token(self, old: str, new: str) -> "WrappedSource":
        return WrappedSource(replace_in_content(self._inner, old, new), self._source_map)

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        return content_contains(self._inner, pattern)

    def __repr__(self) -> str:
        return f"WrappedSource({self._inner!r})"
