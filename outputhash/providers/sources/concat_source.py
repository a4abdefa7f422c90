"""Concatenated content: an ordered sequence of child containers."""

from typing import Any, List, Pattern, Union

from outputhash.core.types import Content
from outputhash.interfaces.content_source import ContentSource
from outputhash.services.content_matcher import content_contains, replace_in_content


class ConcatSource(ContentSource):
    """Container rendering its children one after another."""

    def __init__(self, *children: Any):
        self._children: List[Any] = list(children)

    @property
    def children(self) -> List[Any]:
        return list(self._children)

    def source(self) -> Content:
        parts = [
            child.source() if isinstance(child, ContentSource) else child
            for child in self._children
        ]
        if any(isinstance(part, bytes) for part in parts):
            return b"".join(
                part.encode("utf-8") if isinstance(part, str) else part for part in parts
            )
        return "".join(parts)

    def replace_token(self, old: str, new: str) -> "ConcatSource":
        return ConcatSource(*(replace_in_content(child, old, new) for child in self._children))

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        # Tokens split across two children are not found
        return any(content_contains(child, pattern) for child in self._children)

    def __repr__(self) -> str:
        return f"ConcatSource({len(self._children)} children)"
