"""Raw text or bytes content."""

from typing import Pattern, Union

from outputhash.core.types import Content
from outputhash.interfaces.content_source import ContentSource
from outputhash.services.content_matcher import content_contains, replace_in_content


class RawSource(ContentSource):
    """Leaf container holding its content directly."""

    def __init__(self, value: Content):
        self._value = value

    def source(self) -> Content:
        return self._value

    def replace_token(self, old: str, new: str) -> "RawSource":
        return RawSource(replace_in_content(self._value, old, new))

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        return content_contains(self._value, pattern)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RawSource) and other._value == self._value

    def __repr__(self) -> str:
        return f"RawSource({self._value!r})"
