"""ContentSource base class for OutputHash - the closed set of content container shapes."""

from abc import ABC, abstractmethod
from typing import Pattern, Union

from outputhash.core.types import Content


class ContentSource(ABC):
    """Abstract base for content containers held by assets.

    Every shape renders to text or bytes and supports the two token operations
    the rehash pass needs. Implementations never mutate themselves when
    replacing; they return a new container.
    """

    @abstractmethod
    def source(self) -> Content:
        """Render the full content."""
        ...

    def buffer(self) -> bytes:
        """Render the full content as bytes."""
        value = self.source()
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    @abstractmethod
    def replace_token(self, old: str, new: str) -> "ContentSource":
        """Return a copy with every literal occurrence of old replaced by new."""
        ...

    @abstractmethod
    def contains(self, pattern: Union[str, Pattern]) -> bool:
        """Check whether the content matches pattern anywhere."""
        ...
