"""OutputHash interfaces package."""

from .content_source import ContentSource

__all__ = [
    "ContentSource",
]
