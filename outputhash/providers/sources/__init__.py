"""Content container shapes for OutputHash assets.

This package contains the content containers an asset can hold. Each
shape implements the ContentSource interface so the content matcher can
search and rewrite hash tokens in it:

- RawSource: plain text or bytes
- WrappedSource: an inner source with an attached source map
- CachedSource: an inner source and/or its cached rendering
- ConcatSource: an ordered sequence of child containers
"""

from .cached_source import CachedSource
from .concat_source import ConcatSource
from .raw_source import RawSource
from .wrapped_source import WrappedSource

__all__ = [
    "RawSource",
    "WrappedSource",
    "CachedSource",
    "ConcatSource",
]
