"""OutputHash Asset Domain Model - A named content container in the asset store."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, MutableMapping, Union

if TYPE_CHECKING:
    from outputhash.interfaces.content_source import ContentSource


@dataclass
class Asset:
    """A file's content as held by the build's asset store.

    Attributes:
        name: The container's own record of its file name
        source: Content container (raw text/bytes or a ContentSource)
    """

    name: str
    source: Union[str, bytes, "ContentSource"]

    def buffer(self) -> bytes:
        """Return the rendered content as bytes."""
        if isinstance(self.source, bytes):
            return self.source
        if isinstance(self.source, str):
            return self.source.encode("utf-8")
        return self.source.buffer()


AssetStore = MutableMapping[str, Asset]
