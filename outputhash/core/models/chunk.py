"""OutputHash Chunk Domain Model - A dependency-grouped unit of build output.

These models are mutable: the rehash pass rewrites file names and hash fields
in place and hands the same objects back to the build for writing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import ConfigurationError
from ..types import ChunkId


@dataclass
class Module:
    """A constituent of a chunk carrying its own content hash.

    Some chunks borrow a module's hash for one of their file names (a
    stylesheet extracted from a script chunk, for example).

    Attributes:
        rendered_hash: Short hash token as rendered into file names
        hash: Full digest the token was cut from
        identifier: Optional module identifier for diagnostics
    """

    rendered_hash: str
    hash: str = ""
    identifier: Optional[str] = None

    def update_hash(self, full_hash: str, short_hash: str) -> None:
        self.hash = full_hash
        self.rendered_hash = short_hash


@dataclass
class Chunk:
    """Domain model for a chunk of build output.

    Attributes:
        id: Orderable chunk identity
        files: Output file names, primary files first by convention
        rendered_hash: Token currently embedded in the primary file name
        hash: Full digest kept in sync with rendered_hash
        has_runtime: True if this chunk bootstraps or loads other chunks
        modules: Constituent modules
    """

    id: ChunkId
    files: List[str]
    rendered_hash: str
    hash: str = ""
    has_runtime: bool = False
    modules: List[Module] = field(default_factory=list)

    def update_hash(self, full_hash: str, short_hash: str) -> None:
        """Keep the chunk hash fields in sync with a freshly computed digest."""
        self.hash = full_hash
        self.rendered_hash = short_hash

    def find_module_in(self, file_name: str) -> Optional[Module]:
        """Return the first module whose token is embedded in file_name."""
        for module in self.modules:
            if module.rendered_hash and module.rendered_hash in file_name:
                return module
        return None

    def rename_file(self, old_name: str, new_name: str) -> None:
        """Replace a file list entry in place, keeping its position."""
        index = self.files.index(old_name)
        self.files[index] = new_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chunk":
        """Create a Chunk from a build manifest entry.

        Accepts both snake_case and the camelCase keys build tools emit
        (``renderedHash``, ``hasRuntime``).

        Raises:
            ConfigurationError: If required fields are missing
        """
        if "id" not in data:
            raise ConfigurationError("id", None, "Chunk id is required")

        rendered_hash = data.get("rendered_hash", data.get("renderedHash"))
        if rendered_hash is None:
            raise ConfigurationError("rendered_hash", None, "Chunk rendered hash is required")

        modules = [
            Module(
                rendered_hash=m.get("rendered_hash", m.get("renderedHash", "")),
                hash=m.get("hash", ""),
                identifier=m.get("identifier", m.get("id")),
            )
            for m in data.get("modules", [])
        ]

        return cls(
            id=data["id"],
            files=list(data.get("files", [])),
            rendered_hash=rendered_hash,
            hash=data.get("hash", ""),
            has_runtime=bool(data.get("has_runtime", data.get("hasRuntime", False))),
            modules=modules,
        )
