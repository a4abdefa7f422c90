"""OutputHash - rehash build output after hash embedding and propagate the new names."""

__version__ = "1.0.0"
__description__ = "Post-build content hash rewriter for chunked build output"

__all__ = [
    "OutputHashPass",
    "rehash_output",
    "OutputHashConfig",
    "HashConfig",
    "Chunk",
    "Module",
    "Asset",
    "setup_logging",
]


def __getattr__(name: str):
    """Lazy import so the core package can be used without loading services."""
    if name in ("OutputHashPass", "rehash_output"):
        from . import api
        return getattr(api, name)
    elif name in ("OutputHashConfig", "HashConfig"):
        from .core import config
        return getattr(config, name)
    elif name in ("Chunk", "Module", "Asset"):
        from .core import models
        return getattr(models, name)
    elif name == "setup_logging":
        from .log import setup_logging
        return setup_logging
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
