"""Tests for ReferencePropagator content rewriting."""

import pytest

from outputhash.core.exceptions import MissingAssetError, UnsupportedAssetType
from outputhash.providers.sources import ConcatSource, RawSource
from outputhash.services import ReferencePropagator

from .helpers import make_chunk, make_store


class TestReferencePropagator:
    """Test cases for ReferencePropagator."""

    def setup_method(self):
        """Set up a chunk with one primary and two secondary files."""
        self.chunk = make_chunk(1, "abc123", ["app.abc123.js", "app.abc123.js.map", "app.abc123.LICENSE.txt"])
        self.assets = make_store({
            "app.abc123.js": "import('lazy.aaa111.js')",
            "app.abc123.js.map": '{"sources":["lazy.aaa111.js"]}',
            "app.abc123.LICENSE.txt": "see lazy.aaa111.js",
        })
        self.name_map = {"aaa111": "bbb222"}

    def test_rewrites_secondary_files(self, config):
        """Test that every secondary file receives the new token."""
        propagator = ReferencePropagator(config)

        rewritten = propagator.propagate(self.chunk, self.assets, self.name_map)

        assert rewritten == ["app.abc123.js.map", "app.abc123.LICENSE.txt"]
        assert self.assets["app.abc123.js.map"].source == '{"sources":["lazy.bbb222.js"]}'
        assert self.assets["app.abc123.LICENSE.txt"].source == "see lazy.bbb222.js"
        assert self.assets["app.abc123.js"].source == "import('lazy.aaa111.js')"

    def test_include_primary(self, config):
        """Test that primary files are rewritten when requested."""
        propagator = ReferencePropagator(config)

        propagator.propagate(self.chunk, self.assets, self.name_map, include_primary=True)

        assert self.assets["app.abc123.js"].source == "import('lazy.bbb222.js')"

    def test_inclusion_filter(self, config):
        """Test that only files matching the filter are rewritten."""
        propagator = ReferencePropagator(config, inclusion_filter=r"\.map$")

        rewritten = propagator.propagate(self.chunk, self.assets, self.name_map)

        assert rewritten == ["app.abc123.js.map"]
        assert self.assets["app.abc123.LICENSE.txt"].source == "see lazy.aaa111.js"

    def test_filter_from_config(self, config):
        """Test that the configured replacement filter is used by default."""
        propagator = ReferencePropagator(config.model_copy(update={"replacement_filter": "LICENSE"}))

        assert propagator.propagate(self.chunk, self.assets, self.name_map) == ["app.abc123.LICENSE.txt"]

    def test_applies_every_mapping(self, config):
        """Test that all accumulated tokens are replaced in one sweep."""
        self.assets["app.abc123.js.map"].source = ConcatSource("aaa111 ", RawSource("ccc333"))
        propagator = ReferencePropagator(config)

        propagator.propagate(self.chunk, self.assets, {"aaa111": "bbb222", "ccc333": "ddd444"})

        assert self.assets["app.abc123.js.map"].source.source() == "bbb222 ddd444"

    def test_empty_map_is_noop(self, config):
        """Test that nothing is rewritten without changed tokens."""
        propagator = ReferencePropagator(config)

        assert propagator.propagate(self.chunk, self.assets, {"same": "same"}) == []

    def test_missing_asset(self, config):
        """Test that a listed secondary file missing from the store is reported."""
        del self.assets["app.abc123.js.map"]
        propagator = ReferencePropagator(config)

        with pytest.raises(MissingAssetError):
            propagator.propagate(self.chunk, self.assets, self.name_map)

    def test_unsupported_container(self, config):
        """Test that an unknown container aborts with the file name."""
        self.assets["app.abc123.js.map"].source = 12
        propagator = ReferencePropagator(config)

        with pytest.raises(UnsupportedAssetType) as exc_info:
            propagator.propagate(self.chunk, self.assets, self.name_map)

        assert exc_info.value.file_name == "app.abc123.js.map"
