"""Tests for the on-disk output hash check and the integration entry points."""

from pathlib import Path

import pytest

from outputhash.api import OutputHashPass, rehash_output
from outputhash.core.exceptions import OutputHashMismatchError
from outputhash.services import OutputValidator

from .helpers import make_chunk, make_store


def write_file(directory: Path, name: str, content: bytes) -> Path:
    path = directory / name
    path.write_bytes(content)
    return path


class TestOutputValidator:
    """Test cases for OutputValidator."""

    def test_matching_names_pass(self, tmp_path, hash_computer, short_hash):
        """Test that a file named after its content hash validates."""
        name = f"app.{short_hash(b'body')}.js"
        write_file(tmp_path, name, b"body")
        validator = OutputValidator(hash_computer)

        assert validator.validate(tmp_path, [name]) == [name]

    def test_mismatch_raises(self, tmp_path, hash_computer, short_hash):
        """Test that a stale name is reported with the expected hash."""
        write_file(tmp_path, "app.abc123.js", b"body")
        validator = OutputValidator(hash_computer)

        with pytest.raises(OutputHashMismatchError) as exc_info:
            validator.validate(tmp_path, ["app.abc123.js"])

        assert exc_info.value.asset_name == "app.abc123.js"
        assert exc_info.value.expected_hash == short_hash(b"body")

    def test_query_string_is_stripped(self, tmp_path, hash_computer, short_hash):
        """Test that the file is found without the asset's query string."""
        file_name = f"app.{short_hash(b'body')}.js"
        write_file(tmp_path, file_name, b"body")
        validator = OutputValidator(hash_computer)

        assert validator.validate(tmp_path, [f"{file_name}?v=2"]) == [f"{file_name}?v=2"]

    def test_pattern_limits_checked_assets(self, tmp_path, hash_computer, short_hash):
        """Test that assets outside the pattern are not read."""
        name = f"app.{short_hash(b'body')}.js"
        write_file(tmp_path, name, b"body")
        validator = OutputValidator(hash_computer, pattern=r"\.js$")

        assert validator.validate(tmp_path, [name, "missing.abc123.js.map"]) == [name]

    def test_target_file(self):
        """Test query string handling."""
        assert OutputValidator.target_file("a.js?x=1?y") == "a.js"
        assert OutputValidator.target_file("a.js") == "a.js"


class TestOutputHashPass:
    """Test the two-phase integration entry point."""

    def test_process_then_after_emit(self, tmp_path, config):
        """Test that rehashed output passes the written file check."""
        output_pass = OutputHashPass(config.model_copy(update={"validate_output": True}))
        chunk = make_chunk(1, "abc123", ["app.abc123.js", "app.abc123.js.map"])
        assets = make_store({"app.abc123.js": "code", "app.abc123.js.map": "app.abc123.js"})

        output_pass.process([chunk], assets)
        for name, asset in assets.items():
            write_file(tmp_path, name, asset.buffer())

        checked = output_pass.after_emit(tmp_path, [chunk.files[0]])
        assert checked == [chunk.files[0]]

    def test_after_emit_disabled(self, tmp_path, config):
        """Test that the written file check is skipped unless enabled."""
        output_pass = OutputHashPass(config)

        assert output_pass.after_emit(tmp_path, ["app.abc123.js"]) == []

    def test_rehash_output(self, config, short_hash):
        """Test the one-call wrapper."""
        chunk = make_chunk(1, "abc123", ["app.abc123.js"])
        assets = make_store({"app.abc123.js": "code"})

        result = rehash_output([chunk], assets, config)

        assert result.name_map == {"abc123": short_hash("code")}
