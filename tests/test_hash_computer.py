"""Tests for HashComputer digest and short token computation."""

import base64
import hashlib

import pytest

from outputhash.core.config import HashConfig
from outputhash.core.exceptions import ConfigurationError
from outputhash.services import HashComputer


class TestHashComputer:
    """Test cases for HashComputer."""

    def test_hex_digest_and_short_hash(self):
        """Test the full digest and its prefix for a known input."""
        computer = HashComputer(HashConfig(algorithm="md5", short_length=8))

        result = computer.compute(b"hello")

        assert result.full_hash == "5d41402abc4b2a76b9719d911017c592"
        assert result.short_hash == "5d41402a"

    def test_deterministic(self):
        """Test that repeated calls return the same hashes."""
        computer = HashComputer()

        assert computer.compute(b"same content") == computer.compute(b"same content")

    def test_text_is_hashed_as_utf8(self):
        """Test that str and its UTF-8 bytes hash identically."""
        computer = HashComputer()

        assert computer.compute("café") == computer.compute("café".encode("utf-8"))

    def test_salt_is_appended_after_content(self):
        """Test that the salt is digested after the content."""
        computer = HashComputer({"algorithm": "sha256", "salt": "pepper"})

        expected = hashlib.sha256(b"hello" + b"pepper").hexdigest()
        assert computer.compute(b"hello").full_hash == expected
        assert computer.compute(b"hello").full_hash != HashComputer({"algorithm": "sha256"}).compute(b"hello").full_hash

    def test_default_short_length(self):
        """Test that the default configuration embeds 20 characters."""
        result = HashComputer().compute(b"x")

        assert len(result.short_hash) == 20
        assert result.full_hash.startswith(result.short_hash)

    def test_short_length_longer_than_digest(self):
        """Test that an oversized short length yields the whole digest."""
        result = HashComputer({"short_length": 100}).compute(b"x")

        assert result.short_hash == result.full_hash

    def test_base64_encoding(self):
        """Test base64 rendering of the digest."""
        computer = HashComputer({"digest_encoding": "base64", "short_length": 4})
        expected = base64.b64encode(hashlib.md5(b"hello").digest()).decode("ascii")

        result = computer.compute(b"hello")

        assert result.full_hash == expected
        assert result.short_hash == expected[:4]

    def test_base64url_encoding_has_no_padding(self):
        """Test URL-safe base64 rendering without padding."""
        computer = HashComputer({"digest_encoding": "base64url"})
        expected = base64.urlsafe_b64encode(hashlib.md5(b"hello").digest()).decode("ascii").rstrip("=")

        assert computer.compute(b"hello").full_hash == expected

    def test_latin1_encoding(self):
        """Test latin1 rendering maps each digest byte to one character."""
        computer = HashComputer({"digest_encoding": "LATIN1"})

        result = computer.compute(b"hello")

        assert result.full_hash == hashlib.md5(b"hello").digest().decode("latin-1")
        assert len(result.full_hash) == 16


class TestHashComputerConfiguration:
    """Test configuration failures surface as ConfigurationError."""

    def test_unknown_algorithm(self):
        """Test that an unknown algorithm is rejected at construction."""
        with pytest.raises(ConfigurationError) as exc_info:
            HashComputer({"algorithm": "not-a-hash"})

        assert exc_info.value.config_key == "algorithm"

    def test_variable_length_algorithm_rejected(self):
        """Test that shake digests, which need an explicit length, are rejected."""
        with pytest.raises(ConfigurationError):
            HashComputer({"algorithm": "shake_128"})

    def test_unvalidated_model_is_checked(self):
        """Test that models built without validation are still checked."""
        config = HashConfig.model_construct(algorithm="not-a-hash")

        with pytest.raises(ConfigurationError):
            HashComputer(config)

    def test_invalid_short_length(self):
        """Test that a zero short length is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            HashComputer({"short_length": 0})

        assert exc_info.value.config_key == "short_length"

    def test_invalid_encoding(self):
        """Test that an unknown digest encoding is rejected."""
        with pytest.raises(ConfigurationError):
            HashComputer({"digest_encoding": "base32"})
