"""Shared fixtures for OutputHash tests."""

from typing import List

import pytest
from loguru import logger

from outputhash.core.config import HashConfig, OutputHashConfig
from outputhash.services import HashComputer


@pytest.fixture
def config() -> OutputHashConfig:
    """Configuration with short, readable hashes."""
    return OutputHashConfig(hash=HashConfig(algorithm="md5", short_length=8))


@pytest.fixture
def hash_computer(config: OutputHashConfig) -> HashComputer:
    return HashComputer(config.hash)


@pytest.fixture
def short_hash(hash_computer: HashComputer):
    """Return a function computing the short hash the pass will produce."""
    def _short_hash(content) -> str:
        return hash_computer.compute(content).short_hash
    return _short_hash


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="WARNING")
    yield messages
    logger.remove(handler_id)
