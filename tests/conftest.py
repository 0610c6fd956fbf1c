"""Shared fixtures for osenv tests."""
import pytest
from loguru import logger

KEY = "OSENV_TEST_VALUE"


@pytest.fixture
def key(monkeypatch):
    """Name of an environment variable that starts out unset."""
    monkeypatch.delenv(KEY, raising=False)
    return KEY


@pytest.fixture
def log_messages():
    """Collect osenv log messages emitted during a test."""
    messages = []
    logger.enable("osenv")
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("osenv")
