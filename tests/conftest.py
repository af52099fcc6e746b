"""Shared fixtures for the Authoring Aid test suite."""

import sys

import pytest
from loguru import logger

from authoring_aid.config import Config, reset_config
from authoring_aid.engine import AuthoringAssistant


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no config file reachable and a fresh global config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_config()
    yield tmp_path
    reset_config()


@pytest.fixture
def default_config():
    return Config()


@pytest.fixture
def assistant(default_config):
    return AuthoringAssistant(default_config)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    """Put loguru back to its default stderr sink after the test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


# ---------------------------------------------------------------------------
# Sample text
# ---------------------------------------------------------------------------

@pytest.fixture
def long_sentence():
    """A capitalized, punctuated sentence of 250 characters."""
    return ("Word " * 50).strip() + "."
