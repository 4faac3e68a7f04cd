"""Shared pytest fixtures for PromptBoost tests."""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from promptboost.core.config import Settings
from promptboost.dispatch import ToolDispatcher
from promptboost.enhancers import create_default_registry


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep config files and PB_* variables from the host out of tests."""
    for name in [n for n in os.environ if n.startswith("PB_")]:
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield
    # setup_logging attaches handlers to streams that die with the test
    logger = logging.getLogger("promptboost")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# Sample prompts for testing
@pytest.fixture
def quantum_prompt():
    """The prompt used throughout the scenarios."""
    return "Explain quantum computing"


@pytest.fixture
def plain_prompt():
    """A prompt with no capitalized or quoted terms."""
    return "explain how sorting works"


@pytest.fixture
def quoted_prompt():
    """A prompt with capitalized words and a quoted phrase."""
    return 'Compare Python and Rust for "memory safety" in Python projects'


@pytest.fixture
def settings():
    """Default settings."""
    return Settings()


@pytest.fixture
def registry(settings):
    """Registry holding all built-in enhancers."""
    return create_default_registry(settings)


@pytest.fixture
def dispatcher(settings):
    """Dispatcher over all built-in enhancers."""
    return ToolDispatcher.from_settings(settings)
