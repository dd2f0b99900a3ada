"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termstyle.style_engine import StyleRegistry  # noqa: E402
from termstyle.config import CONFIG_ENV_VAR  # noqa: E402


@pytest.fixture
def registry():
    """A fresh registry, independent of the process-wide one."""
    return StyleRegistry()


@pytest.fixture(autouse=True)
def _no_settings_env(monkeypatch):
    """Keep a developer's settings file out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
