"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kidspoints_theme.config import Config  # noqa: E402
from kidspoints_theme.theme_engine import ThemeEngine  # noqa: E402


@pytest.fixture
def engine():
    """Fresh theme engine with an empty cache."""
    return ThemeEngine()


@pytest.fixture
def reset_config():
    """Drop the cached configuration before and after a test."""
    Config._instance = None
    Config._path = None
    yield
    Config._instance = None
    Config._path = None


@pytest.fixture
def config_file(tmp_path, reset_config):
    """Path for a config file inside the test's temporary directory."""
    return tmp_path / "theme.yaml"
