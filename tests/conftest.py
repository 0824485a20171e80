"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from cluster_uri.logging import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def clean_logging():
    """Restore structlog defaults around every test."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def cluster_uri_env(monkeypatch):
    """Clear CLUSTER_URI_* variables so settings tests start from defaults."""
    for name in list(os.environ):
        if name.upper().startswith("CLUSTER_URI_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
