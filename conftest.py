"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    """Keep a developer's $NUMBER_READER_CONFIG out of the test run."""
    monkeypatch.delenv("NUMBER_READER_CONFIG", raising=False)
