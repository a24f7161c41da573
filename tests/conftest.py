"""
Shared pytest fixtures and configuration for salvage tests.

This module provides:
- Settings cache reset so each test sees its own environment
- structlog context/config reset for log isolation
- Auto-marking of unit vs integration tests by location
- A seeded random.Random for replay tests
"""

import os
import random
import sys
from pathlib import Path

import pytest
import structlog

# Ensure salvage package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from salvage.core.logging import clear_context
from salvage.core.settings import reset_settings


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Strip SALVAGE_* env vars and drop cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("SALVAGE_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def isolate_logging():
    """Clear bound log context and restore structlog defaults."""
    clear_context()
    yield
    clear_context()
    structlog.reset_defaults()


@pytest.fixture
def seeded_rng():
    """Dedicated generator with a fixed seed."""
    return random.Random(42)
