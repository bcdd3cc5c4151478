"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation of export options from the developer's environment
- Global test configuration
"""

from __future__ import annotations

import pytest
from dotenv import load_dotenv

from xamlexport.config import EnvVar

# Load environment variables from .env file
load_dotenv()


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "integration: tests touching the filesystem")


@pytest.fixture(autouse=True)
def _isolate_export_options(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep XAML_* settings from a local .env out of the tests."""
    for var in EnvVar:
        monkeypatch.delenv(var.value.name, raising=False)
