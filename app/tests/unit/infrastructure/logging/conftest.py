"""Fixtures for infrastructure.logging tests."""

from types import SimpleNamespace

import pytest


@pytest.fixture
def mock_settings():
    """Development-mode settings: console renderer at INFO."""
    return SimpleNamespace(LOG_LEVEL="INFO", PREFIX="dev-", is_production=False)
