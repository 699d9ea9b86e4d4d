"""Shared fixtures for kf command tests."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from kf_cli.core.config import KfParams


@pytest.fixture
def params() -> KfParams:
    """Runtime parameters targeting the default namespace."""
    return KfParams()


@pytest.fixture
def mock_manager() -> MagicMock:
    """Create a mock operation (manager, deleter or lister)."""
    manager = MagicMock()
    manager.list.return_value = []
    manager.list_services.return_value = []
    manager.list_secrets.return_value = []
    return manager


@pytest.fixture
def get_manager(mock_manager: MagicMock) -> Callable[[], MagicMock]:
    """Factory function returning the mock manager."""
    return lambda: mock_manager
