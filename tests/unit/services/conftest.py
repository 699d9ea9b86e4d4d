"""Shared fixtures for resource operation tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_resource_client() -> MagicMock:
    """Create a mock ResourceClient."""
    client = MagicMock()
    client.list.return_value = []
    return client


@pytest.fixture
def mock_catalog_client() -> MagicMock:
    """Create a mock ServiceCatalogClient."""
    client = MagicMock()
    client.list_instances.return_value = []
    return client


@pytest.fixture
def service_instance() -> dict[str, Any]:
    """A ServiceInstance as returned by the catalog."""
    return {
        "metadata": {"name": "mydb", "namespace": "custom-ns"},
        "spec": {
            "clusterServiceClassExternalName": "db-service",
            "clusterServicePlanExternalName": "free",
            "parameters": {"ram_gb": 4},
        },
    }
