"""Shared pytest fixtures for kf_cli tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear KF_ environment variables and point KF_CONFIG at an empty location."""
    for key in list(os.environ.keys()):
        if key.startswith("KF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("KF_CONFIG", str(tmp_path / "missing-config.yaml"))


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None]:
    """Remove handlers added by configure_logging after each test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    yield
    root.handlers = original_handlers


@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Fixture to capture log output."""
    caplog.set_level(logging.DEBUG)
    return caplog
