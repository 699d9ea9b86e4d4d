"""Unit tests for secret commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from kf_cli.cli.commands import register_secret_commands
from kf_cli.core.config import KfParams
from kf_cli.integrations.kubernetes.models import SecretSummary
from kf_cli.services.secrets import (
    with_create_data,
    with_create_labels,
    with_create_namespace,
    with_create_string_data,
    with_delete_namespace,
    with_get_namespace,
    with_list_label_selector,
    with_list_namespace,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestSecretCommands:
    """Tests for secret commands."""

    @pytest.fixture
    def app(self, params: KfParams, get_manager: Callable[[], MagicMock]) -> typer.Typer:
        """Create a test app with secret commands."""
        app = typer.Typer()
        register_secret_commands(app, params, get_manager)
        return app

    def test_list_secrets(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        mock_manager.list_secrets.return_value = [
            SecretSummary(name="db", data_keys=["password", "username"])
        ]

        result = cli_runner.invoke(app, ["secrets", "list", "-l", "env=prod"])

        assert result.exit_code == 0, result.output
        mock_manager.list_secrets.assert_called_once_with(
            with_list_namespace("default"), with_list_label_selector("env=prod")
        )
        assert "password, username" in result.output

    def test_get_secret(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        mock_manager.get_secret.return_value = SecretSummary(name="db")

        result = cli_runner.invoke(app, ["secrets", "get", "db"])

        assert result.exit_code == 0, result.output
        mock_manager.get_secret.assert_called_once_with("db", with_get_namespace("default"))

    def test_create_secret(
        self,
        cli_runner: CliRunner,
        app: typer.Typer,
        mock_manager: MagicMock,
        tmp_path: Path,
    ) -> None:
        mock_manager.create_secret.return_value = SecretSummary(name="db")
        cert = tmp_path / "tls.crt"
        cert.write_bytes(b"cert-bytes")

        result = cli_runner.invoke(
            app,
            [
                "secrets",
                "create",
                "db",
                "--from-literal",
                "user=admin",
                "--from-literal",
                "password=p=w",
                "--from-file",
                f"cert={cert}",
                "--label",
                "env=prod",
            ],
        )

        assert result.exit_code == 0, result.output
        mock_manager.create_secret.assert_called_once_with(
            "db",
            with_create_namespace("default"),
            with_create_string_data({"user": "admin", "password": "p=w"}),
            with_create_data({"cert": b"cert-bytes"}),
            with_create_labels({"env": "prod"}),
        )

    def test_create_rejects_malformed_literal(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        result = cli_runner.invoke(app, ["secrets", "create", "db", "--from-literal", "novalue"])

        assert result.exit_code == 1
        assert "invalid literal 'novalue', expected key=value" in result.output
        mock_manager.create_secret.assert_not_called()

    def test_create_missing_file(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        result = cli_runner.invoke(
            app, ["secrets", "create", "db", "--from-file", "cert=/some/bad/path"]
        )

        assert result.exit_code == 1
        assert "couldn't read file /some/bad/path" in result.output
        mock_manager.create_secret.assert_not_called()

    def test_delete_secret(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        result = cli_runner.invoke(app, ["secrets", "delete", "db", "--force"])

        assert result.exit_code == 0, result.output
        mock_manager.delete_secret.assert_called_once_with("db", with_delete_namespace("default"))

    def test_delete_aborted_prompt(
        self, cli_runner: CliRunner, app: typer.Typer, mock_manager: MagicMock
    ) -> None:
        result = cli_runner.invoke(app, ["secrets", "delete", "db"], input="")

        assert result.exit_code == 1
        assert "Error:" not in result.output
        mock_manager.delete_secret.assert_not_called()
