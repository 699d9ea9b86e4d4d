"""CLI commands for secrets.

Secret values are accepted on the command line but never printed.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from kf_cli.cli.commands.base import (
    ForceOption,
    LabelSelectorOption,
    OutputOption,
    confirm_delete,
    console,
    handle_error,
    require_namespace,
    resolve_output,
)
from kf_cli.cli.formatters import OutputFormat, get_formatter
from kf_cli.core.exceptions import KfValidationError
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

if TYPE_CHECKING:
    from kf_cli.core.config import KfParams
    from kf_cli.services.secrets import SecretsManager

SECRET_COLUMNS = [
    ("name", "Name"),
    ("type", "Type"),
    ("data_keys", "Keys"),
    ("age", "Age"),
]


def _parse_pairs(items: list[str] | None, what: str) -> dict[str, str]:
    """Parse key=value strings into a dict."""
    result: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise KfValidationError(f"invalid {what} '{item}', expected key=value")
        result[key] = value
    return result


def _read_files(items: list[str] | None) -> dict[str, bytes]:
    """Read key=path pairs into a dict of file contents."""
    result: dict[str, bytes] = {}
    for key, path in _parse_pairs(items, "file entry").items():
        try:
            result[key] = Path(path).read_bytes()
        except OSError as e:
            raise KfValidationError(f"couldn't read file {path}: {e.strerror}") from e
    return result


def register_secret_commands(
    app: typer.Typer,
    params: KfParams,
    get_manager: Callable[[], SecretsManager],
) -> None:
    """Register secret CLI commands."""

    secrets_app = typer.Typer(
        name="secrets",
        help="Manage secrets",
        no_args_is_help=True,
    )
    app.add_typer(secrets_app, name="secrets")

    @secrets_app.command("list")
    def list_secrets(
        label_selector: LabelSelectorOption = None,
        output: OutputOption = None,
    ) -> None:
        """List secrets (values are never shown).

        Examples:
            kf secrets list
            kf secrets list -l env=prod
        """
        try:
            namespace = require_namespace(params)
            options = [with_list_namespace(namespace)]
            if label_selector:
                options.append(with_list_label_selector(label_selector))

            secrets = get_manager().list_secrets(*options)
            formatter = get_formatter(resolve_output(params, output), console)
            formatter.format_list(secrets, SECRET_COLUMNS, title="Secrets")
        except Exception as e:
            handle_error(e)

    @secrets_app.command("get")
    def get_secret(
        name: str = typer.Argument(help="Secret name"),
        output: OutputOption = None,
    ) -> None:
        """Show a secret's metadata and key names.

        Examples:
            kf secrets get db-credentials
        """
        try:
            namespace = require_namespace(params)
            secret = get_manager().get_secret(name, with_get_namespace(namespace))
            formatter = get_formatter(resolve_output(params, output), console)
            formatter.format_resource(secret, title=f"Secret: {name}")
        except Exception as e:
            handle_error(e)

    @secrets_app.command("create")
    def create_secret(
        name: str = typer.Argument(help="Secret name"),
        literal: list[str] | None = typer.Option(
            None, "--from-literal", help="Literal value (key=value, repeatable)"
        ),
        from_file: list[str] | None = typer.Option(
            None, "--from-file", help="File contents (key=path, repeatable)"
        ),
        label: list[str] | None = typer.Option(
            None, "--label", help="Labels (key=value, repeatable)"
        ),
        output: OutputOption = None,
    ) -> None:
        """Create an Opaque secret.

        Examples:
            kf secrets create db-credentials --from-literal user=admin
            kf secrets create tls --from-file cert=./tls.crt --label env=prod
        """
        try:
            namespace = require_namespace(params)
            options = [
                with_create_namespace(namespace),
                with_create_string_data(_parse_pairs(literal, "literal")),
                with_create_data(_read_files(from_file)),
                with_create_labels(_parse_pairs(label, "label")),
            ]
            secret = get_manager().create_secret(name, *options)
            formatter = get_formatter(resolve_output(params, output), console)
            formatter.format_resource(secret, title=f"Created Secret: {name}")
        except Exception as e:
            handle_error(e)

    @secrets_app.command("delete")
    def delete_secret(
        name: str = typer.Argument(help="Secret name"),
        force: ForceOption = False,
    ) -> None:
        """Delete a secret.

        Examples:
            kf secrets delete db-credentials --force
        """
        try:
            namespace = require_namespace(params)
            if not force and not confirm_delete("secret", name, namespace):
                console.print("Cancelled")
                raise typer.Exit(0)

            get_manager().delete_secret(name, with_delete_namespace(namespace))
            get_formatter(OutputFormat.TABLE, console).format_success(f"Deleted secret '{name}'")
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            handle_error(e)
