"""Base utilities for kf commands.

Provides common Typer options, error display and confirmation helpers
shared by every command module.
"""

from __future__ import annotations

from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from kf_cli.cli.formatters import OutputFormat
from kf_cli.core.config import KfParams
from kf_cli.core.exceptions import EmptyNamespaceError, KfError
from kf_cli.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesTimeoutError,
)

# Shared console instance
console = Console()


# =============================================================================
# Common Typer Option Annotations
# =============================================================================

OutputOption = Annotated[
    OutputFormat | None,
    typer.Option(
        "--output",
        "-o",
        help="Output format: table, json, or yaml. Defaults to KF_OUTPUT or table.",
        case_sensitive=False,
    ),
]

LabelSelectorOption = Annotated[
    str | None,
    typer.Option(
        "--selector",
        "-l",
        help="Label selector (e.g., 'env=prod,tier=web')",
    ),
]

ForceOption = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Skip confirmation prompts",
    ),
]


# =============================================================================
# Error Handling
# =============================================================================


def handle_error(error: Exception) -> NoReturn:
    """Print an error verbatim, with a hint where one helps, and exit 1.

    Errors raised outside kf (by a client library, say) print their
    ``str()``.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    message = error.message if isinstance(error, KfError) else str(error)
    console.print(f"[red]Error:[/red] {escape(message)}")

    if isinstance(error, KubernetesConnectionError):
        if error.original_error:
            console.print(f"  Cause: {escape(str(error.original_error))}")
        console.print(
            "\n[dim]Hint: Check that your kubeconfig is valid and the cluster is reachable.[/dim]"
        )
    elif isinstance(error, KubernetesAuthError):
        console.print("\n[dim]Hint: Check your credentials, token, or RBAC permissions.[/dim]")
    elif isinstance(error, KubernetesTimeoutError):
        console.print("\n[dim]Hint: Try increasing the timeout with KF_TIMEOUT.[/dim]")

    raise typer.Exit(1)


def require_namespace(params: KfParams) -> str:
    """Return the targeted namespace.

    Raises:
        EmptyNamespaceError: If no namespace is set.
    """
    if not params.namespace:
        raise EmptyNamespaceError()
    return params.namespace


def resolve_output(params: KfParams, output: OutputFormat | None) -> OutputFormat:
    """Return the requested output format, falling back to the configured one."""
    if output is not None:
        return output
    return OutputFormat(params.config.output_format)


# =============================================================================
# Confirmation Utilities
# =============================================================================


def confirm_delete(resource_type: str, name: str, namespace: str | None = None) -> bool:
    """Prompt user to confirm deletion."""
    msg = f"Are you sure you want to delete {resource_type} '{name}'"
    if namespace:
        msg += f" in namespace '{namespace}'"
    msg += "?"
    return typer.confirm(msg, default=False)
