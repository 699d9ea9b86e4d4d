"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer

from kf_cli import __version__
from kf_cli.cli.commands import (
    register_app_commands,
    register_secret_commands,
    register_service_commands,
)
from kf_cli.cli.commands.base import console, handle_error
from kf_cli.cli.factories import (
    make_app_lister,
    make_deleter,
    make_instances_manager,
    make_secrets_manager,
)
from kf_cli.core.config import KfParams, load_config
from kf_cli.core.exceptions import KfError
from kf_cli.logging.config import configure_logging, get_logger

app = typer.Typer(
    name="kf",
    help="kf - deploy and manage apps and backing services on Knative.",
    add_completion=True,
    no_args_is_help=True,
)

# Filled in by the root callback, read by every command
params = KfParams()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kf version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    namespace: str | None = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Namespace to target. Defaults to KF_NAMESPACE or the config file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """kf CLI - Manage apps and managed services on Knative."""
    configure_logging(verbose=verbose, debug=debug)

    try:
        params.config = load_config()
    except KfError as e:
        handle_error(e)

    params.namespace = namespace if namespace is not None else params.config.namespace
    get_logger(__name__).debug("resolved_namespace", namespace=params.namespace)


register_app_commands(app, params, lambda: make_deleter(params), lambda: make_app_lister(params))
register_service_commands(app, params, lambda: make_instances_manager(params))
register_secret_commands(app, params, lambda: make_secrets_manager(params))


if __name__ == "__main__":
    app()
