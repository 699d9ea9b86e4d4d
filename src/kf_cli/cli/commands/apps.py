"""CLI commands for apps."""

from __future__ import annotations

from collections.abc import Callable
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
from kf_cli.services.apps import (
    with_delete_namespace,
    with_list_app_name,
    with_list_label_selector,
    with_list_namespace,
)

if TYPE_CHECKING:
    from kf_cli.core.config import KfParams
    from kf_cli.services.apps import AppLister, Deleter

APP_COLUMNS = [
    ("name", "Name"),
    ("ready", "Ready"),
    ("url", "URL"),
    ("image", "Image"),
    ("age", "Age"),
]


def register_app_commands(
    app: typer.Typer,
    params: KfParams,
    get_deleter: Callable[[], Deleter],
    get_lister: Callable[[], AppLister],
) -> None:
    """Register app CLI commands."""

    @app.command("delete")
    def delete_app(
        app_name: str = typer.Argument(help="Name of the app to delete"),
        force: ForceOption = False,
    ) -> None:
        """Delete an app.

        Examples:
            kf delete my-app
            kf -n prod delete my-app --force
        """
        try:
            namespace = require_namespace(params)
            if not force and not confirm_delete("app", app_name, namespace):
                console.print("Cancelled")
                raise typer.Exit(0)

            get_deleter().delete(app_name, with_delete_namespace(namespace))
            get_formatter(OutputFormat.TABLE, console).format_success(
                f"Deleted app '{app_name}'"
            )
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            handle_error(e)

    @app.command("apps")
    def list_apps(
        name: str | None = typer.Option(None, "--name", help="Only show the app with this name"),
        label_selector: LabelSelectorOption = None,
        output: OutputOption = None,
    ) -> None:
        """List apps in the targeted namespace.

        Examples:
            kf apps
            kf apps -l env=prod
            kf apps --name my-app -o yaml
        """
        try:
            namespace = require_namespace(params)
            options = [with_list_namespace(namespace)]
            if label_selector:
                options.append(with_list_label_selector(label_selector))
            if name:
                options.append(with_list_app_name(name))

            apps = get_lister().list(*options)
            get_formatter(resolve_output(params, output), console).format_list(
                apps, APP_COLUMNS, title=f"Apps in {namespace}"
            )
        except Exception as e:
            handle_error(e)
