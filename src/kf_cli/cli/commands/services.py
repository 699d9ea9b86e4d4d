"""CLI commands for managed-service instances."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated

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
from kf_cli.cli.formatters import OutputFormat, describe, get_formatter
from kf_cli.cli.payload import parse_json_or_file
from kf_cli.services.instances import (
    with_create_service_namespace,
    with_create_service_params,
    with_delete_service_namespace,
    with_list_services_label_selector,
    with_list_services_namespace,
)

if TYPE_CHECKING:
    from kf_cli.core.config import KfParams
    from kf_cli.integrations.kubernetes.models import ServiceInstanceSummary
    from kf_cli.services.instances import ServiceInstancesManager

SERVICE_COLUMNS = [
    ("name", "Name"),
    ("class_name", "Class"),
    ("plan_name", "Plan"),
    ("status", "Status"),
    ("age", "Age"),
]

ConfigOption = Annotated[
    str | None,
    typer.Option(
        "--config",
        "-c",
        help="Broker parameters as inline JSON or a path to a JSON file",
    ),
]


def _describe_instance(instance: ServiceInstanceSummary) -> None:
    describe(
        console,
        "Service Instance",
        [
            ("Name", instance.name),
            ("Class", instance.class_name),
            ("Plan", instance.plan_name),
            ("Parameters", instance.parameters),
        ],
    )


def register_service_commands(
    app: typer.Typer,
    params: KfParams,
    get_manager: Callable[[], ServiceInstancesManager],
) -> None:
    """Register managed-service CLI commands."""

    @app.command("create-service")
    def create_service(
        service_class: str = typer.Argument(help="Service class from the marketplace"),
        plan: str = typer.Argument(help="Plan of the service class"),
        instance_name: str = typer.Argument(help="Name of the new service instance"),
        config: ConfigOption = None,
        output: OutputOption = None,
    ) -> None:
        """Create a service instance.

        Examples:
            kf create-service db-service free mydb
            kf create-service db-service free mydb --config '{"ram_gb": 4}'
            kf create-service db-service free mydb --config ./params.json
        """
        try:
            namespace = require_namespace(params)
            parameters = parse_json_or_file(config) if config is not None else {}
            output = resolve_output(params, output)

            # stdout carries only the document for json and yaml
            if output == OutputFormat.TABLE:
                console.print(
                    f"Creating service instance {instance_name} in namespace {namespace}",
                    markup=False,
                    highlight=False,
                )
            instance = get_manager().create_service(
                service_class,
                plan,
                instance_name,
                with_create_service_namespace(namespace),
                with_create_service_params(parameters),
            )
            if output == OutputFormat.TABLE:
                _describe_instance(instance)
            else:
                get_formatter(output, console).format_resource(instance)
        except Exception as e:
            handle_error(e)

    @app.command("delete-service")
    def delete_service(
        instance_name: str = typer.Argument(help="Name of the service instance"),
        force: ForceOption = False,
    ) -> None:
        """Delete a service instance.

        Examples:
            kf delete-service mydb
            kf delete-service mydb --force
        """
        try:
            namespace = require_namespace(params)
            if not force and not confirm_delete("service instance", instance_name, namespace):
                console.print("Cancelled")
                raise typer.Exit(0)

            get_manager().delete_service(instance_name, with_delete_service_namespace(namespace))
            get_formatter(OutputFormat.TABLE, console).format_success(
                f"Deleted service instance '{instance_name}'"
            )
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            handle_error(e)

    @app.command("services")
    def list_services(
        label_selector: LabelSelectorOption = None,
        output: OutputOption = None,
    ) -> None:
        """List service instances in the targeted namespace.

        Examples:
            kf services
            kf services -l team=payments -o json
        """
        try:
            namespace = require_namespace(params)
            options = [with_list_services_namespace(namespace)]
            if label_selector:
                options.append(with_list_services_label_selector(label_selector))

            instances = get_manager().list_services(*options)
            get_formatter(resolve_output(params, output), console).format_list(
                instances, SERVICE_COLUMNS, title=f"Services in {namespace}"
            )
        except Exception as e:
            handle_error(e)
