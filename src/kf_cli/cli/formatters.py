"""Output formatters for kf commands.

Implements the Strategy pattern for output formatting, allowing commands
to print resources as tables, JSON or YAML.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from kf_cli.cli.output import Table


class OutputFormat(StrEnum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def _to_data(resource: Any) -> Any:
    if hasattr(resource, "model_dump"):
        return resource.model_dump(mode="json", exclude_none=True)
    return resource


class Formatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def format_resource(self, resource: Any, title: str = "") -> None:
        """Format and display a single resource."""

    @abstractmethod
    def format_list(
        self,
        resources: Sequence[Any],
        columns: list[tuple[str, str]],
        title: str = "",
    ) -> None:
        """Format and display a list of resources."""

    def format_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]{escape(message)}[/green]")


class TableFormatter(Formatter):
    """Rich table output formatter."""

    def format_resource(self, resource: Any, title: str = "") -> None:
        """Format resource as a two-column key-value table."""
        table = Table(title=title or None, show_header=True)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")

        for field, value in _to_data(resource).items():
            table.add_row(field, self._format_value(value))

        self.console.print(table)

    def format_list(
        self,
        resources: Sequence[Any],
        columns: list[tuple[str, str]],
        title: str = "",
    ) -> None:
        """Format resources as a multi-column table.

        Column field names may name model properties (e.g. ``age``) as well
        as dumped fields.
        """
        table = Table(title=title or None, show_header=True)
        for _field_name, header in columns:
            style = "cyan" if header.lower() == "name" else None
            table.add_column(header, style=style)

        for resource in resources:
            row = [self._format_cell(self._get_value(resource, name)) for name, _ in columns]
            table.add_row(*row)

        self.console.print(table)
        self.console.print(f"[dim]Total: {len(resources)}[/dim]")

    @staticmethod
    def _get_value(resource: Any, field_name: str) -> Any:
        if isinstance(resource, dict):
            return resource.get(field_name)
        return getattr(resource, field_name, None)

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, dict):
            return json.dumps(value, indent=2)
        if isinstance(value, list):
            return ", ".join(str(v) for v in value) if value else "[]"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _format_cell(value: Any) -> str:
        if value is None:
            return "-"
        if isinstance(value, bool):
            return "Yes" if value else "No"
        if isinstance(value, list):
            if not value:
                return "-"
            cell = ", ".join(str(v) for v in value[:3])
            if len(value) > 3:
                cell += f" (+{len(value) - 3})"
            return cell
        if isinstance(value, dict):
            return json.dumps(value)
        return str(value)


class JsonFormatter(Formatter):
    """JSON output formatter."""

    def format_resource(self, resource: Any, title: str = "") -> None:
        self.console.print_json(json.dumps(_to_data(resource), default=str))

    def format_list(
        self,
        resources: Sequence[Any],
        columns: list[tuple[str, str]],
        title: str = "",
    ) -> None:
        data = [_to_data(r) for r in resources]
        self.console.print_json(json.dumps({"items": data, "total": len(data)}, default=str))


class YamlFormatter(Formatter):
    """YAML output formatter."""

    def format_resource(self, resource: Any, title: str = "") -> None:
        self.console.print(
            yaml.safe_dump(_to_data(resource), default_flow_style=False, sort_keys=False),
            markup=False,
            highlight=False,
        )

    def format_list(
        self,
        resources: Sequence[Any],
        columns: list[tuple[str, str]],
        title: str = "",
    ) -> None:
        data = [_to_data(r) for r in resources]
        self.console.print(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
            markup=False,
            highlight=False,
        )


def get_formatter(format_type: OutputFormat, console: Console | None = None) -> Formatter:
    """Factory function to get the appropriate formatter."""
    if console is None:
        console = Console()

    formatters: dict[OutputFormat, type[Formatter]] = {
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JsonFormatter,
        OutputFormat.YAML: YamlFormatter,
    }
    return formatters.get(format_type, TableFormatter)(console)


def describe(console: Console, title: str, fields: Sequence[tuple[str, Any]]) -> None:
    """Print a kubectl-describe style block of aligned ``Label:    value`` lines.

    Dict and list values are printed as indented JSON below their label.
    """
    console.print(f"{title}:", markup=False, highlight=False)
    scalars = [label for label, value in fields if not isinstance(value, dict | list)]
    width = max((len(label) for label in scalars), default=0) + 4
    for label, value in fields:
        if isinstance(value, dict | list):
            console.print(f"  {label}:", markup=False, highlight=False)
            for line in json.dumps(value, indent=2, sort_keys=True).splitlines():
                console.print(f"    {line}", markup=False, highlight=False)
        else:
            console.print(f"  {f'{label}:':<{width}}{value}", markup=False, highlight=False)
