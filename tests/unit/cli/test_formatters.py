"""Unit tests for output formatters."""

from __future__ import annotations

import json
from io import StringIO

import pytest
import yaml
from rich.console import Console

from kf_cli.cli.formatters import (
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    YamlFormatter,
    describe,
    get_formatter,
)
from kf_cli.integrations.kubernetes.models import ServiceInstanceSummary

COLUMNS = [("name", "Name"), ("class_name", "Class"), ("age", "Age")]


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


@pytest.fixture
def instance() -> ServiceInstanceSummary:
    return ServiceInstanceSummary(
        name="mydb", class_name="db-service", plan_name="free", parameters={"ram_gb": 4}
    )


@pytest.mark.unit
class TestGetFormatter:
    """Tests for get_formatter."""

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            (OutputFormat.TABLE, TableFormatter),
            (OutputFormat.JSON, JsonFormatter),
            (OutputFormat.YAML, YamlFormatter),
        ],
    )
    def test_returns_formatter(self, fmt: OutputFormat, expected: type) -> None:
        assert isinstance(get_formatter(fmt), expected)


@pytest.mark.unit
class TestTableFormatter:
    """Tests for TableFormatter."""

    def test_list_includes_rows_and_total(self, instance: ServiceInstanceSummary) -> None:
        console, buffer = _console()

        TableFormatter(console).format_list([instance], COLUMNS, title="Services")

        output = buffer.getvalue()
        assert "mydb" in output
        assert "db-service" in output
        assert "Unknown" in output
        assert "Total: 1" in output

    def test_resource(self, instance: ServiceInstanceSummary) -> None:
        console, buffer = _console()

        TableFormatter(console).format_resource(instance)

        assert "plan_name" in buffer.getvalue()


@pytest.mark.unit
class TestStructuredFormatters:
    """Tests for JSON and YAML output."""

    def test_json_list(self, instance: ServiceInstanceSummary) -> None:
        console, buffer = _console()

        JsonFormatter(console).format_list([instance], COLUMNS)

        data = json.loads(buffer.getvalue())
        assert data["total"] == 1
        assert data["items"][0]["parameters"] == {"ram_gb": 4}

    def test_yaml_resource(self, instance: ServiceInstanceSummary) -> None:
        console, buffer = _console()

        YamlFormatter(console).format_resource(instance)

        data = yaml.safe_load(buffer.getvalue())
        assert data["name"] == "mydb"
        assert data["plan_name"] == "free"


@pytest.mark.unit
class TestDescribe:
    """Tests for describe output."""

    def test_aligns_labels(self) -> None:
        console, buffer = _console()

        describe(console, "Service Instance", [("Name", "mydb"), ("Class", "db-service")])

        lines = buffer.getvalue().splitlines()
        assert lines[0] == "Service Instance:"
        assert lines[1] == "  Name:    mydb"
        assert lines[2] == "  Class:   db-service"

    def test_mapping_printed_as_json_block(self) -> None:
        console, buffer = _console()

        describe(
            console,
            "Service Instance",
            [("Name", "mydb"), ("Class", "db-service"), ("Parameters", {"ram_gb": 4})],
        )

        output = buffer.getvalue()
        assert "  Name:    mydb" in output
        assert "  Parameters:\n" in output
        assert '"ram_gb": 4' in output
