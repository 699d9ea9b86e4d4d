"""Centralized CLI output utilities.

Usage:
    from kf_cli.cli.output import Table

    table = Table(title="Apps")
    table.add_column("Name", style="cyan")
    table.add_row("my-app")
    console.print(table)
"""

from kf_cli.cli.output.table import Table

__all__ = ["Table"]
