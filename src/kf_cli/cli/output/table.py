"""Table output for kf commands.

Wraps Rich's Table so every kf listing shares the same look: a light box,
bold headers, and columns that wrap long values instead of truncating them.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table as RichTable


class Table(RichTable):
    """Rich Table with kf's defaults.

    Usage:
        table = Table(title="Secrets")
        table.add_column("Name")              # wraps long text
        table.add_column("UID", no_wrap=True)  # opt out of wrapping
    """

    def __init__(self, *headers: Any, **kwargs: Any) -> None:
        kwargs.setdefault("box", box.SIMPLE_HEAD)
        kwargs.setdefault("header_style", "bold")
        super().__init__(*headers, **kwargs)

    def add_column(self, *args: Any, **kwargs: Any) -> None:
        """Add a column, folding overflowing text unless told otherwise."""
        kwargs.setdefault("overflow", "fold")
        super().add_column(*args, **kwargs)
