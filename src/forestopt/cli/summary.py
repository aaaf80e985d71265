"""Configuration summary shown with ``--verbose``.

Renders the frozen configuration as a Rich table, or as an aligned
plain-text table when Rich is not installed.
"""

from __future__ import annotations

import dataclasses
import sys
from enum import Enum

from forestopt.cli.console import console, escape
from forestopt.core.models import Configuration


def _format_value(value: object) -> str:
    """Render one field value for display."""
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return f"{value.name.lower()} ({value.value})"
    if isinstance(value, tuple):
        return ",".join(str(item) for item in value) if value else "-"
    return str(value)


def summary_rows(config: Configuration) -> list[tuple[str, str]]:
    """Return ``(option, value)`` pairs in declaration order."""
    return [
        (f.name, _format_value(getattr(config, f.name)))
        for f in dataclasses.fields(config)
    ]


def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    """Render the summary without Rich."""
    print("\nforestopt configuration", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Option':<22} {'Value':<32}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for name, value in rows:
        print(f"{name:<22} {value:<32}", file=sys.stderr)
    print(file=sys.stderr)


def render_summary(config: Configuration) -> None:
    """Print the configuration summary to stderr."""
    rows = summary_rows(config)
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="forestopt configuration",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Option", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    for name, value in rows:
        table.add_row(name, escape(value))

    console.print()
    console.print(table)
    console.print()
