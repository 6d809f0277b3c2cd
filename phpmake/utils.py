"""Shared console helpers for phpmake.

Rich-based success / warning / error lines and a key/value summary table.
Everything goes through one module-level ``Console`` so tests and the CLI
see the same stream.  Soft wrapping keeps each message on one line however
long the path.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(soft_wrap=True)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def display_path(path: str | Path, base: str | Path | None = None) -> str:
    """Return *path* relative to *base* when possible, for console output.

    Examples::

        display_path("/tmp/x/app/Models", "/tmp/x") -> "app/Models"
        display_path("app/Models", ".")             -> "app/Models"
    """
    path = Path(path)
    if base is not None:
        try:
            path = path.relative_to(Path(base))
        except ValueError:
            pass
    return path.as_posix()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
