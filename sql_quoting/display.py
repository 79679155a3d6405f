"""Rich output formatting for the sql-quoting CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that fragments on *stdout* are never polluted with
human-readable decoration.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ._types import SQL


def display_fragment(console: Console, fragment: SQL, *, title: str | None = None) -> None:
    """Render the display form of *fragment*, one ``<SQL>`` line per element."""
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    if not len(fragment):
        console.print("[dim]<SQL>[/dim]")
        return
    for value in fragment:
        console.print(f"[dim]<SQL>[/dim] {escape(value)}")


def display_pairs(console: Console, inputs: list[object], fragment: SQL) -> None:
    """Render a two-column table of raw inputs next to their quoted form."""
    table = Table(title="Quoted values", show_lines=False)
    table.add_column("Input", style="cyan")
    table.add_column("SQL", style="green")
    for raw, quoted in zip(inputs, fragment, strict=False):
        table.add_row(escape(repr(raw)), escape(quoted))
    console.print(table)
