"""Shared terminal output helpers.

All user-facing output goes through a single Rich ``Console`` so tests can
swap it for a recording console and so colours are disabled automatically
when stdout is not a terminal.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(step: int, title: str, icon: str = "", *, out: Console | None = None) -> None:
    """Print a wizard step header such as ``Step 2: Programming Language``."""
    out = out or console
    label = f"{icon} Step {step}: {title}" if icon else f"Step {step}: {title}"
    out.print()
    out.print(
        Rule(f"[bold bright_cyan]{label}[/bold bright_cyan]", style="bright_cyan", align="left")
    )
    out.print()


def print_summary_table(
    data: dict[str, str], title: str = "Summary", *, out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.  Cells are printed literally, never
            parsed as Rich markup.
        title: Table title.
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    out.print(table)
    out.print()


def print_success(message: str, *, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, *, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")
