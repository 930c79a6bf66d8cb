"""User-facing terminal output for CLI commands.

Everything goes to stderr so stdout stays free for rendered reports and
JSON output.

Usage::

    from covcomment.core.console import status, totals_table

    status("Posted coverage comment", style="success")  # ✓ Posted coverage comment
    get_console().print(totals_table(parsed))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from covcomment.coverage.models import ParsedSummary

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from covcomment.core.logging import get_logger

    return get_logger("console")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 file" or "3 files"."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def totals_table(parsed: ParsedSummary) -> Table:
    """Build a compact terminal table of the four total percentages."""
    table = Table(title="Coverage", title_justify="left", show_edge=False)
    table.add_column("Category", style="bold")
    table.add_column("Covered", justify="right")

    for category, percent in (
        ("Lines", parsed.total_lines_coverage_percent),
        ("Statements", parsed.total_statements_coverage_percent),
        ("Functions", parsed.total_functions_coverage_percent),
        ("Branches", parsed.total_branches_coverage_percent),
    ):
        table.add_row(category, f"{percent:.2f}%")

    return table
