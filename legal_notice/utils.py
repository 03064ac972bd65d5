"""Shared utility functions for the legal notice tools.

Provides text input, JSON output, Rich-based console reporting and logging
setup for the command line interface.  The parser itself never prints; only
the CLI goes through these helpers.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from legal_notice.parser.models import AttributionRecord, LineStatus, ParseReport

console = Console()
error_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(verbose: bool = False) -> None:
    """Route ``legal_notice`` log records through a Rich handler on stderr.

    Args:
        verbose: Log parser decisions at DEBUG level instead of WARNING.
    """
    logger = logging.getLogger("legal_notice")
    logger.handlers.clear()
    handler = RichHandler(console=error_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


# ---------------------------------------------------------------------------
# Input / output
# ---------------------------------------------------------------------------


def read_text(source: str | Path) -> str:
    """Read notice text from a file, or from stdin when *source* is ``"-"``.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if str(source) == "-":
        return sys.stdin.read()
    file_path = Path(source)
    if not file_path.exists():
        raise FileNotFoundError(f"Notice file not found: {source}")
    return file_path.read_text(encoding="utf-8")


def records_to_json(records: Iterable[AttributionRecord]) -> str:
    """Serialise records as a pretty-printed JSON array."""
    data = [record.to_dict() for record in records]
    return json.dumps(data, indent=2, ensure_ascii=False)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding="utf-8"
    )
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

STATUS_COLORS: dict[LineStatus, str] = {
    LineStatus.DONE: "green",
    LineStatus.PARTIAL: "yellow",
    LineStatus.SKIPPED: "red",
}


def format_year(record: AttributionRecord) -> str:
    """Human-readable year column value."""
    return ", ".join(record.years)


def print_records_table(records: list[AttributionRecord], title: str = "Attributions") -> None:
    """Print records as a three-column table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Types", style="magenta")
    table.add_column("Year", style="dim", no_wrap=True)

    for record in records:
        table.add_row(
            Text(record.name),
            ", ".join(t.value for t in record.types),
            format_year(record),
        )

    console.print(table)


def print_report(report: ParseReport) -> None:
    """Print the per-line status of a parse followed by the edit note."""
    table = Table(title="Lines", show_header=True, header_style="bold cyan")
    table.add_column("Status", no_wrap=True)
    table.add_column("Line")
    table.add_column("Records", justify="right")

    for line in report.lines:
        color = STATUS_COLORS[line.status]
        table.add_row(
            f"[{color}]{line.status.value}[/{color}]",
            Text(line.text),
            str(len(line.records)),
        )

    console.print(table)
    if report.edit_note:
        console.print()
        console.print("[bold]Edit note[/bold]")
        console.print(report.edit_note, markup=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    error_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    error_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
