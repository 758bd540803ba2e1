"""Console output helpers shared by the CLI commands."""

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

console = Console()


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


FormatOption = typer.Option(
    OutputFormat.TABLE,
    "--format",
    "-f",
    help="table (default) or json",
    case_sensitive=False,
)


def print_json(data: Any):
    console.print_json(data=data)


def print_table(title: str, headers: Sequence[str], rows: Iterable[Sequence[Any]]):
    """Print rows under the given headers; the first column is the key column."""
    table = Table(title=title)
    for index, header in enumerate(headers):
        if index == 0:
            table.add_column(header, style="cyan", no_wrap=True)
        else:
            table.add_column(header)
    for row in rows:
        table.add_row(*("" if value is None else str(value) for value in row))
    console.print(table)


def print_error(message: str):
    console.print(f"❌ {message}", style="bold red", markup=False)


def print_success(message: str):
    console.print(f"✅ {message}", style="bold green", markup=False)
