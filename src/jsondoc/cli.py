"""jsondoc CLI."""

import ast
import logging
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from jsondoc.config import settings
from jsondoc.errors import JsonDocError
from jsondoc.inference import infer
from jsondoc.models import DocumentBase, JsonArray, JsonObject
from jsondoc.transform import filter_by_keys, filter_by_type
from jsondoc.visitors import is_homogeneous, is_valid

app = typer.Typer(
    name="jsondoc",
    help="Build, filter and validate JSON documents from Python literals",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Logging level (default from settings)"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(expression: str) -> DocumentBase:
    """Parse a Python literal and infer its document."""
    try:
        value: Any = ast.literal_eval(expression)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
        err_console.print(f"[red]Not a Python literal:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    try:
        return infer(value)
    except JsonDocError as exc:
        err_console.print(f"[red]Cannot convert value:[/red] {exc}")
        raise typer.Exit(code=2) from exc


@app.command()
def serialize(
    expression: str = typer.Argument(..., help="Python literal, e.g. \"{'a': [1, 2]}\""),
) -> None:
    """Print the JSON text of a Python literal."""
    console.print(_load(expression).serialize(), markup=False, highlight=False, soft_wrap=True)


@app.command()
def validate(
    expression: str = typer.Argument(..., help="Python literal to check"),
) -> None:
    """Run the structural validators. Exits 1 if any check fails."""
    document = _load(expression)
    results = {
        "unique keys, no nulls": is_valid(document),
        "homogeneous arrays": is_homogeneous(document),
    }

    table = Table(title="Validation")
    table.add_column("Check")
    table.add_column("Result")
    for check, passed in results.items():
        table.add_row(check, "[green]pass[/green]" if passed else "[red]fail[/red]")
    console.print(table)

    if not all(results.values()):
        raise typer.Exit(code=1)


@app.command(name="filter")
def filter_command(
    expression: str = typer.Argument(..., help="Python literal for a dict or list"),
    type_name: Optional[str] = typer.Option(None, "--type", help="Keep values of this type"),
    keys: Optional[list[str]] = typer.Option(None, "--key", help="Keep this key (repeatable)"),
) -> None:
    """Filter an object or array and print the result."""
    document = _load(expression)
    if not isinstance(document, (JsonArray, JsonObject)):
        err_console.print("[red]Only objects and arrays can be filtered[/red]")
        raise typer.Exit(code=2)

    if type_name is not None:
        document = filter_by_type(document, type_name)
    if keys:
        if not isinstance(document, JsonObject):
            err_console.print("[red]--key only applies to objects[/red]")
            raise typer.Exit(code=2)
        document = filter_by_keys(document, keys)
    console.print(document.serialize(), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
