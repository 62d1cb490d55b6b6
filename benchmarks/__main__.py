"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

import optres as ot

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registry import BENCHMARKS, CONSOLE, Row, collect_timings, registered

app = typer.Typer(help="Benchmarks for optres developments.")


@app.command(name="list")
def list_() -> None:
    """List all registered benchmarks."""
    for b in BENCHMARKS:
        CONSOLE.print(f"{b.category}: {b.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and display median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    match registered(category):
        case ot.Ok(benchmarks):
            _display(collect_timings(benchmarks))
        case ot.Err(msg):
            CONSOLE.print(f"✗ {msg}", style="bold red")
            raise typer.Exit(code=1)


def _display(rows: list[Row]) -> None:
    table = Table(title="Median timings")
    table.add_column("Category", style="cyan")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Median (µs)", justify="right", style="green")
    for row in rows:
        table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median * 1_000_000:.1f}",
        )
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
