"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import render, run_pipeline
from ._registery import BENCHMARKS, CONSOLE, SIZES

app = typer.Typer(help="Benchmarks for discard_while developments.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for category, name, _ in BENCHMARKS:
        CONSOLE.print(f"{category}.{name}", style="cyan")


@app.command()
def run(
    *,
    sizes: Annotated[
        list[int] | None,
        typer.Option("--size", help="Data size to benchmark, repeatable."),
    ] = None,
    name_filter: Annotated[
        str | None,
        typer.Option("--filter", help="Only run benchmarks whose name contains this."),
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    try:
        stats = run_pipeline(tuple(sizes) if sizes else SIZES, name_filter)
    except LookupError as e:
        CONSOLE.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=1) from e
    CONSOLE.print()
    render(stats)
    CONSOLE.print("✓ Benchmarks complete", style="bold green")


if __name__ == "__main__":
    app()
