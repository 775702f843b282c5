"""Aggregate benchmark timings and render them."""

import statistics
from collections import defaultdict
from typing import NamedTuple

from rich.table import Table

from ._registery import CONSOLE, Row, build_benchmarks, collect_raw_timings


class Stats(NamedTuple):
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


def run_pipeline(
    sizes: tuple[int, ...], name_filter: str | None = None
) -> list[Stats]:
    """Run the registered benchmarks and compute their medians."""
    benchmarks = build_benchmarks(sizes, name_filter)
    if not benchmarks:
        msg = f"No benchmarks registered matching {name_filter!r}!"
        raise LookupError(msg)
    return _compute_all_stats(collect_raw_timings(benchmarks))


def _compute_all_stats(raw_rows: list[Row]) -> list[Stats]:
    groups: defaultdict[tuple[str, str, int], list[float]] = defaultdict(list)
    for row in raw_rows:
        groups[(row.category, row.name, row.size)].append(row.time)
    return [
        Stats(category, name, size, len(times), statistics.median(times))
        for (category, name, size), times in groups.items()
    ]


def render(stats: list[Stats]) -> None:
    """Print one table per category, relative to the fastest approach by size."""
    by_category: defaultdict[str, list[Stats]] = defaultdict(list)
    for stat in stats:
        by_category[stat.category].append(stat)

    for category, rows in by_category.items():
        fastest = {
            size: min(r.median for r in rows if r.size == size)
            for size in {r.size for r in rows}
        }
        table = Table(title=category, show_header=True, header_style="bold magenta")
        table.add_column("Approach", style="cyan")
        table.add_column("Size", justify="right")
        table.add_column("Runs", justify="right")
        table.add_column("Median (s)", justify="right", style="green")
        table.add_column("vs fastest", justify="right", style="yellow")
        for r in sorted(rows, key=lambda r: (r.size, r.median)):
            table.add_row(
                r.name,
                str(r.size),
                str(r.runs),
                f"{r.median:.6f}",
                f"{r.median / fastest[r.size]:.2f}x",
            )
        CONSOLE.print(table)
