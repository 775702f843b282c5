import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

import discard_while as dw

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096, 16384)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / warmup_time / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[tuple[str, str, Callable[[int], BenchFn]]] = []


def bench[P](
    *, gen: Callable[[dw.Iter[int]], P] = lambda size: size.into(tuple)
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks over multiple data sizes.

    Variants are only built, and timed for warmup, once `build_benchmarks()` is called.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        def _factory(size: int) -> BenchFn:
            return partial(func, dw.Iter(range(size)).into(gen))

        BENCHMARKS.append((func.__qualname__.split(".")[0], func.__name__, _factory))
        return func

    return decorator


def build_benchmarks(
    sizes: tuple[int, ...] = SIZES, name_filter: str | None = None
) -> list[Benchmark]:
    """Instantiate the registered benchmarks, optionally filtered by category or name."""
    return [
        Benchmark(
            category,
            name,
            [Variant.from_fn(factory(size), size) for size in sizes],
        )
        for category, name, factory in BENCHMARKS
        if name_filter is None or name_filter in f"{category}.{name}"
    ]


def collect_raw_timings(benchmarks: list[Benchmark]) -> list[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return [
            row
            for benchmark in benchmarks
            for variant in benchmark.variants
            for row in f(variant, benchmark)
        ]


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> list[Row]:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )

    def _timed(run_idx: int) -> Row:
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(bench.category, bench.name, variant.size, run_idx, time_taken)

    return [_timed(run_idx) for run_idx in range(variant.n_runs)]
