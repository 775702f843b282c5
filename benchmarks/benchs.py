"""Benchmarks for discard_while package - benchs.py."""

import itertools

import more_itertools as mit

import discard_while as dw

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _always(_x: int) -> bool:
    return True


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _python_loop(data: tuple[int, ...]) -> tuple[int | None, int]:
    count = 0
    for item in data:
        if not _always(item):
            return item, count
        count += 1
    return None, count


def _before_and_after(data: tuple[int, ...]) -> tuple[int | None, int]:
    before, after = mit.before_and_after(_always, data)
    count = mit.ilen(before)
    return mit.first(after, None), count


def _dropwhile_counter(data: tuple[int, ...]) -> tuple[int | None, int]:
    counter = itertools.count()

    def _counted(x: int) -> bool:
        if _always(x):
            next(counter)
            return True
        return False

    return next(itertools.dropwhile(_counted, data), None), next(counter)


def _even_prefix(size: dw.Iter[int]) -> tuple[int, ...]:
    """Half the items even, then a single odd item, then anything."""
    data = tuple(size)
    half = len(data) // 2
    return (*(x * 2 for x in data[:half]), 1, *data[half + 1 :])


# Benchmark classes
# ------------------------------------------------------------


class AllDiscarded:
    """Benchmark a full scan, every item matching the predicate."""

    @bench()
    @staticmethod
    def function(data: tuple[int, ...]) -> object:
        """Benchmark the function form."""
        return dw.discard_while(iter(data), _always)

    @bench()
    @staticmethod
    def method(data: tuple[int, ...]) -> object:
        """Benchmark the method form through Iter."""
        return dw.Iter(data).discard_while(_always)

    @bench()
    @staticmethod
    def python_loop(data: tuple[int, ...]) -> object:
        """Benchmark a plain for loop, the lower bound."""
        return _python_loop(data)

    @bench()
    @staticmethod
    def before_and_after(data: tuple[int, ...]) -> object:
        """Benchmark more_itertools.before_and_after with ilen."""
        return _before_and_after(data)

    @bench()
    @staticmethod
    def dropwhile_counter(data: tuple[int, ...]) -> object:
        """Benchmark itertools.dropwhile with a counting predicate."""
        return _dropwhile_counter(data)


class EvenPrefix:
    """Benchmark a scan stopping after a leading run of even numbers."""

    @bench(gen=lambda size: size.into(_even_prefix))
    @staticmethod
    def function(data: tuple[int, ...]) -> object:
        """Benchmark the function form."""
        return dw.discard_while(iter(data), _is_even)

    @bench(gen=lambda size: size.into(_even_prefix))
    @staticmethod
    def find(data: tuple[int, ...]) -> object:
        """Benchmark Iter.find on the same data."""
        return dw.Iter(data).find(lambda x: not _is_even(x))
