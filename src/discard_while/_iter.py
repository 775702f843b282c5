from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

import cytoolz as cz

from ._core import CommonBase, get_config
from ._option import NONE, Option, Some
from ._traits import DiscardWhile

if TYPE_CHECKING:
    from ._core import Predicate


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class Iter[T](CommonBase[Iterator[T]], DiscardWhile[T]):
    """A wrapper around Python's built-in `Iterator` Protocol.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    - To instantiate from an `Iterable`, simply pass it to the standard constructor.
    - To instantiate from unpacked values, use the `from_` class method.

    Keep in mind that `Iter` instances are single-use: every pulled item, whether returned or discarded, is gone.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Note:
            `Iter.next()` wraps the result in an `Option` to handle exhaustion without `StopIteration`.

            Iterating over the `Iter` instance calls `.__next__()` as usual.

        Returns:
            Option[T]: The next element in the iterator. `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter([1, None])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            `discard_while()` on it only returns if some item fails the predicate.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_count(10, 2).discard_while(lambda x: x < 15)
        (Some(value=16), 3)

        ```
        """
        return Iter(itertools.count(start, step))

    @staticmethod
    def from_func[U](func: Callable[[U], U], value: U) -> Iter[U]:
        """Create an infinite iterator by repeatedly applying a function on an original value.

        **Warning** ⚠️
            This creates an infinite iterator.

        Args:
            func (Callable[[U], U]): Function to apply repeatedly.
            value (U): Initial value to start the iteration.

        Returns:
            Iter[U]: An iterator generating the sequence.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_func(lambda x: x * 2, 1).discard_while(lambda x: x < 100)
        (Some(value=128), 7)

        ```
        """
        return Iter(cz.itertoolz.iterate(func, value))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_(2, 4, 6, 7, 8).discard_while(lambda x: x % 2 == 0)
        (Some(value=7), 3)
        >>> dw.Iter.from_([1, 3, 5]).into(list)
        [1, 3, 5]

        ```
        """
        return Iter(_convert_data(data, *more_data))

    def find(self, predicate: Predicate[T]) -> Option[T]:
        """Return the first element satisfying the predicate.

        Elements before it are consumed, as is the element itself.

        Args:
            predicate (Predicate[T]): Function to evaluate each item.

        Returns:
            Option[T]: The first matching element, or `NONE` if the iterator is exhausted first.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter([1, 3, 4, 5, 6])
        >>> it.find(lambda x: x % 2 == 0)
        Some(value=4)
        >>> it.find(lambda x: x > 10)
        NONE

        ```
        """
        return self.discard_while(lambda item: not predicate(item)).item

    def position(self, predicate: Predicate[T]) -> Option[int]:
        """Return the index of the first element satisfying the predicate.

        Indexes are relative to the current state of the iterator.

        Args:
            predicate (Predicate[T]): Function to evaluate each item.

        Returns:
            Option[int]: The index of the first matching element, or `NONE` if the iterator is exhausted first.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter("abcdef")
        >>> it.position(lambda c: c == "c")
        Some(value=2)
        >>> it.position(lambda c: c == "e")
        Some(value=1)
        >>> it.position(lambda c: c == "a")
        NONE

        ```
        """
        item, count = self.discard_while(lambda item: not predicate(item))
        return item.map(lambda _: count)

    def skip_while(self, predicate: Predicate[T]) -> Iter[T]:
        """Lazily drop items while predicate holds.

        Unlike `discard_while()`, nothing is pulled until the result is iterated, and dropped items are not counted.

        Args:
            predicate (Predicate[T]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterator of the items after skipping those for which the predicate is true.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter((1, 2, 0, 3)).skip_while(lambda x: x > 0).into(list)
        [0, 3]

        ```
        """
        return Iter(itertools.dropwhile(predicate, self._inner))
