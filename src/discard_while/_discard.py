from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from ._core import Predicate


class Discarded[T](NamedTuple):
    """Represents the outcome of advancing an iterator while a predicate holds.

    See `discard_while()` for details.
    """

    item: Option[T]
    """The first item that did not satisfy the predicate, or `NONE` if the iterator was exhausted."""
    count: int
    """The number of items discarded before it."""

    def __repr__(self) -> str:
        return f"({self.item!r}, {self.count})"


def discard_while[T](iterator: Iterable[T], predicate: Predicate[T]) -> Discarded[T]:
    """Advance an iterator as long as a condition on the yielded items holds.

    Returns the first item that no longer satisfies the condition, if any, and the number of items discarded.

    This is similar to a combination of `Iter.find()` and `Iter.position()`.

    Discarded items are only counted, never stored.

    The item that stops the scan is consumed from the iterator and handed back, so the next pull yields the item following it.

    Note:
        Any exception raised by **predicate** propagates as is.
        The item it was evaluated on has already been pulled, and is neither counted nor returned.

        An `Iterable` that is not an `Iterator` (a list, a tuple...) is passed through `iter()`.
        The data itself is left untouched, so only the returned value is observable.

    Args:
        iterator (Iterable[T]): The iterator to advance.
        predicate (Predicate[T]): Function to evaluate each item, called at most once per item.

    Returns:
        Discarded[T]: The first non-matching item as an `Option`, and the number of discarded items.

    Example:
    ```python
    >>> import discard_while as dw
    >>> it = iter(range(1, 11))
    >>> dw.discard_while(it, lambda n: n != 5)
    (Some(value=5), 4)
    >>> next(it)
    6

    ```
    If the iterator ends before an item that does not fulfill the condition is encountered, `NONE` is returned as the first value.
    ```python
    >>> it = iter(range(1, 11))
    >>> dw.discard_while(it, lambda n: True)
    (NONE, 10)
    >>> list(it)
    []

    ```
    If the first item encountered does not fulfill the condition, `0` is returned as the second value.
    ```python
    >>> it = iter(range(1, 11))
    >>> item, count = dw.discard_while(it, lambda n: False)
    >>> item.unwrap(), count
    (1, 0)
    >>> next(it)
    2

    ```
    """
    count = 0
    for item in iter(iterator):
        if not predicate(item):
            return Discarded(Some(item), count)
        count += 1
    return Discarded(NONE, count)
