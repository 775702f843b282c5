from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ._discard import Discarded, discard_while

if TYPE_CHECKING:
    from ._core import Predicate


class DiscardWhile[T](Iterator[T]):
    """Mixin exposing `discard_while()` as a method on any `Iterator`.

    Subclasses only need to implement `__next__`.

    Example:
    ```python
    >>> import discard_while as dw
    >>> class Countdown(dw.DiscardWhile[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.current = start
    ...     def __next__(self) -> int:
    ...         if self.current <= 0:
    ...             raise StopIteration
    ...         self.current -= 1
    ...         return self.current + 1
    >>> countdown = Countdown(5)
    >>> countdown.discard_while(lambda n: n > 2)
    (Some(value=2), 3)
    >>> list(countdown)
    [1]

    ```
    """

    __slots__ = ()

    def discard_while(self, predicate: Predicate[T]) -> Discarded[T]:
        """Advance the iterator as long as a condition on the yielded items holds.

        Returns the first item that no longer satisfies the condition, if any, and the number of items discarded.

        See `discard_while()` for the full contract.

        Args:
            predicate (Predicate[T]): Function to evaluate each item.

        Returns:
            Discarded[T]: The first non-matching item as an `Option`, and the number of discarded items.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter(range(1, 11))
        >>> it.discard_while(lambda n: n != 5)
        (Some(value=5), 4)
        >>> it.into(list)
        [6, 7, 8, 9, 10]
        >>> it.discard_while(lambda n: True)
        (NONE, 0)

        ```
        """
        return discard_while(self, predicate)
