from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the instance to **func** and return what it returns.

        Writing `it.into(f)` instead of `f(it)` keeps a scan and its terminal step in one chain.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the instance as first argument.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter(range(5)).into(list)
        [0, 1, 2, 3, 4]
        >>> dw.Iter([3, 5, 4, 1]).into(sorted, reverse=True)
        [5, 4, 3, 1]

        ```
        """
        return func(self, *args, **kwargs)


class CommonBase[T](ABC, Pipeable):
    """Slotted holder of the object a wrapper advances.

    Subclasses set `_inner` in their own `__init__`.
    """

    _inner: T

    __slots__ = ("_inner",)

    def inner(self) -> T:
        """Return the wrapped object, sharing its state with the wrapper."""
        return self._inner
