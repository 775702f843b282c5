from typing import Protocol


class Predicate[T](Protocol):
    def __call__(self, item: T, /) -> bool: ...
