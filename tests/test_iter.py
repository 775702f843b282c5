"""Tests for the Iter wrapper and the DiscardWhile method form."""

from collections.abc import Iterator

import pytest

import discard_while as dw


class _Letters(dw.DiscardWhile[str]):
    def __init__(self, text: str) -> None:
        self._chars = iter(text)

    def __next__(self) -> str:
        return next(self._chars)


@pytest.mark.parametrize(
    "data",
    [[], [2, 4, 6, 7, 8], [1, 3, 5], [2, 4, 6]],
)
def test_method_matches_function(data: list[int]) -> None:
    """Test that the method form returns the same pair as the function form."""
    by_method = dw.Iter(data)
    by_function = iter(data)
    assert by_method.discard_while(lambda x: x % 2 == 0) == dw.discard_while(
        by_function, lambda x: x % 2 == 0
    )
    assert list(by_method) == list(by_function)


def test_custom_iterator_gets_method() -> None:
    """Test that any DiscardWhile subclass can use the method."""
    letters = _Letters("   hello")
    assert letters.discard_while(str.isspace) == (dw.Some("h"), 3)
    assert "".join(letters) == "ello"
    assert isinstance(letters, Iterator)


def test_iter_is_iterator() -> None:
    """Test that Iter plugs into the standard iteration protocol."""
    it = dw.Iter([1, 2, 3])
    assert iter(it) is it
    assert next(it) == 1
    assert list(it) == [2, 3]


def test_next_after_exhaustion() -> None:
    """Test that `next()` keeps returning NONE once exhausted."""
    it = dw.Iter([1])
    assert it.next() == dw.Some(1)
    assert it.next() is dw.NONE
    assert it.next() is dw.NONE


def test_find_leaves_iterator_after_match() -> None:
    """Test that find consumes up to and including the match."""
    it = dw.Iter([1, 3, 4, 5, 6])
    assert it.find(lambda x: x % 2 == 0) == dw.Some(4)
    assert list(it) == [5, 6]


def test_find_not_found() -> None:
    """Test that find exhausts the iterator when nothing matches."""
    it = dw.Iter([1, 3])
    assert it.find(lambda x: x > 3).is_none()
    assert it.next().is_none()


def test_position() -> None:
    """Test that position counts items relative to the current state."""
    it = dw.Iter([7, 8, 9, 10])
    assert it.position(lambda x: x == 9) == dw.Some(2)
    assert it.position(lambda x: x == 10) == dw.Some(0)
    assert it.position(lambda x: x == 7) is dw.NONE


def test_skip_while_is_lazy() -> None:
    """Test that skip_while pulls nothing until iterated."""
    calls: list[int] = []

    def _pred(x: int) -> bool:
        calls.append(x)
        return x < 2

    skipped = dw.Iter(range(5)).skip_while(_pred)
    assert calls == []
    assert skipped.into(list) == [2, 3, 4]
    assert calls == [0, 1, 2]


def test_from_unpacked_values() -> None:
    """Test building an Iter from unpacked values or an iterable."""
    assert dw.Iter.from_(1, 2, 3).into(list) == [1, 2, 3]
    assert dw.Iter.from_((1, 2, 3)).into(list) == [1, 2, 3]
    assert dw.Iter.from_(42).into(list) == [42]


def test_from_func() -> None:
    """Test the discard on an iterated function."""
    it = dw.Iter.from_func(lambda x: x + 3, 0)
    assert it.discard_while(lambda x: x < 10) == (dw.Some(12), 4)
    assert next(it) == 15


def test_inner_is_shared() -> None:
    """Test that discarding through Iter advances the wrapped iterator."""
    source = iter([0, 0, 1, 2])
    it = dw.Iter(source)
    it.discard_while(lambda x: x == 0)
    assert it.inner() is source
    assert next(source) == 2


def test_repr_uses_config() -> None:
    """Test that the repr of the wrapped iterator is truncated per config."""
    config = dw.get_config()
    previous = config.iter_repr_max_len
    config.iter_repr_max_len = 5
    try:
        assert repr(dw.Iter([1])) == "Iter(<list...)"
    finally:
        config.iter_repr_max_len = previous
    assert repr(dw.Iter([1])).startswith("Iter(<list_iterator object at")


def test_slots() -> None:
    """Test that wrappers and results carry no instance dict."""
    for obj in (dw.Iter(()), dw.Some(42), dw.NoneOption(), dw.get_config()):
        assert not hasattr(obj, "__dict__")


def test_into_forwards_arguments() -> None:
    """Test that into passes the wrapper first, then the extra arguments."""
    it = dw.Iter([3, 1, 2])
    it.discard_while(lambda x: x > 2)
    assert it.into(sorted, reverse=True) == [2]
    assert it.into(list) == []


def test_wrapper_exposes_only_scan_helpers() -> None:
    """Test that the wrapper bases add no chaining helper besides into and inner."""
    assert not hasattr(dw.Iter, "inspect")
    assert "__init__" not in vars(dw.Iter.__mro__[1])
