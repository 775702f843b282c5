"""Tests for the Option variants returned by discard_while."""

import pytest

import discard_while as dw


def test_some_equality() -> None:
    """Test that Some compares by value."""
    assert dw.Some(7) == dw.Some(7)
    assert dw.Some(7) != dw.Some(8)
    assert dw.Some(None) != dw.NONE


def test_none_singleton_equality() -> None:
    """Test that every NoneOption equals NONE."""
    assert dw.NoneOption() == dw.NONE
    assert repr(dw.NONE) == "NONE"


def test_unwrap_none_raises() -> None:
    """Test that unwrapping NONE raises OptionUnwrapError."""
    with pytest.raises(dw.OptionUnwrapError):
        dw.NONE.unwrap()
    with pytest.raises(RuntimeError, match="no even number"):
        dw.discard_while(iter([1]), lambda x: x % 2 == 1).item.expect(
            "no even number"
        )


def test_map_and_defaults() -> None:
    """Test map and the unwrap fallbacks."""
    item, _ = dw.discard_while(iter(["", "", "abc"]), lambda s: not s)
    assert item.map(len).unwrap() == 3
    assert dw.NONE.map(len).unwrap_or(0) == 0
    assert dw.NONE.unwrap_or_else(lambda: "fallback") == "fallback"


def test_docstring_summaries_on_first_line() -> None:
    """Test that documented Option methods open with their summary line."""
    for method in (
        dw.Option.is_some,
        dw.Option.is_none,
        dw.Option.unwrap,
        dw.Option.expect,
        dw.Option.unwrap_or,
        dw.Option.unwrap_or_else,
        dw.Option.map,
    ):
        doc = method.__doc__
        assert doc is not None
        lines = doc.splitlines()
        assert lines[0].strip(), method.__qualname__
        assert not lines[1].strip(), method.__qualname__
