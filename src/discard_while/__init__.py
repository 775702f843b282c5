"""Advance an iterator past the items matching a predicate, and count them.

Use `discard_while()` as a function, or inherit from `DiscardWhile` (as `Iter` does) to get it as a method.
"""

from ._core import Config, Pipeable, Predicate, get_config
from ._discard import Discarded, discard_while
from ._iter import Iter
from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._traits import DiscardWhile

__all__ = [
    "NONE",
    "Config",
    "DiscardWhile",
    "Discarded",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Predicate",
    "Some",
    "discard_while",
    "get_config",
]
