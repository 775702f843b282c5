from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Config:
    """Runtime settings shared by all wrappers.

    Modify the instance returned by `get_config()` in place.

    Example:
    ```python
    >>> import discard_while as dw
    >>> dw.get_config().iter_repr_max_len
    60

    ```
    """

    iter_repr_max_len: int = 60
    """Maximum length of the wrapped iterator repr in `Iter.__repr__`."""

    def iter_repr(self, data: Any) -> str:  # noqa: ANN401
        text = repr(data)
        if len(text) <= self.iter_repr_max_len:
            return text
        return text[: self.iter_repr_max_len] + "..."


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG
