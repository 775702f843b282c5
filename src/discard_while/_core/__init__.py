from ._config import Config, get_config
from ._main import CommonBase, Pipeable
from ._protocols import Predicate

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "Predicate",
    "get_config",
]
