from ._config import Config, get_config, set_config
from ._main import CommonBase, Pipeable
from ._protocols import SupportsKeysAndGetItem, SupportsRichComparison

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "SupportsKeysAndGetItem",
    "SupportsRichComparison",
    "get_config",
    "set_config",
]
