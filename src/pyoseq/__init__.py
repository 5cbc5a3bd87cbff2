from ._core import Config, Pipeable, get_config, set_config
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._seq import Cursor, PairSeq, Seq
from ._types import Comparison, Item

__all__ = [
    "NONE",
    "Comparison",
    "Config",
    "Cursor",
    "Item",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "PairSeq",
    "Pipeable",
    "Seq",
    "Some",
    "get_config",
    "set_config",
]
