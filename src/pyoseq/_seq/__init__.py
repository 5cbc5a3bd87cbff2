from ._cursor import Cursor
from ._main import Seq
from ._pairs import PairSeq

__all__ = ["Cursor", "PairSeq", "Seq"]
