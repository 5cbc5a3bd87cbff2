from __future__ import annotations

from typing import NamedTuple


class Item[K, V](NamedTuple):
    """Represents a key-value pair produced by a `PairSeq`."""

    key: K
    """The key of the item."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


class Comparison(NamedTuple):
    """Outcome of comparing two sequences element by element.

    See `Seq.compare_func()` for details.
    """

    equal: int
    """How many compared pairs matched."""
    total: int
    """How many pairs were compared."""
    mismatch: bool
    """`True` when one side ran out of elements before the other."""

    @property
    def is_equal(self) -> bool:
        """`True` when both sides had the same length and every pair matched."""
        return not self.mismatch and self.equal == self.total

    @property
    def percent(self) -> float:
        """Share of matching pairs, in `[0, 100]`.

        Two empty sequences are fully equal; an empty side against a non-empty one shares nothing.
        """
        if self.total == 0:
            return 0.0 if self.mismatch else 100.0
        return self.equal * 100 / self.total
