from __future__ import annotations

import logging
from collections.abc import Iterator
from types import TracebackType
from typing import Self

import more_itertools as mit

from .._core import Pipeable
from .._results import NONE, Option, Some
from ._common import close_iterator

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class Cursor[T](Pipeable):
    """Resumable, one-element-at-a-time view over a single drive of a sequence.

    A cursor is what lets two sequences advance in lockstep: one is iterated normally while the other is pulled from.

    The drive is suspended between calls, holding at most one look-ahead element.

    It is released as soon as the cursor is exhausted, closed explicitly, used as a context manager, or garbage collected.

    Obtain one with `Seq.pull()` or `PairSeq.pull()`.

    Args:
        data (Iterator[T]): The drive to advance.
    """

    __slots__ = ("_closed", "_peekable", "_source")

    def __init__(self, data: Iterator[T]) -> None:
        self._source = data
        self._peekable = mit.peekable(data)
        self._closed = False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """Whether the underlying drive was released."""
        return self._closed

    def next(self) -> Option[T]:
        """Advance the drive by one element.

        Returns:
            Option[T]: `Some(value)` for the next element, `NONE` once the drive is exhausted.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> cursor = ps.Seq.from_("ab").pull()
        >>> cursor.next(), cursor.next(), cursor.next()
        (Some('a'), Some('b'), NONE)
        >>> cursor.closed
        True

        ```
        """
        if self._closed:
            return NONE
        value = next(self._peekable, _EXHAUSTED)
        if value is _EXHAUSTED:
            self._release()
            return NONE
        return Some(value)

    def peek(self) -> Option[T]:
        """Look at the next element without consuming it.

        Finding the drive exhausted releases it, as `next()` does.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> cursor = ps.Seq.from_([7, 8]).pull()
        >>> cursor.peek(), cursor.next(), cursor.peek()
        (Some(7), Some(7), Some(8))

        ```
        """
        if self._closed:
            return NONE
        value = self._peekable.peek(_EXHAUSTED)
        if value is _EXHAUSTED:
            self._release()
            return NONE
        return Some(value)

    def close(self) -> None:
        """Release the underlying drive, running pending cleanup of every stage.

        Closing twice is a no-op.
        """
        if self._closed:
            return
        logger.debug("closing cursor over %r before exhaustion", self._source)
        self._release()

    def _release(self) -> None:
        self._closed = True
        close_iterator(self._source)
