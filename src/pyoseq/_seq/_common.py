from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Generator, Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Concatenate, Self

import cytoolz as cz
import more_itertools as mit

from .._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._cursor import Cursor

logger = logging.getLogger(__name__)

type Blueprint[T] = Callable[[], Iterator[T]]
"""Zero-argument callable building a fresh iterator on every drive."""


def close_iterator(data: Iterator[Any]) -> None:
    close = getattr(data, "close", None)
    if close is not None:
        close()


@contextmanager
def driving[T](blueprint: Blueprint[T]) -> Generator[Iterator[T], None, None]:
    """Start one drive of `blueprint`, closing the whole upstream chain on exit."""
    data = blueprint()
    try:
        yield data
    finally:
        close_iterator(data)


def guarded[T, **P, U](
    source: Blueprint[T],
    factory: Callable[Concatenate[Iterator[T], P], Iterable[U]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Iterator[U]:
    with driving(source) as data:
        yield from factory(data, *args, **kwargs)


def resume[T](data: Iterator[T]) -> Blueprint[T]:
    """Blueprint continuing a one-shot iterator where the previous drive left it.

    Ending a drive never closes `data` itself, so a stopped drive leaves the remaining elements to the next one.
    """

    def _resume() -> Iterator[T]:
        return (value for value in data)

    return _resume


class Replay[T]:
    """Re-drivable view over the first drive of a blueprint.

    The drive starts on the first pull and its elements are cached as they come, so every
    drive sees the same order and the blueprint is only ever consumed as far as the furthest drive.
    """

    __slots__ = ("_blueprint", "_cache", "_source")

    def __init__(self, blueprint: Blueprint[T]) -> None:
        self._blueprint = blueprint
        self._source: Iterator[T] | None = None
        self._cache: list[T] = []

    def __call__(self) -> Iterator[T]:
        idx = 0
        while True:
            if idx < len(self._cache):
                yield self._cache[idx]
            else:
                if self._source is None:
                    self._source = self._blueprint()
                for value in itertools.islice(self._source, 1):
                    self._cache.append(value)
                    yield value
                    break
                else:
                    close_iterator(self._source)
                    return
            idx += 1


def into_blueprint[T](data: Iterable[T] | BaseSeq[T]) -> Blueprint[T]:
    """Build a blueprint from a sequence wrapper or any native iterable."""
    match data:
        case BaseSeq():
            return data.inner()
        case Iterator():
            return resume(data)
        case _:
            return lambda: iter(data)


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


def check_count(name: str, n: int) -> None:
    if n < 0:
        msg = f"{name} expects a non-negative count, got {n}"
        raise ValueError(msg)


class BaseSeq[T](CommonBase[Blueprint[T]]):
    """Shared machinery of `Seq` and `PairSeq`.

    Wraps a blueprint: every iteration, drive or pull calls it again, so the same
    instance can be consumed any number of times.
    """

    __slots__ = ()

    def __init__(self, blueprint: Blueprint[T]) -> None:
        self._inner = blueprint

    def __iter__(self) -> Iterator[T]:
        return self._inner()

    def __repr__(self) -> str:
        config = get_config()
        with driving(self._inner) as data:
            preview = list(itertools.islice(data, config.repr_max_items + 1))
        return config.iter_repr(self.__class__.__name__, preview)

    def _stage[**P, U](
        self,
        factory: Callable[Concatenate[Iterator[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Blueprint[U]:
        source = self._inner

        def _blueprint() -> Iterator[U]:
            return guarded(source, factory, *args, **kwargs)

        return _blueprint

    def _lazy[**P](
        self,
        factory: Callable[Concatenate[Iterator[T], P], Iterable[T]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        return self.__class__(self._stage(factory, *args, **kwargs))

    def _terminal[**P, R](
        self,
        func: Callable[Concatenate[Iterator[T], P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        with driving(self._inner) as data:
            return func(data, *args, **kwargs)

    def pull(self) -> Cursor[T]:
        """Start a drive that is advanced on demand through a `Cursor`.

        Returns:
            Cursor[T]: A cursor over a fresh drive of the sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> with ps.Seq.generate(0, 3).pull() as cursor:
        ...     cursor.next(), cursor.next(), cursor.next(), cursor.next()
        (Some(0), Some(1), Some(2), NONE)

        ```
        """
        from ._cursor import Cursor

        return Cursor(self._inner())

    def skip(self, n: int) -> Self:
        """Discard the first `n` elements.

        Args:
            n (int): Number of elements to discard.

        Returns:
            Self: A sequence yielding `max(0, length - n)` elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).skip(2)
        Seq(42, 99)
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).skip(1)
        PairSeq((2, 'two'))

        ```
        """
        check_count("skip", n)
        return self._lazy(itertools.islice, n, None)

    def limit(self, n: int) -> Self:
        """Stop after `n` elements were yielded.

        The upstream is never asked for an element past the `n`-th, so `limit` is the usual way to bound an infinite sequence.

        Args:
            n (int): Maximum number of elements to yield.

        Returns:
            Self: A sequence yielding `min(n, length)` elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.once(42).repeat().limit(3)
        Seq(42, 42, 42)

        ```
        """
        check_count("limit", n)
        return self._lazy(itertools.islice, n)

    def repeat(self) -> Self:
        """Replay the whole sequence indefinitely.

        **Warning** ⚠️
            This creates an infinite sequence.
            Be sure to use `limit()` before any terminal operation.

        An empty sequence stays empty instead of spinning forever.

        Returns:
            Self: An infinite sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2]).repeat().limit(5).collect()
        [1, 2, 1, 2, 1]
        >>> ps.Seq[int].empty().repeat().length()
        0

        ```
        """
        source = self._inner

        def _repeat() -> Iterator[T]:
            while True:
                produced = False
                with driving(source) as data:
                    for value in data:
                        produced = True
                        yield value
                if not produced:
                    return

        return self.__class__(_repeat)

    def cached(self) -> Self:
        """Remember the elements of the first drive, so that later drives replay them.

        This is the way to make a sequence built from a one-shot iterator re-drivable, or to avoid recomputing an expensive pipeline.

        Elements are stored as they are first pulled and kept for the life of the returned sequence, so memory grows with the number of elements pulled.

        Returns:
            Self: A re-drivable sequence over the same elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> lines = ps.Seq.from_(iter(["a", "b"])).cached()
        >>> lines.collect(), lines.collect()
        (['a', 'b'], ['a', 'b'])

        ```
        """
        return self.__class__(Replay(self._inner))

    def length(self) -> int:
        """Count the elements by driving the sequence to the end.

        Returns:
            int: The number of elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate(0, 10).filter(lambda x: x % 3 == 0).length()
        4

        ```
        """
        return self._terminal(cz.itertoolz.count)

    def drain(self) -> None:
        """Drive the sequence to the end, discarding every element.

        Only useful for the side effects of the pipeline.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2]).inspect_each(print).drain()
        1
        2

        ```
        """
        return self._terminal(mit.consume)
