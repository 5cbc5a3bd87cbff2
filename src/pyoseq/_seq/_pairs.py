from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping
from operator import itemgetter
from typing import TYPE_CHECKING, Any

import more_itertools as mit

from .._results import NONE, Option, Some
from .._types import Item
from ._common import BaseSeq, driving, into_blueprint
from ._main import Seq

if TYPE_CHECKING:
    from .._core import SupportsKeysAndGetItem


class PairSeq[K, V](BaseSeq[tuple[K, V]]):
    """A lazy, re-drivable sequence of key/value pairs.

    The paired counterpart of `Seq`: the blueprint builds an iterator of `(key, value)` tuples, and callbacks receive the key and the value as two separate arguments.

    No uniqueness of keys is assumed; only `collect()` builds a `dict`, where the last write wins.

    Args:
        blueprint (Callable[[], Iterator[tuple[K, V]]]): Callable building a fresh iterator of pairs for each drive.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ages = ps.PairSeq.from_({"alice": 31, "bob": 17, "carol": 45})
    >>> ages.filter(lambda name, age: age >= 18).map(lambda name, age: (name.title(), age)).collect()
    {'Alice': 31, 'Carol': 45}

    ```
    """

    __slots__ = ()

    def __call__(self, consumer: Callable[[K, V], bool]) -> None:
        self.drive(consumer)

    @staticmethod
    def from_[G, I](
        data: Mapping[G, I] | Iterable[tuple[G, I]] | SupportsKeysAndGetItem[G, I],
    ) -> PairSeq[G, I]:
        """Create a `PairSeq` from a mapping or from an iterable of pairs.

        Mappings are read again on every drive, so later mutations are visible.

        A one-shot iterator of pairs is streamed without buffering, as in `Seq.from_()`: each drive resumes where the previous one stopped. Use `cached()` to replay it.

        Args:
            data (Mapping[G, I] | Iterable[tuple[G, I]] | SupportsKeysAndGetItem[G, I]): Source of the pairs.

        Returns:
            PairSeq[G, I]: A new `PairSeq` over the provided data.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"})
        PairSeq((1, 'one'), (2, 'two'))
        >>> ps.PairSeq.from_([("a", 1), ("a", 2)]).length()
        2

        ```
        """
        match data:
            case Mapping():
                return PairSeq(lambda: iter(data.items()))
            case _ if hasattr(data, "keys") and hasattr(data, "__getitem__"):
                return PairSeq(lambda: ((k, data[k]) for k in data.keys()))  # type: ignore[union-attr, index]
            case _:
                return PairSeq(into_blueprint(data))  # type: ignore[arg-type]

    @staticmethod
    def empty() -> PairSeq[Any, Any]:
        """Create a `PairSeq` without pairs.

        Make sure to specify the types when calling this method, e.g., `PairSeq[str, int].empty()`.
        """
        return PairSeq(lambda: iter(()))

    @staticmethod
    def from_seqs[G, I](*seqs: PairSeq[G, I]) -> PairSeq[G, I]:
        """Chain several pair sequences one after the other.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_seqs(ps.PairSeq.from_({1: "a"}), ps.PairSeq.from_({1: "b", 2: "c"})).collect()
        {1: 'b', 2: 'c'}

        ```
        """
        return Seq(lambda: iter(seqs)).flatten_pairs()

    def drive(self, consumer: Callable[[K, V], bool]) -> None:
        """Push every pair into `consumer` until it returns `False`.

        Every stage of the pipeline is closed before `drive` returns.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> def show(k: str, v: int) -> bool:
        ...     print(k, v)
        ...     return v < 2
        >>> ps.PairSeq.from_({"a": 1, "b": 2, "c": 3}).drive(show)
        a 1
        b 2

        ```
        """
        with driving(self._inner) as data:
            for key, value in data:
                if not consumer(key, value):
                    return

    def for_each(self, func: Callable[[K, V], Any]) -> None:
        """Drive every pair, calling `func(key, value)` on each."""
        with driving(self._inner) as data:
            for key, value in data:
                func(key, value)

    def filter(self, predicate: Callable[[K, V], bool]) -> PairSeq[K, V]:
        """Keep the pairs satisfying `predicate(key, value)`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two", 7: "seven"}).filter(lambda k, v: k < 5)
        PairSeq((1, 'one'), (2, 'two'))

        ```
        """

        def _filter(data: Iterator[tuple[K, V]]) -> Iterator[tuple[K, V]]:
            return (kv for kv in data if predicate(*kv))

        return self._lazy(_filter)

    def map[KR, VR](self, func: Callable[[K, V], tuple[KR, VR]]) -> PairSeq[KR, VR]:
        """Transform each pair with `func(key, value) -> (new_key, new_value)`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).map(lambda k, v: (str(k), v.upper())).collect()
        {'1': 'ONE', '2': 'TWO'}

        ```
        """
        return PairSeq(self._stage(lambda data: itertools.starmap(func, data)))

    def swap(self) -> PairSeq[V, K]:
        """Exchange keys and values.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one"}).swap().collect()
        {'one': 1}

        ```
        """
        return self.map(lambda k, v: (v, k))

    def keys(self) -> Seq[K]:
        """Project the keys into a `Seq`, lazily.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).keys()
        Seq(1, 2)

        ```
        """
        return Seq(self._stage(lambda data: map(itemgetter(0), data)))

    def values(self) -> Seq[V]:
        """Project the values into a `Seq`, lazily.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).values()
        Seq('one', 'two')

        ```
        """
        return Seq(self._stage(lambda data: map(itemgetter(1), data)))

    def items(self) -> Seq[Item[K, V]]:
        """View the pairs as a `Seq` of `Item`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one"}).items().map(lambda item: item.value).collect()
        ['one']

        ```
        """
        return Seq(self._stage(lambda data: itertools.starmap(Item, data)))

    def collect[C](
        self,
        factory: Callable[[Iterable[tuple[K, V]]], C] = dict,
        *,
        size_hint: int | None = None,
    ) -> C:
        """Drive the pairs into a container built by `factory`, a `dict` by default.

        With a `dict`, duplicate keys keep the last value produced.

        Args:
            factory (Callable[[Iterable[tuple[K, V]]], C]): Builds the container. Defaults to `dict`.
            size_hint (int | None): Expected number of pairs. Never affects the result.

        Returns:
            C: The collected pairs.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_([("a", 1), ("b", 2), ("a", 3)]).collect()
        {'a': 3, 'b': 2}

        ```
        """
        if size_hint is not None and size_hint < 0:
            msg = f"size_hint must be non-negative, got {size_hint}"
            raise ValueError(msg)
        return self._terminal(factory)  # type: ignore[arg-type]

    def reduce[A](self, initial: A, func: Callable[[A, K, V], A]) -> A:
        """Left-fold the pairs, starting from `initial`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).reduce([], lambda acc, k, v: [*acc, f"{k} - {v}"])
        ['1 - one', '2 - two']

        ```
        """

        def _step(acc: A, kv: tuple[K, V]) -> A:
            return func(acc, *kv)

        return self._terminal(lambda data: functools.reduce(_step, data, initial))

    def count(self, key: K, value: V) -> int:
        """Count the pairs equal to `(key, value)`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_([("a", 1), ("b", 1), ("a", 1)]).count("a", 1)
        2

        ```
        """
        return self.count_func(lambda k, v: k == key and v == value)

    def count_func(self, predicate: Callable[[K, V], bool]) -> int:
        """Count the pairs satisfying `predicate(key, value)`."""
        return self._terminal(mit.quantify, lambda kv: predicate(*kv))

    def find(self, predicate: Callable[[K, V], bool]) -> Option[Item[K, V]]:
        """Return the first pair satisfying `predicate(key, value)`.

        The drive stops as soon as a match is found.

        Returns:
            Option[Item[K, V]]: `Some(Item(key, value))` if found, `NONE` otherwise.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.PairSeq.from_({1: "one", 2: "two"}).find(lambda k, v: v.startswith("t"))
        Some((2, 'two'))

        ```
        """
        with driving(self._inner) as data:
            for key, value in data:
                if predicate(key, value):
                    return Some(Item(key, value))
        return NONE

    def contains_key(self, key: K) -> bool:
        """Whether a pair with a key equal to `key` is produced."""
        return self.find(lambda k, _: k == key).is_some()

    def contains_value(self, value: V) -> bool:
        """Whether a pair with a value equal to `value` is produced.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> m = ps.PairSeq.from_({1: "one", 2: "two"})
        >>> m.contains_key(2), m.contains_value("two"), m.contains_value("seven")
        (True, True, False)

        ```
        """
        return self.find(lambda _, v: v == value).is_some()

    def any(self, predicate: Callable[[K, V], bool]) -> bool:
        """Whether any pair satisfies `predicate(key, value)`, stopping at the first hit."""
        return self._terminal(lambda data: any(itertools.starmap(predicate, data)))

    def all(self, predicate: Callable[[K, V], bool]) -> bool:
        """Whether every pair satisfies `predicate(key, value)`, stopping at the first failure.

        An empty sequence returns `True`.
        """
        return self._terminal(lambda data: all(itertools.starmap(predicate, data)))
