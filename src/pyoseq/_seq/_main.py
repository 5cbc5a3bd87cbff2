from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Literal, overload

import more_itertools as mit

from .._results import NONE, Option, Some
from .._types import Comparison
from ._common import BaseSeq, convert_data, driving, into_blueprint

if TYPE_CHECKING:
    from .._core import SupportsRichComparison
    from ._pairs import PairSeq

logger = logging.getLogger(__name__)


def _lesser[U: SupportsRichComparison[Any]](acc: U, value: U) -> U:
    return value if value < acc else acc


def _greater[U: SupportsRichComparison[Any]](acc: U, value: U) -> U:
    return value if value > acc else acc


class Seq[T](BaseSeq[T]):
    """A lazy, re-drivable sequence of single values.

    A `Seq` wraps a *blueprint*: a zero-argument callable returning a fresh `Iterator[T]`.

    Nothing runs until the sequence is driven, either by a terminal method (`collect()`, `sum()`, `find()`...), by `drive()`, by a `for` loop, or by `pull()`.

    Every drive calls the blueprint again, so a `Seq` can be consumed any number of times and always reproduces the same elements.

    Combinators never materialize their input, with the exception of `sort()` and `sort_func()`.

    - To instantiate from a generator function, pass it to the standard constructor.
    - To instantiate from any `Iterable` (like a list or a range), or unpacked values, use the `from_` static method.

    Args:
        blueprint (Callable[[], Iterator[T]]): Callable building a fresh iterator for each drive.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> def squares():
    ...     for x in range(4):
    ...         yield x * x
    >>> ps.Seq(squares).map(str).collect()
    ['0', '1', '4', '9']

    ```
    """

    __slots__ = ()

    def __call__(self, consumer: Callable[[T], bool]) -> None:
        self.drive(consumer)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from any `Iterable`, or from unpacked values.

        Containers are iterated again on every drive, so later mutations are visible.

        One-shot iterators (generators, file objects, `iter(...)`) are streamed without being buffered, which makes the resulting `Seq` stateful: each drive resumes where the previous one stopped, and an exhausted iterator yields nothing more. Call `cached()` on the result to make it re-drivable.

        Note that displaying such a `Seq` drives it too, consuming the previewed elements.

        Args:
            data (Iterable[U] | U): Iterable to wrap, or a single value.
            *more_data (U): Additional values to include if `data` is not an `Iterable`. Ignored when `data` is an `Iterable`.

        Returns:
            Seq[U]: A new `Seq` over the provided data.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99])
        Seq(1, 2, 42, 99)
        >>> ps.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> once = ps.Seq.from_(iter([1, 2, 3]))
        >>> once.limit(1).collect(), once.collect(), once.collect()
        ([1], [2, 3], [])

        ```
        """
        return Seq(into_blueprint(convert_data(data, *more_data)))

    @staticmethod
    def empty() -> Seq[Any]:
        """Create a `Seq` without elements.

        Make sure to specify the type when calling this method, e.g., `Seq[int].empty()`.
        """
        return Seq(lambda: iter(()))

    @staticmethod
    def once[U](value: U) -> Seq[U]:
        """Create a `Seq` yielding exactly one element.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.once("a").concat(ps.Seq.once("b"))
        Seq('a', 'b')

        ```
        """
        return Seq(lambda: iter((value,)))

    @staticmethod
    def generate_func[U](
        start: U,
        next_func: Callable[[U], U],
        continue_func: Callable[[U], bool],
    ) -> Seq[U]:
        """Generate values from `start`, applying `next_func` while `continue_func` holds.

        The sequence is empty if `start` already fails `continue_func`.

        **Warning** ⚠️
            If `continue_func` never returns `False`, this creates an infinite sequence.
            Be sure to use `limit()` before any terminal operation.

        Args:
            start (U): First value.
            next_func (Callable[[U], U]): Computes a value from the previous one.
            continue_func (Callable[[U], bool]): Whether a value belongs to the sequence.

        Returns:
            Seq[U]: The generated sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate_func("a", lambda s: s + "a", lambda s: len(s) < 4)
        Seq('a', 'aa', 'aaa')
        >>> ps.Seq.generate_func(1, lambda x: x * 2, lambda _: True).limit(5).collect()
        [1, 2, 4, 8, 16]

        ```
        """

        def _generate() -> Iterator[U]:
            current = start
            while continue_func(current):
                yield current
                current = next_func(current)

        return Seq(_generate)

    @staticmethod
    def generate(start: int, stop: int, step: int = 1) -> Seq[int]:
        """Generate an arithmetic progression from `start` up to, but excluding, `stop`.

        A negative `step` counts down while the value stays above `stop`.

        Args:
            start (int): First value.
            stop (int): Bound that is never reached.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Seq[int]: The generated sequence.

        Raises:
            ValueError: If `step` is zero.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate(0, 8, 2)
        Seq(0, 2, 4, 6)
        >>> ps.Seq.generate(3, 0, -1)
        Seq(3, 2, 1)
        >>> ps.Seq.generate(5, 5).length()
        0

        ```
        """
        if step == 0:
            msg = "generate step must not be zero"
            raise ValueError(msg)
        if step > 0:
            return Seq.generate_func(start, lambda v: v + step, lambda v: v < stop)
        return Seq.generate_func(start, lambda v: v + step, lambda v: v > stop)

    @staticmethod
    def from_seqs[U](*seqs: Seq[U] | Iterable[U]) -> Seq[U]:
        """Chain several sequences one after the other.

        Plain iterables are accepted too, with the same re-driving rules as `from_()`.

        Args:
            *seqs (Seq[U] | Iterable[U]): Sequences to chain, in order.

        Returns:
            Seq[U]: A sequence draining each input before moving to the next.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_seqs(ps.Seq.generate(0, 2), [10, 11], ps.Seq.once(20))
        Seq(0, 1, 10, 11, 20)

        ```
        """
        wrapped = tuple(Seq(into_blueprint(s)) for s in seqs)
        return Seq(lambda: iter(wrapped)).flatten()

    def drive(self, consumer: Callable[[T], bool]) -> None:
        """Push every element into `consumer` until it returns `False`.

        Once the consumer declines an element, no further element is produced and every stage of the pipeline is closed before `drive` returns.

        Args:
            consumer (Callable[[T], bool]): Called once per element; return `False` to stop.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> seen = []
        >>> def take_two(x: int) -> bool:
        ...     seen.append(x)
        ...     return len(seen) < 2
        >>> ps.Seq.generate(0, 1_000_000).drive(take_two)
        >>> seen
        [0, 1]

        ```
        """
        with driving(self._inner) as data:
            for value in data:
                if not consumer(value):
                    return

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Drive the whole sequence, calling `func` on each element.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2]).for_each(lambda x: print(x * 10))
        10
        20

        ```
        """
        with driving(self._inner) as data:
            for value in data:
                func(value)

    def filter(self, predicate: Callable[[T], bool]) -> Seq[T]:
        """Keep the elements satisfying `predicate`, in order.

        Args:
            predicate (Callable[[T], bool]): Function deciding whether an element is kept.

        Returns:
            Seq[T]: The filtered sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).filter(lambda x: x < 10)
        Seq(1, 2)

        ```
        """

        def _filter(data: Iterator[T]) -> Iterator[T]:
            return (x for x in data if predicate(x))

        return self._lazy(_filter)

    def map[R](self, func: Callable[[T], R]) -> Seq[R]:
        """Transform each element with `func`.

        The number of elements and their order are preserved.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Seq[R]: The transformed sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).map(str)
        Seq('1', '2', '42', '99')

        ```
        """
        return Seq(self._stage(lambda data: map(func, data)))

    def inspect_each(self, func: Callable[[T], Any]) -> Seq[T]:
        """Call `func` on each element as it flows through, without altering it.

        Useful to observe how far a pipeline is actually driven.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate(0, 100).inspect_each(print).limit(2).collect()
        0
        1
        [0, 1]

        ```
        """

        def _inspect_each(data: Iterator[T]) -> Iterator[T]:
            for value in data:
                func(value)
                yield value

        return self._lazy(_inspect_each)

    def flatten[U](self: Seq[Seq[U]] | Seq[Iterable[U]]) -> Seq[U]:
        """Chain the inner sequences of a sequence of sequences.

        Each inner sequence is drained before the outer one advances, and stopping early stops both.

        Returns:
            Seq[U]: The flattened sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> nested = ps.Seq.from_([ps.Seq.from_([1, 2]), ps.Seq.from_([3])])
        >>> nested.flatten()
        Seq(1, 2, 3)
        >>> ps.Seq.from_([[1, 2], [3, 4]]).repeat().flatten().limit(5).collect()
        [1, 2, 3, 4, 1]

        ```
        """

        def _flatten(data: Iterator[Seq[U] | Iterable[U]]) -> Iterator[U]:
            for inner in data:
                with driving(into_blueprint(inner)) as values:
                    yield from values

        return Seq(self._stage(_flatten))  # type: ignore[arg-type]

    def flatten_pairs[K, V](self: Seq[PairSeq[K, V]]) -> PairSeq[K, V]:
        """Chain the pair sequences of a sequence of `PairSeq`.

        Returns:
            PairSeq[K, V]: The flattened pair sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> parts = ps.Seq.from_([ps.PairSeq.from_({1: "a"}), ps.PairSeq.from_({2: "b"})])
        >>> parts.flatten_pairs().collect()
        {1: 'a', 2: 'b'}

        ```
        """
        from ._pairs import PairSeq

        def _flatten_pairs(data: Iterator[PairSeq[K, V]]) -> Iterator[tuple[K, V]]:
            for inner in data:
                with driving(into_blueprint(inner)) as pairs:
                    yield from pairs

        return PairSeq(self._stage(_flatten_pairs))

    def concat(self, *others: Seq[T] | Iterable[T]) -> Seq[T]:
        """Append `others` after this sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2]).concat([3], ps.Seq.once(4))
        Seq(1, 2, 3, 4)

        ```
        """
        return Seq.from_seqs(self, *others)

    def dedup(self) -> Seq[T]:
        """Drop elements equal to one already yielded, keeping first occurrences in order.

        Seen elements are remembered for the whole drive, so memory grows with the number of distinct values.

        Unhashable elements are supported, at the cost of linear lookups.

        Returns:
            Seq[T]: The deduplicated sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> s = ps.Seq.from_([1, 2, 42, 99])
        >>> s.concat(s).dedup()
        Seq(1, 2, 42, 99)
        >>> ps.Seq.from_([1, 2]).repeat().dedup().limit(2).collect()
        [1, 2]

        ```
        """
        return self._lazy(mit.unique_everseen)

    def enumerate(self) -> PairSeq[int, T]:
        """Pair each element with its position, starting at 0.

        Positions count produced elements, so they are dense after a `filter()`.

        Each drive starts counting from 0 again.

        Returns:
            PairSeq[int, T]: `(index, element)` pairs.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> pairs = ps.Seq.from_("abcd").filter(lambda c: c != "b").enumerate()
        >>> pairs.collect()
        {0: 'a', 1: 'c', 2: 'd'}
        >>> pairs.keys().collect()
        [0, 1, 2]

        ```
        """
        from ._pairs import PairSeq

        return PairSeq(self._stage(enumerate))

    def enumerate_func[K](self, func: Callable[[T], K]) -> PairSeq[K, T]:
        """Pair each element with a key derived from it by `func`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_(["one", "three"]).enumerate_func(len).collect()
        {3: 'one', 5: 'three'}

        ```
        """
        from ._pairs import PairSeq

        def _enumerate_func(data: Iterator[T]) -> Iterator[tuple[K, T]]:
            return ((func(x), x) for x in data)

        return PairSeq(self._stage(_enumerate_func))

    def sort[U: SupportsRichComparison[Any]](
        self: Seq[U],
        key: Callable[[U], Any] | None = None,
        *,
        reverse: bool = False,
    ) -> Seq[U]:
        """Sort the elements in their natural order.

        Note:
            Each drive buffers the entire input before yielding anything.
            Never call this on an infinite sequence.

        Args:
            key (Callable[[U], Any] | None): Function to extract a comparison key from each element. Defaults to None.
            reverse (bool): Whether to sort in descending order. Defaults to False.

        Returns:
            Seq[U]: The sorted sequence. Sorting is stable.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([42, 1, 99, 2]).sort()
        Seq(1, 2, 42, 99)
        >>> ps.Seq.from_(["bb", "a", "ccc"]).sort(len, reverse=True)
        Seq('ccc', 'bb', 'a')

        ```
        """

        def _sort(data: Iterator[U]) -> list[U]:
            buffered = sorted(data, key=key, reverse=reverse)
            logger.debug("sort buffered %d elements", len(buffered))
            return buffered

        return self._lazy(_sort)

    def sort_func(self, cmp: Callable[[T, T], int]) -> Seq[T]:
        """Sort the elements with a three-way comparison function.

        `cmp(a, b)` must return a negative number if `a` sorts first, zero if they are equivalent and a positive number otherwise.

        Note:
            Each drive buffers the entire input before yielding anything.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 42, 2, 99]).sort_func(lambda a, b: b - a)
        Seq(99, 42, 2, 1)

        ```
        """
        return self.sort(functools.cmp_to_key(cmp))  # type: ignore[arg-type]

    def collect[C](
        self,
        factory: Callable[[Iterable[T]], C] = list,
        *,
        size_hint: int | None = None,
    ) -> C:
        """Drive the sequence into a container built by `factory`.

        Args:
            factory (Callable[[Iterable[T]], C]): Builds the container. Defaults to `list`.
            size_hint (int | None): Expected number of elements. Never affects the result: Python containers grow on demand, so it is only checked for sanity.

        Returns:
            C: The collected elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).collect(size_hint=16)
        [1, 2, 42, 99]
        >>> ps.Seq.from_([3, 1, 3]).collect(frozenset) == frozenset({1, 3})
        True

        ```
        """
        if size_hint is not None and size_hint < 0:
            msg = f"size_hint must be non-negative, got {size_hint}"
            raise ValueError(msg)
        return self._terminal(factory)

    def reduce[A](self, initial: A, func: Callable[[A, T], A]) -> A:
        """Left-fold the sequence, starting from `initial`.

        Args:
            initial (A): Seed of the accumulator, returned as is for an empty sequence.
            func (Callable[[A, T], A]): Combines the accumulator with the next element.

        Returns:
            A: The final accumulator.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).reduce(0, lambda acc, v: acc + v)
        144
        >>> ps.Seq[int].empty().reduce("seed", lambda acc, v: acc + str(v))
        'seed'

        ```
        """
        return self._terminal(lambda data: functools.reduce(func, data, initial))

    def fold(self, func: Callable[[T, T], T]) -> Option[T]:
        """Left-fold the sequence, using its first element as the seed.

        The first element is pulled on its own before the combining loop starts, so `func` is never called on an empty sequence.

        Args:
            func (Callable[[T, T], T]): Combines the accumulator with the next element.

        Returns:
            Option[T]: `Some(result)`, or `NONE` for an empty sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).fold(lambda acc, v: acc + v)
        Some(144)
        >>> ps.Seq[int].empty().fold(lambda acc, v: acc + v)
        NONE

        ```
        """
        with self.pull() as cursor:
            return cursor.next().map(lambda first: functools.reduce(func, cursor, first))

    @overload
    def sum[U: (int, float, complex, Fraction, Decimal, str)](
        self: Seq[U],
    ) -> U | Literal[0]: ...
    @overload
    def sum[U: (int, float, complex, Fraction, Decimal, str)](
        self: Seq[U], zero: U
    ) -> U: ...
    def sum[U: (int, float, complex, Fraction, Decimal, str)](
        self: Seq[U], zero: U | Literal[0] = 0
    ) -> U | Literal[0]:
        """Add the elements together.

        Supported kinds are numbers (`int`, `float`, `complex`, `Fraction`, `Decimal`) and `str`.

        Args:
            zero (U | Literal[0]): Returned for an empty sequence. Pass `""` when summing strings.

        Returns:
            U | Literal[0]: The sum, or `zero` for an empty sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).sum()
        144
        >>> ps.Seq.from_(["py", "o", "seq"]).sum("")
        'pyoseq'
        >>> ps.Seq[str].empty().sum("")
        ''

        ```
        """
        return self.fold(operator.add).unwrap_or(zero)

    @overload
    def product[U: (int, float, complex, Fraction, Decimal)](
        self: Seq[U],
    ) -> U | Literal[0]: ...
    @overload
    def product[U: (int, float, complex, Fraction, Decimal)](
        self: Seq[U], zero: U
    ) -> U: ...
    def product[U: (int, float, complex, Fraction, Decimal)](
        self: Seq[U], zero: U | Literal[0] = 0
    ) -> U | Literal[0]:
        """Multiply the elements together.

        An empty sequence yields `zero`, not the multiplicative identity.

        Args:
            zero (U | Literal[0]): Returned for an empty sequence.

        Returns:
            U | Literal[0]: The product, or `zero` for an empty sequence.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).product()
        8316
        >>> ps.Seq[int].empty().product()
        0

        ```
        """
        return self.fold(operator.mul).unwrap_or(zero)

    def min[U: SupportsRichComparison[Any]](self: Seq[U]) -> Option[U]:
        """Return the smallest element.

        The first element seeds the running minimum; ties keep the earliest element.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([42, 1, 99, 2]).min()
        Some(1)
        >>> ps.Seq[int].empty().min()
        NONE

        ```
        """
        return self.fold(_lesser)

    def max[U: SupportsRichComparison[Any]](self: Seq[U]) -> Option[U]:
        """Return the largest element.

        The first element seeds the running maximum, so all-negative sequences are handled.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42, 99]).max()
        Some(99)
        >>> ps.Seq.from_([-5, -2, -9]).max()
        Some(-2)

        ```
        """
        return self.fold(_greater)

    def count(self, value: T) -> int:
        """Count the elements equal to `value`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.once(42).repeat().limit(4).count(42)
        4

        ```
        """
        return self.count_func(lambda x: x == value)

    def count_func(self, predicate: Callable[[T], bool]) -> int:
        """Count the elements satisfying `predicate`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate(0, 10).count_func(lambda x: x % 2 == 0)
        5

        ```
        """
        return self._terminal(mit.quantify, predicate)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return the first element satisfying `predicate`.

        The drive stops as soon as a match is found.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Option[T]: `Some(element)` if found, `NONE` otherwise.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.generate(0, 1_000_000_000).find(lambda x: x > 5)
        Some(6)
        >>> ps.Seq.generate(0, 10).find(lambda x: x > 9).unwrap_or(-1)
        -1

        ```
        """
        with driving(self._inner) as data:
            for value in data:
                if predicate(value):
                    return Some(value)
        return NONE

    def contains(self, value: T) -> bool:
        """Whether an element equal to `value` is produced.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 42]).contains(42)
        True

        ```
        """
        return self.find(lambda x: x == value).is_some()

    def any(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Whether any element satisfies `predicate`, stopping at the first hit.

        An empty sequence returns `False`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element. Defaults to truthiness.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 3, 4]).any(lambda x: x % 2 == 0)
        True
        >>> ps.Seq.from_([0, 0]).any()
        False

        ```
        """
        return self._terminal(lambda data: any(map(predicate, data)))

    def all(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Whether every element satisfies `predicate`, stopping at the first failure.

        An empty sequence returns `True`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element. Defaults to truthiness.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([2, 4, 6]).all(lambda x: x % 2 == 0)
        True
        >>> ps.Seq[int].empty().all(lambda x: x > 100)
        True

        ```
        """
        return self._terminal(lambda data: all(map(predicate, data)))

    def compare_func[U](
        self,
        other: Seq[U] | Iterable[U],
        cmp: Callable[[T, U], bool],
    ) -> Comparison:
        """Compare two sequences pairwise, in lockstep.

        This sequence is driven normally while `other` is pulled through a `Cursor`, one element per element of `self`.

        When one side runs out before the other, comparison stops there: the counts gathered so far are kept and `mismatch` is set.

        Args:
            other (Seq[U] | Iterable[U]): The sequence to compare against.
            cmp (Callable[[T, U], bool]): Whether two elements match.

        Returns:
            Comparison: `(equal, total, mismatch)` counts.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> s = ps.Seq.from_([1, 2, 42, 99])
        >>> s.compare_func([1, 2, 40, 99], lambda a, b: a == b)
        Comparison(equal=3, total=4, mismatch=False)
        >>> s.compare_func([1, 2], lambda a, b: a == b)
        Comparison(equal=2, total=2, mismatch=True)

        ```
        """
        equal = total = 0
        with Seq(into_blueprint(other)).pull() as cursor, driving(self._inner) as data:
            for value in data:
                match cursor.next():
                    case Some(right):
                        total += 1
                        equal += bool(cmp(value, right))
                    case _:
                        logger.debug("compare: other side exhausted after %d pairs", total)
                        return Comparison(equal, total, mismatch=True)
            mismatch = cursor.peek().is_some()
        if mismatch:
            logger.debug("compare: this side exhausted after %d pairs", total)
        return Comparison(equal, total, mismatch)

    def compare(self, other: Seq[T] | Iterable[T]) -> Comparison:
        """Compare two sequences pairwise with `==`.

        See `compare_func()` for the handling of unequal lengths.
        """
        return self.compare_func(other, operator.eq)

    def equal(self, other: Seq[T] | Iterable[T]) -> bool:
        """Whether both sequences have the same length and pairwise equal elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> s = ps.Seq.from_([1, 2, 42, 99])
        >>> s.equal(s)
        True
        >>> s.equal(s.limit(3))
        False
        >>> ps.Seq[int].empty().equal([])
        True

        ```
        """
        return self.compare(other).is_equal

    def compare_percent(self, other: Seq[T] | Iterable[T]) -> float:
        """Share of pairwise equal elements, in `[0, 100]`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2, 3, 4]).compare_percent([1, 0, 3, 0])
        50.0

        ```
        """
        return self.compare(other).percent
