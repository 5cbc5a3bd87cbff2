"""Tests for the lazy single-value combinators."""

import pytest

import pyoseq as ps

S = [1, 2, 42, 99]


def _is_small(x: int) -> bool:
    return x < 10


@pytest.mark.parametrize(
    "data",
    [S, [], [5], list(range(20)), [3, 3, 3]],
)
def test_filter_matches_builtin(data: list[int]) -> None:
    assert ps.Seq.from_(data).filter(_is_small).collect() == [x for x in data if _is_small(x)]


def test_map_to_strings() -> None:
    assert ps.Seq.from_(S).map(str).collect() == ["1", "2", "42", "99"]


@pytest.mark.parametrize("data", [S, [], list(range(7))])
def test_map_preserves_length(data: list[int]) -> None:
    seq = ps.Seq.from_(data)
    assert seq.map(lambda x: x * 2).length() == seq.length()


@pytest.mark.parametrize("n", [0, 1, 2, 4, 6])
def test_limit_length(n: int) -> None:
    assert ps.Seq.from_(S).limit(n).length() == min(n, len(S))


@pytest.mark.parametrize("n", [0, 1, 2, 4, 6])
def test_skip_length(n: int) -> None:
    assert ps.Seq.from_(S).skip(n).length() == max(0, len(S) - n)


def test_skip_then_limit_window() -> None:
    assert ps.Seq.generate(0, 100).skip(10).limit(3).collect() == [10, 11, 12]


def test_limit_counts_yielded_elements() -> None:
    """`limit` after `filter` counts what passes the filter, not raw elements."""
    seq = ps.Seq.generate(0, 100).filter(lambda x: x % 10 == 0).limit(3)
    assert seq.collect() == [0, 10, 20]


@pytest.mark.parametrize("method", ["skip", "limit"])
def test_negative_counts_rejected(method: str) -> None:
    with pytest.raises(ValueError, match="non-negative"):
        getattr(ps.Seq.from_(S), method)(-1)


def test_inspect_each_is_lazy() -> None:
    seen: list[int] = []
    seq = ps.Seq.generate(0, 1000).inspect_each(seen.append)
    assert seen == []
    assert seq.limit(3).collect() == [0, 1, 2]
    assert seen == [0, 1, 2]


class TestDedup:
    """Tests for streaming deduplication."""

    def test_dedup_concat(self) -> None:
        seq = ps.Seq.from_(S)
        assert seq.concat(seq).dedup().collect() == S

    def test_dedup_keeps_first_occurrence_order(self) -> None:
        assert ps.Seq.from_("abracadabra").dedup().collect() == ["a", "b", "r", "c", "d"]

    def test_dedup_unhashable(self) -> None:
        assert ps.Seq.from_([[1], [1], [2]]).dedup().collect() == [[1], [2]]

    def test_dedup_on_infinite_sequence(self) -> None:
        assert ps.Seq.from_([3, 1, 3]).repeat().dedup().limit(2).collect() == [3, 1]

    def test_dedup_forgets_between_drives(self) -> None:
        seq = ps.Seq.from_([1, 1, 2]).dedup()
        assert seq.collect() == [1, 2]
        assert seq.collect() == [1, 2]


class TestEnumerate:
    """Tests for pairing elements with indexes or derived keys."""

    def test_enumerate(self) -> None:
        assert ps.Seq.from_(S).enumerate().collect() == {0: 1, 1: 2, 2: 42, 3: 99}

    def test_enumerate_counts_after_filter(self) -> None:
        pairs = ps.Seq.from_(S).filter(lambda x: x > 1).enumerate()
        assert pairs.keys().collect() == [0, 1, 2]

    def test_enumerate_restarts_on_each_drive(self) -> None:
        pairs = ps.Seq.from_("ab").enumerate()
        assert pairs.collect() == {0: "a", 1: "b"}
        assert pairs.collect() == {0: "a", 1: "b"}

    def test_enumerate_func(self) -> None:
        pairs = ps.Seq.from_(S).enumerate_func(lambda v: f"k{v}")
        assert pairs.collect() == {"k1": 1, "k2": 2, "k42": 42, "k99": 99}


class TestSort:
    """Tests for buffered sorting."""

    def test_sort_natural(self) -> None:
        assert ps.Seq.from_([99, 1, 42, 2]).sort().collect() == S

    def test_sort_reverse_with_key(self) -> None:
        words = ps.Seq.from_(["bb", "a", "ccc"])
        assert words.sort(len, reverse=True).collect() == ["ccc", "bb", "a"]

    def test_sort_func_descending(self) -> None:
        assert ps.Seq.from_(S).sort_func(lambda a, b: b - a).collect() == [99, 42, 2, 1]

    def test_sort_func_is_stable(self) -> None:
        data = [("b", 1), ("a", 2), ("b", 0), ("a", 1)]
        by_letter = ps.Seq.from_(data).sort_func(lambda x, y: (x[0] > y[0]) - (x[0] < y[0]))
        assert by_letter.collect() == [("a", 2), ("a", 1), ("b", 1), ("b", 0)]

    def test_sort_is_lazy_until_driven(self, tracked) -> None:
        source = tracked([3, 1, 2])
        seq = ps.Seq(source).sort()
        assert source.drives == 0
        assert seq.limit(1).collect() == [1]
        assert source.produced == [3, 1, 2]
