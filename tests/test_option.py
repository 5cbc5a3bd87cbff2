"""Tests for the presence flag returned by searches and seedless reductions."""

import pytest

import pyoseq as ps


def test_pattern_matching() -> None:
    match ps.Seq.from_([3, 1, 2]).min():
        case ps.Some(value):
            assert value == 1
        case _:
            pytest.fail("expected Some")

    match ps.Seq[int].empty().max():
        case ps.Some(_):
            pytest.fail("expected NONE")
        case _:
            pass


def test_unwrap_none_raises() -> None:
    with pytest.raises(ps.OptionUnwrapError, match="called `unwrap` on a `None`"):
        ps.NONE.unwrap()


def test_expect() -> None:
    assert ps.Some(1).expect("missing") == 1
    with pytest.raises(ps.OptionUnwrapError, match="missing"):
        ps.NONE.expect("missing")


def test_unwrap_or_else() -> None:
    assert ps.NONE.unwrap_or_else(lambda: 5) == 5
    assert ps.Some(1).unwrap_or_else(lambda: 5) == 1


def test_map_and_then_filter() -> None:
    assert ps.Some(2).map(lambda x: x * 10) == ps.Some(20)
    assert ps.NONE.map(lambda x: x * 10) is ps.NONE
    assert ps.Some(2).and_then(lambda x: ps.NONE).is_none()
    assert ps.Some(2).and_then(lambda x: ps.Some(x + 1)) == ps.Some(3)
    assert ps.Some(3).filter(lambda x: x > 5).is_none()


def test_repr() -> None:
    assert repr(ps.Some("a")) == "Some('a')"
    assert repr(ps.NONE) == "NONE"
