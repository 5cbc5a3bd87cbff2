"""Tests for the pull adapter."""

import gc
import logging

import pytest

import pyoseq as ps

S = [1, 2, 42, 99]


def test_next_until_exhausted() -> None:
    cursor = ps.Seq.from_(S).pull()
    assert [cursor.next() for _ in range(5)] == [
        ps.Some(1),
        ps.Some(2),
        ps.Some(42),
        ps.Some(99),
        ps.NONE,
    ]
    assert cursor.closed
    assert cursor.next().is_none()


def test_pull_is_lazy(tracked) -> None:
    source = tracked(S)
    cursor = ps.Seq(source).pull()
    assert source.drives == 0
    cursor.next()
    assert source.produced == [1]
    cursor.close()


def test_peek_does_not_consume() -> None:
    with ps.Seq.from_(S).pull() as cursor:
        assert cursor.peek() == ps.Some(1)
        assert cursor.peek() == ps.Some(1)
        assert cursor.next() == ps.Some(1)
        assert cursor.next() == ps.Some(2)


def test_peek_on_exhausted() -> None:
    cursor = ps.Seq[int].empty().pull()
    assert cursor.peek().is_none()


def test_iteration_protocol() -> None:
    cursor = ps.Seq.from_(S).pull()
    assert cursor.next() == ps.Some(1)
    assert list(cursor) == [2, 42, 99]


def test_context_manager_releases_drive(tracked) -> None:
    source = tracked(S)
    with ps.Seq(source).map(lambda x: x + 1).pull() as cursor:
        assert cursor.next().unwrap() == 2
    assert cursor.closed
    assert source.closed == 1
    assert source.finished == 0


def test_close_is_idempotent(tracked) -> None:
    source = tracked(S)
    cursor = ps.Seq(source).pull()
    cursor.next()
    cursor.close()
    cursor.close()
    assert source.closed == 1
    assert cursor.next().is_none()


def test_abandoned_cursor_is_released(tracked) -> None:
    """Dropping a cursor without draining it still closes the drive."""
    source = tracked(S)
    cursor = ps.Seq(source).pull()
    cursor.next()
    del cursor
    gc.collect()
    assert source.closed == 1
    assert source.produced == [1]


def test_independent_cursors(tracked) -> None:
    source = tracked(S)
    seq = ps.Seq(source)
    with seq.pull() as first, seq.pull() as second:
        assert first.next() == ps.Some(1)
        assert first.next() == ps.Some(2)
        assert second.next() == ps.Some(1)
    assert source.drives == 2
    assert source.closed == 2


def test_pull_infinite() -> None:
    with ps.Seq.once(3).repeat().pull() as cursor:
        assert [cursor.next().unwrap() for _ in range(3)] == [3, 3, 3]


def test_early_close_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="pyoseq")
    with ps.Seq.from_(S).pull() as cursor:
        cursor.next()
    assert any("closing cursor" in record.getMessage() for record in caplog.records)


def test_exhaustion_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="pyoseq")
    cursor = ps.Seq.from_(S).pull()
    list(cursor)
    cursor.close()
    assert not any("closing cursor" in record.getMessage() for record in caplog.records)


def test_exhausted_peek_releases_drive(
    tracked, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="pyoseq")
    source = tracked([1])
    cursor = ps.Seq(source).pull()
    assert cursor.next() == ps.Some(1)
    assert cursor.peek().is_none()
    assert cursor.closed
    assert source.finished == 1
    cursor.close()
    assert not any("closing cursor" in record.getMessage() for record in caplog.records)


def test_equal_length_compare_is_not_logged_as_early_close(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="pyoseq")
    assert ps.Seq.from_(S).equal(ps.Seq.from_(S))
    assert not any("closing cursor" in record.getMessage() for record in caplog.records)
