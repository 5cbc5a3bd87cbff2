"""Shared fixtures for pyoseq tests."""

from collections.abc import Callable, Iterable, Iterator

import pytest

import pyoseq as ps

S = [1, 2, 42, 99]


class TrackedSource[T]:
    """Blueprint recording how far each drive went and whether it was closed."""

    def __init__(self, values: Iterable[T]) -> None:
        self.values = tuple(values)
        self.produced: list[T] = []
        self.drives = 0
        self.finished = 0
        self.closed = 0

    def __call__(self) -> Iterator[T]:
        self.drives += 1
        try:
            for value in self.values:
                self.produced.append(value)
                yield value
            self.finished += 1
        finally:
            self.closed += 1


@pytest.fixture
def tracked() -> Callable[[Iterable[int]], TrackedSource[int]]:
    return TrackedSource


@pytest.fixture
def s_seq() -> ps.Seq[int]:
    return ps.Seq.from_(S)


@pytest.fixture
def restore_config() -> Iterator[ps.Config]:
    previous = ps.get_config()
    yield previous
    ps.set_config(
        repr_max_items=previous.repr_max_items,
        repr_ellipsis=previous.repr_ellipsis,
    )
