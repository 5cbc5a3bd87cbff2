from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Presence flag carrying a value: either `Some(value)` or `NONE`.

    Every search or seedless reduction of a `Seq` reports absence through this type instead of raising.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option holds a value.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([1, 2]).find(lambda x: x > 1).is_some()
        True
        >>> ps.Seq.from_([1, 2]).find(lambda x: x > 5).is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option holds no value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("car").unwrap()
        'car'
        >>> ps.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained value, or raises with `msg` if there is none.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.from_([3, 1, 2]).min().expect("no minimum")
        1
        >>> ps.Seq[int].empty().min().expect("no minimum")
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: no minimum (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value or `default`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some(4).unwrap_or(0)
        4
        >>> ps.NONE.unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained value or computes one from `f`."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply `f` to a contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("Hello, World!").map(len)
        Some(13)
        >>> ps.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Call `f` with the contained value, otherwise return `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if it satisfies `predicate`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some(4).filter(lambda x: x % 2 == 0)
        Some(4)
        >>> ps.Some(3).filter(lambda x: x % 2 == 0)
        NONE

        ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
