from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ._format import seq_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Retrieve the active instance with `get_config()` and change it with `set_config()`.
    """

    repr_max_items: int = 10
    """How many elements `Seq` and `PairSeq` reprs preview before truncating."""
    repr_ellipsis: str = "..."
    """Marker appended to a truncated preview."""

    def __post_init__(self) -> None:
        if self.repr_max_items < 0:
            msg = f"repr_max_items must be non-negative, got {self.repr_max_items}"
            raise ValueError(msg)

    def iter_repr(self, name: str, preview: list[Any]) -> str:
        """Render a preview produced by driving at most `repr_max_items + 1` elements."""
        truncated = len(preview) > self.repr_max_items
        return seq_repr(
            name,
            preview[: self.repr_max_items],
            self.repr_ellipsis if truncated else "",
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.get_config().repr_max_items
    10

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active `Config` and return the new instance.

    Unknown field names raise `TypeError`.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> previous = ps.get_config()
    >>> _ = ps.set_config(repr_max_items=3)
    >>> ps.Seq.generate(0, 100)
    Seq(0, 1, 2, ...)
    >>> _ = ps.set_config(repr_max_items=previous.repr_max_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
