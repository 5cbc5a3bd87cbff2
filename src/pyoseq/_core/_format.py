from collections.abc import Sequence
from typing import Any


def seq_repr(name: str, items: Sequence[Any], suffix: str = "") -> str:
    parts = [repr(item) for item in items]
    if suffix:
        parts.append(suffix)
    return f"{name}({', '.join(parts)})"
