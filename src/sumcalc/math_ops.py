"""Addition helper."""

from __future__ import annotations

import numbers
from typing import Any


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"operand {name} must be a number, got {type(value).__name__}")


def add(a, b):
    _require_number("a", a)
    _require_number("b", b)
    return a + b


# Exported name for callers of sum(a, b).
sum = add
