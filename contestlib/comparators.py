"""Comparator helpers."""

from __future__ import annotations

from typing import Any, Callable

Comparator = Callable[[Any, Any], bool]


def reverse_comparator(f: Comparator) -> Comparator:
    """Wrap a strict-less comparator so that it orders the other way round."""

    def reversed_less(a: Any, b: Any) -> bool:
        return f(b, a)

    return reversed_less