"""Binary indexed tree index walks over a flat array."""

from __future__ import annotations

from typing import Any, Iterator, List


class BinaryIndexedTree:
    """A binary indexed tree over ``data``.

    ``prefix(i)`` and ``suffix(i)`` yield indices into ``data`` such that
    ``suffix(i)`` and ``prefix(j)`` share exactly one index when ``i < j`` and
    none otherwise; each walk has at most about ``log2(len)`` steps.

    Point update / prefix query: update ``data`` at ``suffix(point)``, sum over
    ``prefix(end)``. Prefix update / point query: update over ``prefix(end)``,
    read over ``suffix(point)``.
    """

    def __init__(self, n: int = 0, fill: Any = 0) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.data: List[Any] = [fill] * n

    def __len__(self) -> int:
        return len(self.data)

    def _check(self, a: int) -> None:
        if not 0 <= a <= len(self.data):
            raise ValueError(f"index {a} outside [0, {len(self.data)}]")

    def prefix(self, a: int) -> Iterator[int]:
        """Indices covering the prefix ``[0, a)``."""
        self._check(a)

        def walk(a: int) -> Iterator[int]:
            while a > 0:
                yield a - 1
                a &= a - 1

        return walk(a)

    def suffix(self, a: int) -> Iterator[int]:
        """Indices of all cells whose range contains position ``a``."""
        self._check(a)
        n = len(self.data)

        def walk(a: int) -> Iterator[int]:
            while a < n:
                yield a
                a |= a + 1

        return walk(a)