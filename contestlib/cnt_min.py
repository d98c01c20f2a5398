"""A monoid holding a minimum together with how often it occurs."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

from contestlib.comparators import reverse_comparator


class CntMin:
    """Minimum value and its multiplicity; ``+`` merges two of them.

    An instance built without a value has count 0 and acts as the identity.
    """

    __slots__ = ("v", "cnt", "less")

    def __init__(
        self,
        v: Any = None,
        cnt: Optional[int] = None,
        less: Callable[[Any, Any], bool] = operator.lt,
    ) -> None:
        self.v = v
        self.cnt = (0 if v is None else 1) if cnt is None else cnt
        self.less = less

    def __add__(self, other: "CntMin") -> "CntMin":
        if not isinstance(other, CntMin):
            return NotImplemented
        if not other.cnt:
            return self
        if not self.cnt:
            return other
        if self.less(self.v, other.v):
            return self
        if self.less(other.v, self.v):
            return other
        return CntMin(self.v, self.cnt + other.cnt, self.less)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CntMin):
            return NotImplemented
        return (self.v, self.cnt) == (other.v, other.cnt)

    def __hash__(self) -> int:
        return hash((self.v, self.cnt))

    def __repr__(self) -> str:
        return f"CntMin(v={self.v!r}, cnt={self.cnt!r})"


def cnt_max(v: Any = None, cnt: Optional[int] = None) -> CntMin:
    """A CntMin that keeps the maximum instead of the minimum."""
    return CntMin(v, cnt, reverse_comparator(operator.lt))