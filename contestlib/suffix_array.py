"""Suffix arrays with LCP queries, and the mirrored prefix arrays."""

from __future__ import annotations

from itertools import pairwise
from typing import Any, Callable, List, Sequence, Tuple

from contestlib.rmq import RangeMinQuery


def _as_ints(s: Sequence[Any]) -> List[int]:
    return [ord(x) if isinstance(x, str) else int(x) for x in s]


def _build_sa(s: List[int]) -> List[int]:
    """Suffix order of ``s`` including the empty suffix, which comes first."""
    n = len(s)
    rank = list(s) + [-1]
    sa = list(range(n + 1))
    k = 1
    while True:
        keys = [(rank[i], rank[i + k] if i + k <= n else -1) for i in range(n + 1)]
        sa.sort(key=keys.__getitem__)
        new_rank = [0] * (n + 1)
        for prev, cur in pairwise(sa):
            new_rank[cur] = new_rank[prev] + (keys[prev] != keys[cur])
        rank = new_rank
        if rank[sa[-1]] == n:
            return sa
        k <<= 1


def _build_lcp(s: List[int], sa: List[int], rank: List[int]) -> List[int]:
    n = len(s)
    lcp = [0] * n
    k = 0
    for i in range(n - 1):
        j = sa[rank[i] - 1]
        while k < n - max(i, j) and s[i + k] == s[j + k]:
            k += 1
        lcp[rank[i] - 1] = k
        if k:
            k -= 1
    return lcp


class SuffixArray:
    """Suffix array of a sequence of integers in ``[0, sigma)``.

    ``sa`` has ``n + 1`` entries and starts with the empty suffix ``n``;
    ``rank`` is its inverse and ``lcp[i]`` is the longest common prefix of
    the suffixes ``sa[i]`` and ``sa[i+1]``.
    """

    def __init__(self, s: Sequence[int], sigma: int) -> None:
        values = list(s)
        if sigma < 0:
            raise ValueError("sigma must be non-negative")
        for x in values:
            if not 0 <= x < sigma:
                raise ValueError(f"value {x!r} outside [0, {sigma})")
        self.n = len(values)
        self.sa: List[int] = _build_sa(values)
        self.rank: List[int] = [0] * (self.n + 1)
        for pos, idx in enumerate(self.sa):
            self.rank[idx] = pos
        self.lcp: List[int] = _build_lcp(values, self.sa, self.rank)
        self._rmq = RangeMinQuery([(v, i + 1) for i, v in enumerate(self.lcp)])

    @classmethod
    def construct_raw(cls, s: Sequence[int], sigma: int) -> "SuffixArray":
        """Build from values already in ``[0, sigma)``."""
        return cls(s, sigma)

    @classmethod
    def map_and_construct(cls, s: Sequence[Any], f: Callable[[Any], int], sigma: int) -> "SuffixArray":
        """Build from ``f`` applied to every element; ``f`` must land in ``[0, sigma)``."""
        return cls([f(x) for x in s], sigma)

    @classmethod
    def sort_and_construct(cls, s: Sequence[Any]) -> "SuffixArray":
        """Compress the values by sorting them first; works for any ordered values."""
        vals = sorted(set(s))
        index = {v: i for i, v in enumerate(vals)}
        return cls([index[x] for x in s], len(vals))

    @classmethod
    def shift_and_construct(cls, s: Sequence[Any]) -> "SuffixArray":
        """Shift the values so that the smallest becomes 0."""
        values = _as_ints(s)
        if not values:
            return cls([], 0)
        lo, hi = min(values), max(values)
        return cls([x - lo for x in values], hi - lo + 1)

    @classmethod
    def bucket_and_construct(cls, s: Sequence[Any]) -> "SuffixArray":
        """Renumber only the values that occur, using buckets over their span."""
        values = _as_ints(s)
        if not values:
            return cls([], 0)
        lo, hi = min(values), max(values)
        used = [False] * (hi - lo + 1)
        for x in values:
            used[x - lo] = True
        numbering = [0] * len(used)
        sigma = 0
        for v, present in enumerate(used):
            if present:
                numbering[v] = sigma
                sigma += 1
        return cls([numbering[x - lo] for x in values], sigma)

    def get_lcp(self, a: int, b: int) -> int:
        """Length of the longest common prefix of the suffixes at ``a`` and ``b``."""
        if a == b:
            return self.n - a
        ra, rb = self.rank[a], self.rank[b]
        if ra > rb:
            ra, rb = rb, ra
        return self._rmq.query(ra, rb - 1)[0]

    def get_split(self, l: int, r: int) -> Tuple[int, int]:
        """Split of suffix-array positions ``[l, r)`` in the suffix tree.

        Returns ``(length, index)``: the smallest LCP in the range and the
        first position after which it occurs.
        """
        if r - l <= 1:
            raise ValueError("get_split needs a range of at least two suffixes")
        return self._rmq.query(l, r - 2)


class PrefixArray:
    """Sorted prefixes of a sequence, answering longest common suffix queries."""

    def __init__(self, s: Sequence[int], sigma: int) -> None:
        self._suffixes = SuffixArray(list(reversed(list(s))), sigma)

    @classmethod
    def construct_raw(cls, s: Sequence[int], sigma: int) -> "PrefixArray":
        """Build from values already in ``[0, sigma)``."""
        return cls(s, sigma)

    def get_lcs(self, a: int, b: int) -> int:
        """Longest common suffix of the prefixes of lengths ``a`` and ``b``."""
        n = self._suffixes.n
        return self._suffixes.get_lcp(n - a, n - b)