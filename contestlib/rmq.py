"""Range minimum queries with O(1) query time after O(n) preprocessing."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, Sequence

_BUCKET_LOG = 5
_BUCKET = 1 << _BUCKET_LOG
_LOW = _BUCKET - 1


def _ctz(x: int) -> int:
    return (x & -x).bit_length() - 1


class RangeMinQuery:
    """Minimum over inclusive ranges ``[l, r]`` under a strict-less comparator."""

    def __init__(self, data: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._less = less
        self._data: List[Any] = list(data)
        data = self._data
        n = len(data)
        self._n = n

        # Per-bucket monotone stacks, encoded as bitmasks of surviving positions.
        mask = [0] * n
        for i in range(n):
            if i & _LOW:
                m = mask[i - 1]
                base = i & ~_LOW
                while m and not less(data[base + m.bit_length() - 1], data[i]):
                    m ^= 1 << (m.bit_length() - 1)
                mask[i] = m | (1 << (i & _LOW))
            else:
                mask[i] = 1
        self._mask = mask

        pref = list(data)
        for i in range(n):
            if i & _LOW:
                pref[i] = self._pick(pref[i], pref[i - 1])
        self._pref = pref

        suff = list(data)
        for i in range(n - 1, -1, -1):
            if i + 1 < n and (i + 1) & _LOW:
                suff[i] = self._pick(suff[i], suff[i + 1])
        self._suff = suff

        buckets = n >> _BUCKET_LOG
        level0 = []
        for b in range(buckets):
            best = data[b * _BUCKET]
            for v in data[b * _BUCKET + 1:(b + 1) * _BUCKET]:
                best = self._pick(best, v)
            level0.append(best)
        table = [level0] if buckets else []
        for lvl in range(1, buckets.bit_length()):
            prev = table[-1]
            half = 1 << (lvl - 1)
            table.append(
                [self._min(prev[i], prev[i + half]) for i in range(buckets - (1 << lvl) + 1)]
            )
        self._table = table

    def _min(self, a: Any, b: Any) -> Any:
        return a if self._less(a, b) else b

    def _pick(self, a: Any, b: Any) -> Any:
        """Keep ``a`` unless ``b`` is strictly smaller."""
        return b if self._less(b, a) else a

    def query(self, l: int, r: int) -> Any:
        """Minimum of ``data[l..r]`` inclusive."""
        if l > r:
            raise ValueError("query needs l <= r")
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self._n})")
        bucket_l = l >> _BUCKET_LOG
        bucket_r = r >> _BUCKET_LOG
        if bucket_l == bucket_r:
            msk = self._mask[r] & ~((1 << (l & _LOW)) - 1)
            return self._data[(l & ~_LOW) + _ctz(msk)]
        ans = self._min(self._suff[l], self._pref[r])
        bucket_l += 1
        if bucket_l < bucket_r:
            level = (bucket_r - bucket_l).bit_length() - 1
            row = self._table[level]
            ans = self._pick(ans, row[bucket_l])
            ans = self._pick(ans, row[bucket_r - (1 << level)])
        return ans


class RangeMaxQuery(RangeMinQuery):
    """Maximum over inclusive ranges ``[l, r]``."""

    def __init__(self, data: Sequence[Any]) -> None:
        super().__init__(data, operator.gt)