"""Nim multiplication of 64-bit nimbers."""

from __future__ import annotations

from functools import lru_cache

_MASK = (1 << 64) - 1


class NimProduct:
    """Precomputed table of products of single bits, callable as ``prod(x, y)``."""

    def __init__(self) -> None:
        table = [[0] * 64 for _ in range(64)]
        for i in range(64):
            for j in range(64):
                common = i & j
                if common == 0:
                    table[i][j] = 1 << (i | j)
                else:
                    a = common & -common
                    table[i][j] = table[i ^ a][j] ^ table[(i ^ a) | (a - 1)][(j ^ a) | (i & (a - 1))]
        self._bit_prod = table

    def __call__(self, x: int, y: int) -> int:
        if not (0 <= x <= _MASK and 0 <= y <= _MASK):
            raise ValueError("nimbers must fit in 64 unsigned bits")
        y_bits = [j for j in range(y.bit_length()) if y >> j & 1]
        res = 0
        for i in range(x.bit_length()):
            if x >> i & 1:
                row = self._bit_prod[i]
                for j in y_bits:
                    res ^= row[j]
        return res


@lru_cache(maxsize=1)
def _default() -> NimProduct:
    return NimProduct()


def nim_prod(x: int, y: int) -> int:
    """Nim product of two 64-bit nimbers using a shared table."""
    return _default()(x, y)