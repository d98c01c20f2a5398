"""Jacobi symbol via the binary gcd method."""

from __future__ import annotations


def is_qr_jacobi(n: int, m: int) -> bool:
    """Whether the Jacobi symbol (n / m) equals 1.

    ``m`` must be positive and odd and ``n`` coprime to it.
    """
    if m <= 0 or not m & 1:
        raise ValueError("m must be positive and odd")
    result = True
    if n < 0:
        if m & 2:
            result = not result
        n = -n
    while m > 1:
        if n <= 0:
            raise ValueError("n and m must be coprime")
        t = (n & -n).bit_length() - 1
        n >>= t
        if t & 1 and (m & 7) in (3, 5):
            result = not result
        if n < m:
            if n & 2 and m & 2:
                result = not result
            n, m = m, n
        n -= m
    return result