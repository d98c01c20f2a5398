"""Counting lattice points under a line and residues in a range."""

from __future__ import annotations


def lattice_cnt(a: int, b: int, c: int) -> int:
    """Number of integer solutions of ``a*x + b*y <= c`` with ``x, y >= 0``."""
    if a < 0 or b < 0:
        raise ValueError("a and b must be non-negative")
    if c < 0:
        return 0
    if a == 0 or b == 0:
        raise ValueError("a and b must be positive when c >= 0")
    if a > b:
        a, b = b, a
    ans = 0
    while c >= 0:
        k, l = divmod(b, a)
        f, rest = divmod(c, b)
        e, g = divmod(rest, a)
        ans += (f + 1) * (e + 1) + (f + 1) * f // 2 * k
        c = f * l - a + g
        b = a
        a = l
    return ans


def mod_count(a: int, m: int, c: int, n: int) -> int:
    """Count ``0 <= x < n`` with ``0 <= (a*x mod m) < c``, extended to any signs."""
    if m <= 0:
        raise ValueError("m must be positive")
    if n == 0:
        return 0
    a %= m
    extra_c, c = divmod(c, m)
    ans = extra_c * n
    extra_n, n = divmod(n, m)
    step = a + m
    if extra_n:
        top = step * (m - 1)
        ans += extra_n * (lattice_cnt(m, step, top) - lattice_cnt(m, step, top - c))
    if n:
        top = step * (n - 1)
        ans += lattice_cnt(m, step, top) - lattice_cnt(m, step, top - c)
    return ans


def mod_count_range(a: int, m: int, clo: int, chi: int, nlo: int, nhi: int) -> int:
    """Count pairs ``nlo <= x < nhi``, ``clo <= y < chi`` with ``a*x == y (mod m)``."""
    return (
        mod_count(a, m, chi, nhi)
        - mod_count(a, m, chi, nlo)
        - mod_count(a, m, clo, nhi)
        + mod_count(a, m, clo, nlo)
    )