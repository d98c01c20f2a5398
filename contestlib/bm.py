"""Berlekamp-Massey and fast evaluation of linear recurrences."""

from __future__ import annotations


def berlekamp_massey(s):
    """Shortest recurrence ``s[i] = sum(tr[j] * s[i-1-j])`` generating ``s``.

    The elements must support field arithmetic (e.g. ModNum or Fraction).
    """
    s = list(s)
    n = len(s)
    if n == 0:
        return []
    zero = s[0] - s[0]
    one = zero + 1
    c = [one] + [zero] * (n - 1)
    b_poly = list(c)
    length = 0
    m = 0
    b = one
    for i, si in enumerate(s):
        m += 1
        d = sum(
            (cj * sv for cj, sv in zip(c[1:length + 1], reversed(s[i - length:i]))),
            si,
        )
        if d == 0:
            continue
        saved = list(c)
        coef = d / b
        for j in range(m, n):
            c[j] -= coef * b_poly[j - m]
        if 2 * length > i:
            continue
        length, b_poly, b, m = i + 1 - length, saved, d, 0
    return [-x for x in c[1:length + 1]]


def linear_rec(s, tr, k: int):
    """The k-th term of the sequence with initial terms ``s`` and recurrence ``tr``."""
    n = len(tr)
    if len(s) < n:
        raise ValueError("need at least as many initial terms as recurrence coefficients")
    if k < 0:
        raise ValueError("k must be non-negative")
    if n == 0:
        return 0
    zero = tr[0] - tr[0]
    one = zero + 1

    def combine(a, b, shift):
        res = [zero] * (len(a) + len(b))
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                res[i + j + shift] += ai * bj
        for i in range(len(res) - 1, n - 1, -1):
            ri = res[i]
            for j, tj in enumerate(tr):
                res[i - 1 - j] += ri * tj
        return res[:n]

    pol = [one] + [zero] * (n - 1)
    for bit in reversed(range(k.bit_length())):
        pol = combine(pol, pol, (k >> bit) & 1)
    return sum((p * x for p, x in zip(pol, s)), zero)