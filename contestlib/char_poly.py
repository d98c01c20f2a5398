"""Characteristic polynomials over a field and over GF(2)."""

from __future__ import annotations

from typing import List, Sequence


def char_poly(a: Sequence[Sequence]) -> list:
    """Coefficients of ``det(x*I - A)``, lowest degree first.

    Entries must support field arithmetic (e.g. ModNum or Fraction). Not
    numerically stable for floating point.
    """
    rows = [list(row) for row in a]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    if n == 0:
        return [1]
    zero = rows[0][0] - rows[0][0]
    one = zero + 1

    res = [one]
    deg = 0
    for i in range(n):
        ai = rows[i]
        c = i + 1
        while c < n and ai[c] == zero:
            c += 1
        if c == n:
            res.extend([zero] * (i + 2 - len(res)))
            for x in range(deg, -1, -1):
                v = res[x]
                for y, z in enumerate(range(i, deg - 1, -1), start=x + 1):
                    res[y] -= v * ai[z]
            deg = i + 1
            continue

        vc = ai[c]
        ivc = one / vc
        ai[c] = ai[i + 1]
        ai[i + 1] = zero

        rows[i + 1], rows[c] = rows[c], rows[i + 1]
        ai1 = rows[i + 1]
        for k in range(deg, n):
            ai1[k] *= vc

        for k in range(i + 1, n):
            ak = rows[k]
            tmp = ak[c]
            ak[c] = ak[i + 1]
            ak[i + 1] = tmp * ivc
            v = ak[i + 1]
            for j in range(deg, n):
                ak[j] -= v * ai[j]
            if k > i + 1:
                v = ai[k]
                for j in range(deg, n):
                    ai1[j] += v * ak[j]

        for k in range(deg, i + 1):
            ai1[k + 1] += ai[k]

    res.reverse()
    return res


def _swap_bits(value: int, p: int, q: int) -> int:
    if (value >> p ^ value >> q) & 1:
        value ^= (1 << p) | (1 << q)
    return value


def char_poly_f2(rows: Sequence[int]) -> int:
    """Characteristic polynomial of a matrix over GF(2).

    Row ``i`` is an integer whose bit ``j`` is entry ``(i, j)``. The result has
    bit ``k`` set when the coefficient of ``x**k`` is 1.
    """
    mat: List[int] = list(rows)
    n = len(mat)
    if any(not 0 <= r < (1 << n) for r in mat):
        raise ValueError("rows must be non-negative and have no bits beyond the matrix width")
    ans = 1
    deg = 0
    for i in range(n):
        rest = mat[i] >> (i + 1)
        j = i + (rest & -rest).bit_length() if rest else n
        if j >= n:
            nans = 0
            while deg <= i:
                if mat[i] >> deg & 1:
                    nans ^= ans
                ans <<= 1
                deg += 1
            ans ^= nans
            continue
        if j != i + 1:
            mat[j], mat[i + 1] = mat[i + 1], mat[j]
            mat = [_swap_bits(r, j, i + 1) for r in mat]
        msk = mat[i] ^ (1 << (i + 1))
        for k in range(n):
            if msk >> k & 1:
                mat[i + 1] ^= mat[k]
        bit = 1 << (i + 1)
        mat = [r ^ msk if r & bit else r for r in mat]
    return ans