"""Manacher's algorithm for longest palindromes around every centre."""

from __future__ import annotations

from typing import List, Sequence


def manacher(s: Sequence) -> List[int]:
    """Longest palindrome length around each of the ``2*len(s)+1`` centres.

    For centre ``i``, ``res[i] % 2 == i % 2`` and ``s[(i-res[i])//2 : (i+res[i])//2]``
    is a palindrome. Odd ``i`` are odd palindromes, even ``i`` even ones.
    """
    n = len(s)
    res = [0] * (2 * n + 1)
    j = -1
    r = 0
    for i in range(1, 2 * n):
        if i > r:
            r = i + 1
            res[i] = 1
        else:
            res[i] = res[j]
        if i + res[i] >= r:
            b = r >> 1
            a = i - b
            while a > 0 and b < n and s[a - 1] == s[b]:
                a -= 1
                b += 1
            res[i] = b - a
            j = i
            r = b << 1
        j -= 1
    return res


def manacher_odd(s: Sequence) -> List[int]:
    """Radius of the longest odd palindrome centred on each position.

    ``s[i-res[i] : i+res[i]+1]`` is a palindrome of length ``2*res[i]+1``.
    """
    n = len(s)
    res = [0] * n
    j = -1
    r = 0
    for i in range(1, n):
        if i > r:
            r = i
            res[i] = 0
        else:
            res[i] = res[j]
        if i + res[i] >= r:
            b = r
            a = 2 * i - r
            while a - 1 >= 0 and b + 1 < n and s[a - 1] == s[b + 1]:
                a -= 1
                b += 1
            res[i] = b - i
            j = i
            r = b
        j -= 1
    return res