"""Fast polynomial multiplication and power series inversion.

Three multipliers are provided:

* ``fft_multiply``: number-theoretic transform for ModNum values whose
  modulus has roots of unity of the needed order (e.g. 998244353), or a
  complex FFT for plain numbers.
* ``fft_double_multiply``: one complex FFT pass for real inputs, returning
  floats.
* ``fft_mod_multiply``: arbitrary-modulus multiplication of ModNum values by
  splitting them into 15-bit halves and using floating point FFTs.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Callable, List, Sequence, Tuple

from contestlib.modnum import ModNum, mod_inv_in_range

Multiplier = Callable[[Sequence, Sequence], list]

_LOW15 = (1 << 15) - 1


def next_pow2(s: int) -> int:
    """Smallest power of two that is at least ``s`` (1 for ``s <= 1``)."""
    return 1 << ((s - 1).bit_length() if s > 1 else 0)


def _bit_reverse(a: list) -> None:
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


@lru_cache(maxsize=None)
def _primitive_root(mod: int) -> int:
    if mod == 2:
        return 1
    if mod < 2 or pow(2, mod - 1, mod) != 1:
        raise ValueError(f"modulus {mod} is not prime")
    phi = mod - 1
    factors = []
    rest = phi
    d = 2
    while d * d <= rest:
        if rest % d == 0:
            factors.append(d)
            while rest % d == 0:
                rest //= d
        d += 1
    if rest > 1:
        factors.append(rest)
    for g in range(2, mod):
        if all(pow(g, phi // q, mod) != 1 for q in factors):
            return g
    raise ValueError(f"modulus {mod} has no primitive root")


@lru_cache(maxsize=None)
def _ntt_roots(mod: int, n: int) -> Tuple[int, ...]:
    if n > 1 and (mod - 1) % n:
        raise ValueError(f"modulus {mod} has no root of unity of order {n}")
    g = _primitive_root(mod)
    rt = [1] * max(n, 2)
    k = 1
    while k < n:
        z = pow(g, (mod - 1) // (2 * k), mod)
        cur = 1
        for j in range(k):
            rt[k + j] = cur
            cur = cur * z % mod
        k *= 2
    return tuple(rt)


@lru_cache(maxsize=None)
def _complex_roots(n: int) -> Tuple[complex, ...]:
    rt = [1 + 0j] * max(n, 2)
    k = 1
    while k < n:
        for j in range(k):
            angle = math.pi * j / k
            rt[k + j] = complex(math.cos(angle), math.sin(angle))
        k *= 2
    return tuple(rt)


def _ntt(a: List[int], mod: int) -> None:
    n = len(a)
    _bit_reverse(a)
    rt = _ntt_roots(mod, n)
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                t = rt[j + k] * a[i + j + k] % mod
                u = a[i + j]
                a[i + j + k] = (u - t) % mod
                a[i + j] = (u + t) % mod
        k *= 2


def _fft(a: List[complex]) -> None:
    n = len(a)
    _bit_reverse(a)
    rt = _complex_roots(n)
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                t = rt[j + k] * a[i + j + k]
                u = a[i + j]
                a[i + j + k] = u - t
                a[i + j] = u + t
        k *= 2


def _convolve_ntt(a: List[int], b: List[int], mod: int) -> List[int]:
    s = len(a) + len(b) - 1
    n = next_pow2(s)
    fa = a + [0] * (n - len(a))
    fb = b + [0] * (n - len(b))
    _ntt(fa, mod)
    _ntt(fb, mod)
    d = mod_inv_in_range(n % mod, mod)
    fa = [x * y % mod * d % mod for x, y in zip(fa, fb)]
    fa[1:] = fa[:0:-1]
    _ntt(fa, mod)
    return fa[:s]


def _convolve_complex(a: List[complex], b: List[complex]) -> List[complex]:
    s = len(a) + len(b) - 1
    n = next_pow2(s)
    fa = a + [0j] * (n - len(a))
    fb = b + [0j] * (n - len(b))
    _fft(fa)
    _fft(fb)
    fa = [x * y / n for x, y in zip(fa, fb)]
    fa[1:] = fa[:0:-1]
    _fft(fa)
    return fa[:s]


def _modnum_class(a: list, b: list):
    return next((type(x) for x in (a[0], b[0]) if isinstance(x, ModNum)), None)


def _inverse_of(x):
    return x.inv() if isinstance(x, ModNum) else 1 / x


def fft_multiply(a: Sequence, b: Sequence) -> list:
    """Product of two polynomials by FFT.

    ModNum coefficients use a number-theoretic transform, which needs the
    modulus to have roots of unity of the padded length (ValueError otherwise).
    Other coefficients are treated as complex numbers.
    """
    a = list(a)
    b = list(b)
    if not a or not b:
        return []
    cls = _modnum_class(a, b)
    if cls is not None:
        mod = cls.MOD
        res = _convolve_ntt([int(x) % mod for x in a], [int(x) % mod for x in b], mod)
        return [cls(v) for v in res]
    return _convolve_complex([complex(x) for x in a], [complex(x) for x in b])


def fft_square(a: Sequence) -> list:
    """Square of a polynomial with :func:`fft_multiply`."""
    return fft_multiply(a, a)


def fft_double_multiply(a: Sequence, b: Sequence) -> List[float]:
    """Product of two real polynomials with a single complex transform pair."""
    a = list(a)
    b = list(b)
    if not a or not b:
        return []
    s = len(a) + len(b) - 1
    n = next_pow2(s)
    fa = [0j] * n
    for i, x in enumerate(a):
        fa[i] = complex(x, 0)
    for i, y in enumerate(b):
        fa[i] = complex(fa[i].real, y)
    _fft(fa)
    fa = [x * x for x in fa]
    mask = n - 1
    fb = [fa[(n - i) & mask] - fa[i].conjugate() for i in range(n)]
    _fft(fb)
    return [fb[i].imag / (4 * n) for i in range(s)]


def fft_double_square(a: Sequence) -> List[float]:
    """Square of a real polynomial with :func:`fft_double_multiply`."""
    return fft_double_multiply(a, a)


def fft_mod_multiply(a: Sequence, b: Sequence) -> list:
    """Product of ModNum polynomials for any modulus below about 2**30."""
    a = list(a)
    b = list(b)
    if not a or not b:
        return []
    cls = _modnum_class(a, b)
    if cls is None:
        raise TypeError("fft_mod_multiply needs ModNum coefficients")
    mod = cls.MOD
    s = len(a) + len(b) - 1
    n = next_pow2(s)

    def split(values: list) -> List[complex]:
        out = [complex(v & _LOW15, v >> 15) for v in (int(x) % mod for x in values)]
        return out + [0j] * (n - len(out))

    fa = split(a)
    fb = split(b)
    _fft(fa)
    _fft(fb)
    r0 = 0.5 / n
    mask = n - 1
    for i in range(n // 2 + 1):
        j = (n - i) & mask
        g0 = (fb[i] + fb[j].conjugate()) * r0
        g1 = (fb[i] - fb[j].conjugate()) * r0
        g1 = complex(g1.imag, -g1.real)
        if j != i:
            fa[i], fa[j] = fa[j], fa[i]
            fb[j] = fa[j] * g1
            fa[j] = fa[j] * g0
        fb[i] = fa[i] * g1.conjugate()
        fa[i] = fa[i] * g0.conjugate()
    _fft(fa)
    _fft(fb)
    res = []
    for x, y in zip(fa[:s], fb[:s]):
        v = (
            int(x.real + 0.5)
            + (int(x.imag + 0.5) % mod << 15)
            + (int(y.real + 0.5) % mod << 15)
            + (int(y.imag + 0.5) % mod << 30)
        )
        res.append(cls(v))
    return res


def fft_mod_square(a: Sequence) -> list:
    """Square of a ModNum polynomial with :func:`fft_mod_multiply`."""
    return fft_mod_multiply(a, a)


def series_inverse(a: Sequence, multiply: Multiplier) -> list:
    """First ``len(a)`` terms of ``1 / a`` by Newton iteration with ``multiply``.

    The constant term must be invertible.
    """
    a = list(a)
    size = len(a)
    if not size:
        return []
    zero = a[0] - a[0]
    b = [_inverse_of(a[0])]
    n = 1
    while n < size:
        nn = min(size, 2 * n)
        sq = list(multiply(b, b))
        sq = (sq + [zero] * nn)[:nn]
        prod = multiply(sq, a[:nn])
        b.extend(-x for x in prod[n:nn])
        n = nn
    return b


def fft_inverse(a: Sequence) -> list:
    """Power series inverse using :func:`fft_multiply`."""
    return series_inverse(a, fft_multiply)


def fft_double_inverse(a: Sequence) -> List[float]:
    """Power series inverse of real coefficients using :func:`fft_double_multiply`."""
    return series_inverse([float(x) for x in a], fft_double_multiply)


def fft_mod_inverse(a: Sequence) -> list:
    """Power series inverse of ModNum coefficients using :func:`fft_mod_multiply`."""
    return series_inverse(a, fft_mod_multiply)