"""Truncated formal power series and online (relaxed) multiplication."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Sequence

from contestlib.fft import fft_multiply, series_inverse
from contestlib.modnum import ModNum, power

Multiplier = Callable[[Sequence, Sequence], list]


def _inverse_of(x):
    return x.inv() if isinstance(x, ModNum) else 1 / x


class PowerSeries:
    """Coefficients of a power series truncated to ``len(self)`` terms.

    Binary operations keep the shorter of the two lengths. ``multiply`` is the
    polynomial multiplier used for products and inverses.
    """

    def __init__(self, coeffs: Iterable = (), multiply: Multiplier = fft_multiply) -> None:
        self.coeffs: List[Any] = list(coeffs)
        self.multiply = multiply

    def _new(self, coeffs: Iterable) -> "PowerSeries":
        return PowerSeries(coeffs, self.multiply)

    def _zero(self):
        if self.coeffs:
            c = self.coeffs[0]
            return c - c
        return 0

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator:
        return iter(self.coeffs)

    def __getitem__(self, idx):
        return self.coeffs[idx]

    def __setitem__(self, idx, value) -> None:
        self.coeffs[idx] = value

    def __eq__(self, other) -> bool:
        if isinstance(other, PowerSeries):
            return self.coeffs == other.coeffs
        if isinstance(other, (list, tuple)):
            return self.coeffs == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PowerSeries({self.coeffs!r})"

    def degree(self) -> int:
        """Highest kept exponent, ``len(self) - 1``."""
        return len(self.coeffs) - 1

    def extend(self, size: int) -> None:
        """Pad with zeros up to ``size`` terms."""
        if size < len(self.coeffs):
            raise ValueError("extend cannot shorten the series")
        self.coeffs.extend([self._zero()] * (size - len(self.coeffs)))

    def shrink(self, size: int) -> None:
        """Truncate to ``size`` terms."""
        if size > len(self.coeffs):
            raise ValueError("shrink cannot lengthen the series")
        del self.coeffs[size:]

    def shift(self, n: int = 1) -> None:
        """Multiply by ``x**n`` in place, keeping the length."""
        if not 0 <= n <= len(self.coeffs):
            raise ValueError("shift amount out of range")
        self.coeffs = [self._zero()] * n + self.coeffs[: len(self.coeffs) - n]

    def unshift(self, n: int = 1) -> None:
        """Divide by ``x**n`` in place, padding the end with zeros."""
        if not 0 <= n <= len(self.coeffs):
            raise ValueError("shift amount out of range")
        self.coeffs = self.coeffs[n:] + [self._zero()] * n

    def _check_same_length(self, other: "PowerSeries") -> None:
        if len(self) != len(other):
            raise ValueError("in-place operations need series of equal length")

    def __add__(self, other):
        if not isinstance(other, PowerSeries):
            return NotImplemented
        return self._new(x + y for x, y in zip(self.coeffs, other.coeffs))

    def __iadd__(self, other):
        if not isinstance(other, PowerSeries):
            return NotImplemented
        self._check_same_length(other)
        self.coeffs = [x + y for x, y in zip(self.coeffs, other.coeffs)]
        return self

    def __sub__(self, other):
        if not isinstance(other, PowerSeries):
            return NotImplemented
        return self._new(x - y for x, y in zip(self.coeffs, other.coeffs))

    def __isub__(self, other):
        if not isinstance(other, PowerSeries):
            return NotImplemented
        self._check_same_length(other)
        self.coeffs = [x - y for x, y in zip(self.coeffs, other.coeffs)]
        return self

    def __mul__(self, other):
        if isinstance(other, PowerSeries):
            if not self.coeffs or not other.coeffs:
                return self._new([])
            prod = self.multiply(self.coeffs, other.coeffs)
            return self._new(prod[: min(len(self), len(other))])
        return self._new(x * other for x in self.coeffs)

    def __rmul__(self, other):
        if isinstance(other, PowerSeries):
            return NotImplemented
        return self._new(other * x for x in self.coeffs)

    def __imul__(self, other):
        result = self * other
        self.coeffs = result.coeffs
        return self

    def square(self) -> "PowerSeries":
        """``self * self`` truncated to the same length."""
        if not self.coeffs:
            return self._new([])
        return self._new(self.multiply(self.coeffs, self.coeffs)[: len(self)])

    def stretch(self, n: int) -> "PowerSeries":
        """Substitute ``x**n`` for ``x``, keeping the length."""
        if n <= 0:
            raise ValueError("stretch factor must be positive")
        res = [self._zero()] * len(self)
        for i, c in enumerate(self.coeffs[: (len(self) - 1) // n + 1] if self.coeffs else []):
            res[i * n] = c
        return self._new(res)

    def inverse(self) -> "PowerSeries":
        """Multiplicative inverse; the constant term must be invertible."""
        return self._new(series_inverse(self.coeffs, self.multiply))

    def deriv_shift(self) -> "PowerSeries":
        """``x * d/dx`` of the series."""
        return self._new(c * i for i, c in enumerate(self.coeffs))

    def integ_shift(self) -> "PowerSeries":
        """Inverse of :meth:`deriv_shift`; the constant term must be zero."""
        if not self.coeffs or self.coeffs[0] != 0:
            raise ValueError("integ_shift needs a zero constant term")
        rest = (c / i for i, c in enumerate(self.coeffs[1:], start=1))
        return self._new([self.coeffs[0], *rest])

    def deriv_shift_log(self) -> "PowerSeries":
        """``x * a' / a``."""
        return self.deriv_shift() * self.inverse()

    def log(self) -> "PowerSeries":
        """Logarithm; the constant term must be 1."""
        if not self.coeffs or self.coeffs[0] != 1:
            raise ValueError("log needs a constant term of 1")
        return self.deriv_shift_log().integ_shift()

    def exp(self) -> "PowerSeries":
        """Exponential; the constant term must be 0."""
        if not self.coeffs:
            raise ValueError("exp needs at least one term")
        if self.coeffs[0] != 0:
            raise ValueError("exp needs a zero constant term")
        r = self._new([self._zero() + 1])
        while len(r) < len(self):
            n_sz = min(2 * len(r), len(self))
            r.extend(n_sz)
            v = self._new(self.coeffs[:n_sz]) - r.log()
            v[0] += 1
            r = r * v
        return r

    def pow_monic(self, k: int) -> "PowerSeries":
        """``k``-th power of a series with constant term 1."""
        if not self.coeffs:
            return self._new([])
        if self.coeffs[0] != 1:
            raise ValueError("pow_monic needs a constant term of 1")
        return (self.log() * k).exp()

    def pow(self, k: int) -> "PowerSeries":
        """``k``-th power of the part after the leading zeros, scaled by the leading
        coefficient; the leading zeros are put back unchanged in number."""
        st = next((i for i, c in enumerate(self.coeffs) if c != 0), len(self.coeffs))
        if st == len(self.coeffs):
            return self._new(self.coeffs)
        r = self._new(self.coeffs[st:])
        lead = r[0]
        r *= _inverse_of(lead)
        r = r.pow_monic(k)
        r *= power(lead, k)
        return self._new([self._zero()] * st + r.coeffs)

    def to_newton_sums(self, deg: int) -> "PowerSeries":
        """Power sums of the reciprocal roots of a polynomial of degree ``deg``."""
        if not self.coeffs:
            raise ValueError("to_newton_sums needs at least one term")
        r = self.deriv_shift_log()
        return self._new([self._zero() + deg] + [-c for c in r.coeffs[1:]])

    def from_newton_sums(self, deg: int) -> "PowerSeries":
        """Polynomial (constant term 1) whose reciprocal roots have these power sums."""
        if not self.coeffs or self.coeffs[0] != deg:
            raise ValueError("the constant term must equal the degree")
        zero = self._zero()
        s = self._new([zero] + [-c for c in self.coeffs[1:]])
        return s.integ_shift().exp()

    def euler_transform(self) -> "PowerSeries":
        """``prod 1 / (1 - x**i) ** a[i]``."""
        n = len(self)
        r = self.deriv_shift()
        is_prime = [True] * n
        for p in range(2, n):
            if not is_prime[p]:
                continue
            for i in range(1, (n - 1) // p + 1):
                r[i * p] += r[i]
                is_prime[i * p] = False
        return r.integ_shift().exp()

    def inverse_euler_transform(self) -> "PowerSeries":
        """Inverse of :meth:`euler_transform`; the constant term must be 1."""
        n = len(self)
        r = self.log().deriv_shift()
        is_prime = [True] * n
        for p in range(2, n):
            if not is_prime[p]:
                continue
            for i in range((n - 1) // p, 0, -1):
                r[i * p] -= r[i]
                is_prime[i * p] = False
        return r.integ_shift()


def _add_into(res: list, start: int, values: Sequence, factor: int = 1) -> None:
    for k, v in enumerate(values):
        res[start + k] += factor * v if factor != 1 else v


class OnlineMultiplier:
    """Coefficients of ``f * g`` while ``f`` and ``g`` are revealed term by term.

    After the ``i``-th push, :meth:`back` returns the finished coefficient ``i``.
    """

    def __init__(self, n: int, multiply: Multiplier = fft_multiply, zero: Any = 0) -> None:
        if n < 0:
            raise ValueError("length must be non-negative")
        self.n = n
        self.i = 0
        self.f = [zero] * n
        self.g = [zero] * n
        self.res = [zero] * (2 * n + 1)
        self.multiply = multiply

    def peek(self):
        """The partially accumulated next coefficient."""
        return self.res[self.i]

    def push(self, v_f, v_g) -> None:
        """Reveal the next terms of ``f`` and ``g``."""
        i = self.i
        if i >= self.n:
            raise IndexError("all terms have already been pushed")
        f, g, res = self.f, self.g, self.res
        f[i] = v_f
        g[i] = v_g
        if i == 0:
            res[0] += v_f * v_g
        else:
            res[i] += v_f * g[0]
            res[i] += f[0] * v_g
            p = 1
            while (i & (p - 1)) == p - 1:
                lo1, lo2 = p, i + 1 - p
                _add_into(res, lo1 + lo2, self.multiply(f[lo1:lo1 + p], g[lo2:lo2 + p]))
                if i == 2 * p - 1:
                    break
                _add_into(res, lo1 + lo2, self.multiply(f[lo2:lo2 + p], g[lo1:lo1 + p]))
                p <<= 1
        self.i += 1

    def back(self):
        """The coefficient finished by the latest push."""
        if self.i == 0:
            raise IndexError("nothing has been pushed yet")
        return self.res[self.i - 1]


class OnlineSquarer:
    """Coefficients of ``f * f`` while ``f`` is revealed term by term."""

    def __init__(self, n: int, multiply: Multiplier = fft_multiply, zero: Any = 0) -> None:
        if n < 0:
            raise ValueError("length must be non-negative")
        self.n = n
        self.i = 0
        self.f = [zero] * n
        self.res = [zero] * (2 * n + 1)
        self.multiply = multiply

    def peek(self):
        """The partially accumulated next coefficient."""
        return self.res[self.i]

    def push(self, v_f) -> None:
        """Reveal the next term of ``f``."""
        i = self.i
        if i >= self.n:
            raise IndexError("all terms have already been pushed")
        f, res = self.f, self.res
        f[i] = v_f
        if i == 0:
            res[0] += v_f * v_f
        else:
            res[i] += 2 * v_f * f[0]
            p = 1
            while (i & (p - 1)) == p - 1:
                lo1, lo2 = p, i + 1 - p
                if i == 2 * p - 1:
                    part = f[lo1:lo1 + p]
                    _add_into(res, lo1 + lo2, self.multiply(part, part))
                    break
                _add_into(res, lo1 + lo2, self.multiply(f[lo1:lo1 + p], f[lo2:lo2 + p]), 2)
                p <<= 1
        self.i += 1

    def back(self):
        """The coefficient finished by the latest push."""
        if self.i == 0:
            raise IndexError("nothing has been pushed yet")
        return self.res[self.i - 1]