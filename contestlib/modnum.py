"""Modular integers, extended gcd helpers and congruence combination."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def mod_inv_in_range(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m`` for ``0 <= a < m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    x, y = a, m
    vx, vy = 1, 0
    while x:
        k = y // x
        y %= x
        vy -= k * vx
        x, y = y, x
        vx, vy = vy, vx
    if y != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return m + vy if vy < 0 else vy


@dataclass(frozen=True)
class ExtendedGcdResult:
    """gcd(a, b) together with coefficients so that a*coeff_a + b*coeff_b == gcd."""

    gcd: int
    coeff_a: int
    coeff_b: int


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """Extended Euclidean algorithm."""
    x, y = a, b
    ax, ay = 1, 0
    bx, by = 0, 1
    while x:
        k = _tdiv(y, x)
        y -= k * x
        ay -= k * ax
        by -= k * bx
        x, y = y, x
        ax, ay = ay, ax
        bx, by = by, bx
    return ExtendedGcdResult(y, ay, by)


def mod_inv(a: int, m: int) -> int:
    """Inverse of any integer ``a`` modulo a positive ``m``."""
    return mod_inv_in_range(a % m, m)


class ModNum:
    """An integer modulo ``MOD``; concrete types come from :func:`modnum_type`."""

    __slots__ = ("_v",)
    MOD: int = 0

    def __init__(self, value: int = 0) -> None:
        mod = type(self).MOD
        if mod <= 0:
            raise TypeError("ModNum needs a modulus; create a type with modnum_type(mod)")
        if isinstance(value, ModNum):
            value = value._v
        self._v = int(value) % mod

    @classmethod
    def _raw(cls, v: int) -> "ModNum":
        obj = object.__new__(cls)
        obj._v = v
        return obj

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other._v
        if isinstance(other, ModNum):
            raise TypeError("cannot mix numbers with different moduli")
        if isinstance(other, int):
            return other % self.MOD
        return None

    def __int__(self) -> int:
        return self._v

    def __bool__(self) -> bool:
        return self._v != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._v})"

    def __str__(self) -> str:
        return str(self._v)

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._v == o

    def __hash__(self) -> int:
        return hash((self.MOD, self._v))

    def inv(self) -> "ModNum":
        """Multiplicative inverse; raises ValueError if there is none."""
        return self._raw(mod_inv_in_range(self._v, self.MOD))

    def neg(self) -> "ModNum":
        """Additive inverse."""
        return self._raw(self.MOD - self._v if self._v else 0)

    def __neg__(self) -> "ModNum":
        return self.neg()

    def __pos__(self) -> "ModNum":
        return self._raw(self._v)

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw((self._v + o) % self.MOD)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw((self._v - o) % self.MOD)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw((o - self._v) % self.MOD)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw(self._v * o % self.MOD)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw(self._v * mod_inv_in_range(o, self.MOD) % self.MOD)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._raw(o * mod_inv_in_range(self._v, self.MOD) % self.MOD)

    def __pow__(self, exponent: int) -> "ModNum":
        if exponent < 0:
            return self.inv() ** -exponent
        return self._raw(pow(self._v, exponent, self.MOD))


@lru_cache(maxsize=None)
def modnum_type(mod: int) -> type:
    """Return the ModNum subclass for the given positive modulus."""
    if mod <= 0:
        raise ValueError("modulus must be positive")

    class _ModNum(ModNum):
        __slots__ = ()
        MOD = mod

    _ModNum.__name__ = _ModNum.__qualname__ = f"ModNum{mod}"
    return _ModNum


def power(a, b: int):
    """``a`` raised to a non-negative integer power by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = type(a)(1)
    while b:
        if b & 1:
            result *= a
        b >>= 1
        a *= a
    return result


class PairNum:
    """Component-wise pair of two numbers, e.g. for hashing with two moduli."""

    __slots__ = ("u", "v")

    def __init__(self, u=0, v=None) -> None:
        self.u = u
        self.v = u if v is None else v

    @staticmethod
    def _coerce(other):
        if isinstance(other, PairNum):
            return other
        if isinstance(other, int):
            return PairNum(other)
        return None

    def __repr__(self) -> str:
        return f"PairNum({self.u!r}, {self.v!r})"

    def __str__(self) -> str:
        return f"({self.u}, {self.v})"

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.u == o.u and self.v == o.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def inv(self) -> "PairNum":
        return PairNum(self.u.inv(), self.v.inv())

    def neg(self) -> "PairNum":
        return PairNum(self.u.neg(), self.v.neg())

    def __neg__(self) -> "PairNum":
        return PairNum(-self.u, -self.v)

    def __pos__(self) -> "PairNum":
        return PairNum(+self.u, +self.v)

    def _binary(self, other, op):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return PairNum(op(self.u, o.u), op(self.v, o.v))

    def __add__(self, other):
        return self._binary(other, lambda x, y: x + y)

    def __radd__(self, other):
        return self._binary(other, lambda x, y: y + x)

    def __sub__(self, other):
        return self._binary(other, lambda x, y: x - y)

    def __rsub__(self, other):
        return self._binary(other, lambda x, y: y - x)

    def __mul__(self, other):
        return self._binary(other, lambda x, y: x * y)

    def __rmul__(self, other):
        return self._binary(other, lambda x, y: y * x)

    def __truediv__(self, other):
        return self._binary(other, lambda x, y: x / y)

    def __rtruediv__(self, other):
        return self._binary(other, lambda x, y: y / x)


@dataclass(frozen=True)
class ModConstraint:
    """The congruence ``x == v (mod mod)``; ``&`` combines two of them."""

    v: int
    mod: int

    def __and__(self, other: "ModConstraint") -> "ModConstraint":
        a, b = self, other
        if a.mod < b.mod:
            a, b = b, a
        if b.mod == 1:
            return a
        egcd = extended_gcd(a.mod, b.mod)
        g = egcd.gcd
        if a.v % g != b.v % g:
            raise ValueError("constraints are inconsistent")
        step = b.mod // g
        extra = (b.v - a.v % b.mod) // g
        extra = extra * egcd.coeff_a % step
        return ModConstraint(a.v + extra * a.mod, a.mod * step)