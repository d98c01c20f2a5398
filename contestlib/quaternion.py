"""Hurwitz quaternions (integer or half-integer coordinates) with Euclidean division."""

from __future__ import annotations

from typing import NamedTuple, Tuple


class HurwitzQuaternion:
    """A Hurwitz quaternion stored with doubled coordinates ``s, x, y, z``.

    The constructor takes the ordinary (integer) coordinates; use
    :meth:`from_doubled` for half-integer values. Instances are immutable.
    """

    __slots__ = ("s", "x", "y", "z")

    def __init__(self, s: int = 0, x: int = 0, y: int = 0, z: int = 0) -> None:
        object.__setattr__(self, "s", 2 * s)
        object.__setattr__(self, "x", 2 * x)
        object.__setattr__(self, "y", 2 * y)
        object.__setattr__(self, "z", 2 * z)

    def __setattr__(self, name, value) -> None:
        raise AttributeError("HurwitzQuaternion is immutable")

    @classmethod
    def from_doubled(cls, s: int, x: int, y: int, z: int) -> "HurwitzQuaternion":
        """Build from doubled coordinates, which must all share the same parity."""
        if not ((s & 1) == (x & 1) == (y & 1) == (z & 1)):
            raise ValueError("doubled coordinates must all be even or all be odd")
        q = cls.__new__(cls)
        for name, value in zip(cls.__slots__, (s, x, y, z)):
            object.__setattr__(q, name, value)
        return q

    def __repr__(self) -> str:
        return f"HurwitzQuaternion.from_doubled({self.s}, {self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return f"{self.s / 2:g}{self.x / 2:+g}i{self.y / 2:+g}j{self.z / 2:+g}k"

    def __bool__(self) -> bool:
        return bool(self.s or self.x or self.y or self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HurwitzQuaternion):
            return NotImplemented
        return self.coords_doubled() == other.coords_doubled()

    def __hash__(self) -> int:
        return hash(self.coords_doubled())

    def _require_integral(self) -> None:
        if self.s & 1:
            raise ValueError("quaternion has half-integer coordinates")

    def real_doubled(self) -> int:
        """Twice the real part."""
        return self.s

    def real(self) -> int:
        """Real part; the coordinates must be integers."""
        self._require_integral()
        return self.s >> 1

    def imag_doubled(self) -> Tuple[int, int, int]:
        """Twice the imaginary parts."""
        return (self.x, self.y, self.z)

    def imag(self) -> Tuple[int, int, int]:
        """Imaginary parts; the coordinates must be integers."""
        self._require_integral()
        return (self.x >> 1, self.y >> 1, self.z >> 1)

    def coords_doubled(self) -> Tuple[int, int, int, int]:
        """All four doubled coordinates."""
        return (self.s, self.x, self.y, self.z)

    def coords(self) -> Tuple[int, int, int, int]:
        """All four coordinates; they must be integers."""
        self._require_integral()
        return (self.s >> 1, self.x >> 1, self.y >> 1, self.z >> 1)

    def norm(self) -> int:
        """Reduced norm ``s^2 + x^2 + y^2 + z^2`` of the actual coordinates."""
        return (self.s * self.s + self.x * self.x + self.y * self.y + self.z * self.z) >> 2

    def conj(self) -> "HurwitzQuaternion":
        """Quaternion conjugate."""
        return HurwitzQuaternion.from_doubled(self.s, -self.x, -self.y, -self.z)

    def __pos__(self) -> "HurwitzQuaternion":
        return self

    def __neg__(self) -> "HurwitzQuaternion":
        return HurwitzQuaternion.from_doubled(-self.s, -self.x, -self.y, -self.z)

    def __add__(self, o: "HurwitzQuaternion") -> "HurwitzQuaternion":
        if not isinstance(o, HurwitzQuaternion):
            return NotImplemented
        return HurwitzQuaternion.from_doubled(self.s + o.s, self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o: "HurwitzQuaternion") -> "HurwitzQuaternion":
        if not isinstance(o, HurwitzQuaternion):
            return NotImplemented
        return HurwitzQuaternion.from_doubled(self.s - o.s, self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other) -> "HurwitzQuaternion":
        if isinstance(other, HurwitzQuaternion):
            a, b = self, other
            return HurwitzQuaternion.from_doubled(
                (a.s * b.s - a.x * b.x - a.y * b.y - a.z * b.z) >> 1,
                (a.s * b.x + a.x * b.s + a.y * b.z - a.z * b.y) >> 1,
                (a.s * b.y + a.y * b.s + a.z * b.x - a.x * b.z) >> 1,
                (a.s * b.z + a.z * b.s + a.x * b.y - a.y * b.x) >> 1,
            )
        if isinstance(other, int):
            return HurwitzQuaternion.from_doubled(
                self.s * other, self.x * other, self.y * other, self.z * other
            )
        return NotImplemented

    def __rmul__(self, other) -> "HurwitzQuaternion":
        if isinstance(other, int):
            return self * other
        return NotImplemented


class DivResult(NamedTuple):
    """Quotient and remainder of :func:`right_div`."""

    quot: HurwitzQuaternion
    rem: HurwitzQuaternion


def right_div(a: HurwitzQuaternion, b: HurwitzQuaternion) -> DivResult:
    """Division with ``a == b * quot + rem`` and ``rem.norm() < b.norm()``."""
    if not b:
        raise ZeroDivisionError("division by the zero quaternion")
    numer = b.conj() * a
    denom = b.norm()
    s, x, y, z = (v // denom for v in numer.coords_doubled())

    q_odd = HurwitzQuaternion.from_doubled(s | 1, x | 1, y | 1, z | 1)
    r_odd = a - b * q_odd
    q_even = HurwitzQuaternion.from_doubled((s + 1) & ~1, (x + 1) & ~1, (y + 1) & ~1, (z + 1) & ~1)
    r_even = a - b * q_even
    if r_odd.norm() < r_even.norm():
        return DivResult(q_odd, r_odd)
    return DivResult(q_even, r_even)


def right_gcd(a: HurwitzQuaternion, b: HurwitzQuaternion) -> HurwitzQuaternion:
    """A greatest common divisor ``g`` with ``a = g * a'`` and ``b = g * b'``."""
    while a:
        b = right_div(b, a).rem
        a, b = b, a
    return b