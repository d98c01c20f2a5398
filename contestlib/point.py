"""Two-dimensional points and vectors with exact-arithmetic friendly helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator


@dataclass(frozen=True)
class Point:
    """A 2D point or vector; coordinates may be ints, floats or Fractions."""

    x: Any = 0
    y: Any = 0

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __complex__(self) -> complex:
        return complex(self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def __pos__(self) -> "Point":
        return Point(+self.x, +self.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, t: Any) -> "Point":
        if isinstance(t, Point):
            return NotImplemented
        return Point(self.x * t, self.y * t)

    def __rmul__(self, t: Any) -> "Point":
        if isinstance(t, Point):
            return NotImplemented
        return Point(t * self.x, t * self.y)

    def __truediv__(self, t: Any) -> "Point":
        if isinstance(t, Point):
            return NotImplemented
        return Point(self.x / t, self.y / t)

    def __abs__(self) -> float:
        return self.dist()

    def dist2(self) -> Any:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def dist(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dist2())

    def unit(self) -> "Point":
        """Vector of length 1 in the same direction."""
        return self / self.dist()

    def angle(self) -> float:
        """Polar angle in ``(-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def int_norm(self) -> int:
        """Greatest common divisor of the integer coordinates."""
        return math.gcd(self.x, self.y)

    def int_unit(self) -> "Point":
        """Primitive integer vector in the same direction (zero stays zero)."""
        if not self.x and not self.y:
            return self
        g = self.int_norm()
        return Point(self.x // g, self.y // g)

    def perp_cw(self) -> "Point":
        """Rotation by 90 degrees clockwise."""
        return Point(self.y, -self.x)

    def perp_ccw(self) -> "Point":
        """Rotation by 90 degrees counter-clockwise."""
        return Point(-self.y, self.x)

    def rotate(self, u: "Point") -> "Point":
        """Rotate by the angle of the unit vector ``u`` (else also scales by ``|u|``)."""
        return dot_cross(conj(u), self)

    def unrotate(self, u: "Point") -> "Point":
        """Rotate back by the angle of the unit vector ``u``."""
        return dot_cross(u, self)


def dot(a: Point, b: Point) -> Any:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> Any:
    """z-component of the cross product."""
    return a.x * b.y - a.y * b.x


def cross3(a: Point, b: Point, c: Point) -> Any:
    """Twice the signed area of triangle ``abc``."""
    return cross(b - a, c - a)


def conj(a: Point) -> Point:
    """Complex conjugate."""
    return Point(a.x, -a.y)


def dot_cross(a: Point, b: Point) -> Point:
    """``conj(a) * b`` as complex numbers."""
    return Point(dot(a, b), cross(a, b))


def cmul(a: Point, b: Point) -> Point:
    """Complex product ``a * b``."""
    return dot_cross(conj(a), b)


def cdiv(a: Point, b: Point) -> Point:
    """Complex quotient ``a / b``."""
    return dot_cross(b, a) / b.dist2()


def lex_less(a: Point, b: Point) -> bool:
    """Lexicographic comparison by ``(x, y)``."""
    return (a.x, a.y) < (b.x, b.y)


def same_dir(a: Point, b: Point) -> bool:
    """Whether ``a`` and ``b`` point in exactly the same direction."""
    return cross(a, b) == 0 and dot(a, b) > 0


def is_reflex(a: Point, b: Point) -> bool:
    """Whether the counter-clockwise angle from ``a`` to ``b`` is in ``[180, 360)``."""
    c = cross(a, b)
    return c < 0 if c else dot(a, b) < 0


def angle_less(base: Point, s: Point, t: Point) -> bool:
    """Order of angles measured counter-clockwise from ``base`` in ``[0, 2pi)``."""
    r = int(is_reflex(base, s)) - int(is_reflex(base, t))
    return r < 0 if r else 0 < cross(s, t)


def angle_cmp(base: Point) -> Callable[[Point, Point], bool]:
    """Strict-less comparator of directions starting from ``base``."""
    return lambda s, t: angle_less(base, s, t)


def angle_cmp_center(center: Point, direction: Point) -> Callable[[Point, Point], bool]:
    """Strict-less comparator of points by angle around ``center`` from ``direction``."""
    return lambda s, t: angle_less(direction, s - center, t - center)


def angle_between(s: Point, t: Point, p: Point) -> int:
    """1 if ``p`` is strictly inside ``[s, t]`` taken counter-clockwise, 0 on the border, -1 outside."""
    if same_dir(p, s) or same_dir(p, t):
        return 0
    return 1 if angle_less(s, p, t) else -1