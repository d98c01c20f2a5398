import math
import random
from fractions import Fraction
from functools import cmp_to_key

import pytest

from contestlib.point import (
    Point,
    angle_between,
    angle_cmp,
    angle_cmp_center,
    cdiv,
    cmul,
    conj,
    cross,
    cross3,
    dot,
    dot_cross,
    is_reflex,
    lex_less,
    same_dir,
)


def _random_points(count, seed=7, lo=-10, hi=10):
    rng = random.Random(seed)
    return [Point(rng.randint(lo, hi), rng.randint(lo, hi)) for _ in range(count)]


def _sort_with(less, pts):
    def cmp(a, b):
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(pts, key=cmp_to_key(cmp))


def test_arithmetic_round_trip():
    for a, b in zip(_random_points(30, 1), _random_points(30, 2)):
        assert (a + b) - b == a
        assert -(-a) == a
        assert a * 3 == 3 * a == a + a + a


def test_perpendiculars():
    for p in _random_points(30):
        assert dot(p, p.perp_ccw()) == 0
        assert cross(p, p.perp_ccw()) == p.dist2()
        assert p.perp_cw().perp_ccw() == p


def test_complex_product_and_quotient():
    for a, b in zip(_random_points(30, 3), _random_points(30, 4)):
        assert complex(cmul(a, b)) == complex(a) * complex(b)
        assert complex(dot_cross(a, b)) == complex(conj(a)) * complex(b)
        if b.dist2():
            fb = Point(Fraction(b.x), Fraction(b.y))
            q = cdiv(Point(Fraction(a.x), Fraction(a.y)), fb)
            assert cmul(q, fb) == a


def test_rotate_and_unrotate():
    u = Point(0.6, 0.8)
    for p in _random_points(20):
        r = p.rotate(u)
        expected = complex(u) * complex(p)
        assert math.isclose(r.x, expected.real, abs_tol=1e-9)
        assert math.isclose(r.y, expected.imag, abs_tol=1e-9)
        back = r.unrotate(u)
        assert math.isclose(back.x, p.x, abs_tol=1e-9)
        assert math.isclose(back.y, p.y, abs_tol=1e-9)


def test_lengths_and_angle():
    for p in _random_points(30):
        if not p.dist2():
            continue
        assert math.isclose(p.dist() ** 2, p.dist2())
        assert math.isclose(p.unit().dist(), 1.0)
        assert math.isclose(p.angle(), math.atan2(p.y, p.x))
        assert math.isclose(abs(p), p.dist())


def test_int_unit():
    for p in _random_points(40, lo=-30, hi=30):
        u = p.int_unit()
        if not p.x and not p.y:
            assert u == p
            continue
        assert u.int_norm() == 1
        assert u * p.int_norm() == p
    assert Point(0, 0).int_unit() == Point(0, 0)


def test_cross3_orientation_swaps_sign():
    pts = _random_points(12, 9)
    for a, b, c in zip(pts, pts[1:], pts[2:]):
        assert cross3(a, b, c) == -cross3(a, c, b)


def test_lex_less_matches_tuple_order():
    pts = _random_points(30)
    for a, b in zip(pts, pts[1:]):
        assert lex_less(a, b) == (tuple(a) < tuple(b))


def test_same_dir_and_reflex():
    p = Point(2, 3)
    assert same_dir(p, p * 4)
    assert not same_dir(p, -p)
    assert not is_reflex(p, p)
    assert is_reflex(p, -p)
    assert is_reflex(p, p.perp_cw())
    assert not is_reflex(p, p.perp_ccw())


def test_angle_sort_matches_atan2():
    pts = [p for p in _random_points(60, 11) if p.dist2()]
    base = Point(1, 0)
    ordered = _sort_with(angle_cmp(base), pts)
    angles = [math.atan2(p.y, p.x) % (2 * math.pi) for p in ordered]
    assert angles == sorted(angles)


def test_angle_cmp_center_translates():
    center = Point(5, -2)
    pts = [p for p in _random_points(40, 12) if p.dist2()]
    shifted = [p + center for p in pts]
    a = _sort_with(angle_cmp(Point(0, 1)), pts)
    b = _sort_with(angle_cmp_center(center, Point(0, 1)), shifted)
    assert [p + center for p in a] == b


def test_angle_between():
    s, t = Point(1, 0), Point(0, 1)
    assert angle_between(s, t, Point(1, 1)) == 1
    assert angle_between(s, t, Point(2, 0)) == 0
    assert angle_between(s, t, Point(-1, -1)) == -1