import random

import pytest

from contestlib.quaternion import DivResult, HurwitzQuaternion, right_div, right_gcd


def _random_quaternions(count, seed, lo=-20, hi=20):
    rng = random.Random(seed)
    out = []
    for _ in range(count):
        parity = rng.randint(0, 1)
        coords = [2 * rng.randint(lo, hi) + parity for _ in range(4)]
        out.append(HurwitzQuaternion.from_doubled(*coords))
    return out


def test_str_format():
    assert str(HurwitzQuaternion(1, 2, -3, 0)) == "1+2i-3j+0k"


def test_from_doubled_rejects_mixed_parity():
    with pytest.raises(ValueError):
        HurwitzQuaternion.from_doubled(1, 2, 1, 1)


def test_coordinate_accessors():
    q = HurwitzQuaternion(3, -1, 4, 2)
    assert q.coords() == (3, -1, 4, 2)
    assert q.coords_doubled() == (6, -2, 8, 4)
    assert q.real() == 3
    assert q.real_doubled() == 6
    assert q.imag() == (-1, 4, 2)
    assert q.imag_doubled() == (-2, 8, 4)
    half = HurwitzQuaternion.from_doubled(1, 1, 1, 1)
    with pytest.raises(ValueError):
        half.real()
    with pytest.raises(ValueError):
        half.coords()


def test_unit_products():
    i = HurwitzQuaternion(0, 1, 0, 0)
    j = HurwitzQuaternion(0, 0, 1, 0)
    k = HurwitzQuaternion(0, 0, 0, 1)
    one = HurwitzQuaternion(1)
    assert i * j == k
    assert j * i == -k
    assert i * i == -one


def test_conj_gives_norm():
    for q in _random_quaternions(30, 1):
        assert q * q.conj() == HurwitzQuaternion(q.norm())
        assert q.conj().conj() == q


def test_norm_is_multiplicative():
    for a, b in zip(_random_quaternions(30, 2), _random_quaternions(30, 3)):
        assert (a * b).norm() == a.norm() * b.norm()


def test_add_sub_and_scalar():
    for a, b in zip(_random_quaternions(20, 4), _random_quaternions(20, 5)):
        assert (a + b) - b == a
        assert 2 * a == a * 2 == a + a


def test_bool():
    assert not HurwitzQuaternion()
    assert HurwitzQuaternion.from_doubled(1, -1, 1, -1)


def test_right_div_invariant():
    for a, b in zip(_random_quaternions(60, 6, -50, 50), _random_quaternions(60, 7, -8, 8)):
        if not b:
            continue
        res = right_div(a, b)
        assert isinstance(res, DivResult)
        assert b * res.quot + res.rem == a
        assert res.rem.norm() < b.norm()


def test_right_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        right_div(HurwitzQuaternion(1), HurwitzQuaternion())


def test_right_gcd_divides_both():
    for g, x, y in zip(
        _random_quaternions(25, 8, -5, 5),
        _random_quaternions(25, 9, -5, 5),
        _random_quaternions(25, 10, -5, 5),
    ):
        a, b = g * x, g * y
        if not a and not b:
            continue
        d = right_gcd(a, b)
        assert right_div(a, d).rem == HurwitzQuaternion()
        assert right_div(b, d).rem == HurwitzQuaternion()
        if g:
            assert d.norm() >= g.norm()