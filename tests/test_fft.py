import random

import pytest

from contestlib.fft import (
    fft_double_inverse,
    fft_double_multiply,
    fft_double_square,
    fft_inverse,
    fft_mod_inverse,
    fft_mod_multiply,
    fft_mod_square,
    fft_multiply,
    fft_square,
    next_pow2,
    series_inverse,
)
from contestlib.modnum import modnum_type

NTT = modnum_type(998244353)
BIG = modnum_type(10**9 + 7)


def multiply_slow(a, b):
    if not a or not b:
        return []
    res = [a[0] * 0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            res[i + j] += x * y
    return res


def random_values(cls, size, seed=48):
    rng = random.Random(seed)
    return [cls(rng.getrandbits(32)) for _ in range(size)]


def test_next_pow2_invariants():
    assert next_pow2(0) == 1
    for s in range(1, 300):
        p = next_pow2(s)
        assert p & (p - 1) == 0
        assert p >= s
        assert p == 1 or p // 2 < s


def test_fft_multiply_mod():
    a = random_values(BIG, 100, seed=48)
    b = random_values(BIG, 168, seed=49)
    assert fft_mod_multiply(a, b) == multiply_slow(a, b)


def test_fft_inverse_with_multiply_inverser():
    a = random_values(NTT, 298)
    if not a[0]:
        a[0] = NTT(1)
    inv = series_inverse(a, fft_multiply)
    r = fft_multiply(a, inv)
    assert r == multiply_slow(a, inv)
    assert r[: len(a)] == [1] + [0] * (len(a) - 1)


def test_fft_inverse():
    a = random_values(NTT, 77, seed=5)
    if not a[0]:
        a[0] = NTT(1)
    inv = fft_inverse(a)
    assert len(inv) == len(a)
    assert fft_multiply(a, inv)[: len(a)] == [1] + [0] * (len(a) - 1)


@pytest.mark.parametrize("sizes", [(1, 1), (1, 5), (3, 4), (17, 33), (64, 64)])
def test_fft_multiply_ntt_matches_slow(sizes):
    a = random_values(NTT, sizes[0], seed=1)
    b = random_values(NTT, sizes[1], seed=2)
    assert fft_multiply(a, b) == multiply_slow(a, b)


def test_fft_square_matches_slow():
    a = random_values(NTT, 40, seed=3)
    assert fft_square(a) == multiply_slow(a, a)


def test_empty_inputs():
    assert fft_multiply([], [NTT(1)]) == []
    assert fft_mod_multiply([BIG(1)], []) == []
    assert fft_double_multiply([], []) == []
    assert fft_inverse([]) == []


def test_ntt_needs_roots_of_unity():
    with pytest.raises(ValueError):
        fft_multiply([BIG(1), BIG(2), BIG(3)], [BIG(4), BIG(5), BIG(6)])
    assert fft_multiply([BIG(2)], [BIG(3)]) == [BIG(2) * BIG(3)]


def test_complex_multiply():
    a = [1, 2, 3, 4, 5]
    b = [7, -2, 9]
    res = fft_multiply(a, b)
    expected = multiply_slow(a, b)
    assert len(res) == len(expected)
    for got, want in zip(res, expected):
        assert got == pytest.approx(want, abs=1e-6)


def test_fft_double_multiply_and_square():
    rng = random.Random(7)
    a = [rng.randrange(-1000, 1000) for _ in range(37)]
    b = [rng.randrange(-1000, 1000) for _ in range(21)]
    assert [round(x) for x in fft_double_multiply(a, b)] == multiply_slow(a, b)
    assert [round(x) for x in fft_double_square(a)] == multiply_slow(a, a)


def test_fft_mod_square_and_inverse():
    a = random_values(BIG, 50, seed=11)
    if not a[0]:
        a[0] = BIG(1)
    assert fft_mod_square(a) == multiply_slow(a, a)
    inv = fft_mod_inverse(a)
    assert multiply_slow(a, inv)[: len(a)] == [1] + [0] * (len(a) - 1)


def test_fft_double_inverse():
    a = [1.0, 0.5, -0.25, 0.125, 2.0, 1.5, -1.0]
    inv = fft_double_inverse(a)
    prod = multiply_slow(a, inv)[: len(a)]
    assert prod[0] == pytest.approx(1.0)
    for x in prod[1:]:
        assert x == pytest.approx(0.0, abs=1e-6)


def test_series_inverse_with_slow_multiplier_agrees():
    a = random_values(NTT, 30, seed=13)
    if not a[0]:
        a[0] = NTT(1)
    assert series_inverse(a, multiply_slow) == fft_inverse(a)


def test_series_inverse_needs_invertible_constant():
    with pytest.raises(ValueError):
        series_inverse([NTT(0), NTT(1)], fft_multiply)


def test_fft_mod_multiply_needs_modnum():
    with pytest.raises(TypeError):
        fft_mod_multiply([1, 2], [3, 4])