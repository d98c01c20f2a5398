import math

import pytest

from contestlib.jacobi import is_qr_jacobi

PRIMES = [3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


@pytest.mark.parametrize("p", PRIMES)
def test_matches_euler_criterion(p):
    for a in range(-40, 41):
        if a % p == 0:
            continue
        assert is_qr_jacobi(a, p) == (pow(a % p, (p - 1) // 2, p) == 1)


def test_multiplicative_in_modulus():
    for p in PRIMES:
        for q in PRIMES:
            if p == q:
                continue
            for a in range(1, 60):
                if math.gcd(a, p * q) != 1:
                    continue
                assert is_qr_jacobi(a, p * q) == (is_qr_jacobi(a, p) == is_qr_jacobi(a, q))


def test_modulus_one():
    assert is_qr_jacobi(5, 1) is True


@pytest.mark.parametrize("m", [0, -3, 4, 10])
def test_invalid_modulus(m):
    with pytest.raises(ValueError):
        is_qr_jacobi(2, m)


def test_not_coprime():
    with pytest.raises(ValueError):
        is_qr_jacobi(3, 9)