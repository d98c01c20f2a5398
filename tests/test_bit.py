import random

import pytest

from contestlib.bit import BinaryIndexedTree


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 8, 9, 33])
def test_prefix_suffix_intersection(n):
    bit = BinaryIndexedTree(n)
    assert len(bit) == n
    for i in range(n + 1):
        suf = set(bit.suffix(i))
        assert len(suf) <= n.bit_length()
        for j in range(n + 1):
            pre = set(bit.prefix(j))
            assert len(pre) <= n.bit_length()
            assert len(suf & pre) == (1 if i < j else 0)


def test_point_update_prefix_query():
    rng = random.Random(1)
    n = 50
    bit = BinaryIndexedTree(n)
    plain = [0] * n
    for _ in range(300):
        pos = rng.randrange(n)
        delta = rng.randint(-20, 20)
        plain[pos] += delta
        for idx in bit.suffix(pos):
            bit.data[idx] += delta
        end = rng.randint(0, n)
        assert sum(bit.data[idx] for idx in bit.prefix(end)) == sum(plain[:end])


def test_prefix_update_point_query():
    rng = random.Random(2)
    n = 40
    bit = BinaryIndexedTree(n, 0)
    plain = [0] * n
    for _ in range(300):
        end = rng.randint(0, n)
        delta = rng.randint(-9, 9)
        for k in range(end):
            plain[k] += delta
        for idx in bit.prefix(end):
            bit.data[idx] += delta
        pos = rng.randrange(n)
        assert sum(bit.data[idx] for idx in bit.suffix(pos)) == plain[pos]


def test_out_of_range_rejected():
    bit = BinaryIndexedTree(4)
    with pytest.raises(ValueError):
        bit.prefix(5)
    with pytest.raises(ValueError):
        bit.suffix(-1)
    with pytest.raises(ValueError):
        BinaryIndexedTree(-1)