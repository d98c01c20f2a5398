import operator
import random

import pytest

from contestlib.cartesian_tree import CartesianTree


def _check(t, v, better):
    assert len(t) == 2 * len(v) + 1
    for i in range(1, len(t), 2):
        node = t[i]
        assert node.m == i // 2
        assert node.l <= node.m <= node.r
        left, right = t[node.c[0]], t[node.c[1]]
        assert left.l == node.l
        assert left.r == node.m - 1
        assert right.l == node.m + 1
        assert right.r == node.r
        assert left.l > left.r or better(v[node.m], v[left.m])
        assert right.l > right.r or better(v[node.m], v[right.m])
    root = t[t.root]
    assert root.l == 0 and root.r == len(v) - 1


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 8, 13])
def test_min_and_max_trees(size):
    rng = random.Random(size)
    v = list(range(size))
    rng.shuffle(v)
    _check(CartesianTree.build_min_tree(v), v, operator.lt)
    _check(CartesianTree.build_max_tree(v), v, operator.gt)


def test_empty_tree_is_single_leaf():
    t = CartesianTree.build_min_tree([])
    assert len(t) == 1
    assert t.root == 0
    assert t[0].c == [-1, -1]


def test_ties_put_earlier_cell_higher():
    v = [3, 3, 3]
    t = CartesianTree.build_min_tree(v)
    assert t[t.root].m == 0
    t = CartesianTree.build_max_tree(v)
    assert t[t.root].m == 0


def test_custom_comparator():
    v = ["bb", "a", "ccc"]
    by_len = lambda x, y: len(x) < len(y)
    t = CartesianTree.build_max_tree(v, by_len)
    assert t[t.root].m == v.index("ccc")
    t = CartesianTree.build_min_tree(v, by_len)
    assert t[t.root].m == v.index("a")