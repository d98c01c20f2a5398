import copy

import pytest

from contestlib.tensor import Tensor, TensorView


def _filled():
    a = Tensor((2, 3))
    a[0, 0] = "0"
    a[0, 1] = "1"
    a[0, 2] = "2"
    a[1, 0] = "3"
    a[1, 1] = "4"
    a[1, 2] = "5"
    return a


def test_tensor_indexing_carried_over():
    a = _filled()
    const_a = copy.copy(a)
    b = copy.copy(a)
    expected = [["0", "1", "2"], ["3", "4", "5"]]
    for i in range(2):
        for j in range(3):
            assert b[i, j] == expected[i][j]
            assert b.at((i, j)) == expected[i][j]
            assert b[i][j].item() == expected[i][j]
            assert const_a[i][j].item() == expected[i][j]


def test_copy_is_independent():
    a = _filled()
    b = copy.copy(a)
    b[0, 0] = "changed"
    assert a[0, 0] == "0"
    assert b[0, 0] == "changed"


def test_view_shares_storage():
    a = _filled()
    row = a[1]
    assert isinstance(row, TensorView)
    row[(2,)] = "x"
    assert a[1, 2] == "x"
    a[1][0][()] = "y"
    assert a[1, 0] == "y"


def test_fill_and_shape():
    t = Tensor((3, 4, 2), fill=7)
    assert t.shape == (3, 4, 2)
    assert t.strides == (8, 2, 1)
    assert all(t[i, j, k] == 7 for i in range(3) for j in range(4) for k in range(2))


def test_bounds_checked():
    a = _filled()
    with pytest.raises(IndexError):
        a.at((2, 0))
    with pytest.raises(IndexError):
        a.at((0, 3))
    with pytest.raises(IndexError):
        a[0, 0, 0]
    with pytest.raises(IndexError):
        a.at(5)


def test_item_needs_zero_dimensions():
    a = _filled()
    with pytest.raises(TypeError):
        a.item()
    with pytest.raises(TypeError):
        a[0][0][0]


def test_negative_shape_rejected():
    with pytest.raises(ValueError):
        Tensor((2, -1))