import pytest

from algokit.matrix import Matrix, scalar_matrix
from algokit.modint import DEFAULT_MOD


def fibonacci(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def test_fibonacci_by_power():
    step = Matrix([[1, 1], [1, 0]])
    for n in range(1, 120):
        assert (step**n).rows[0][1] == fibonacci(n) % DEFAULT_MOD


def test_identity():
    m = Matrix([[2, 3], [5, 7]])
    one = scalar_matrix(2, 1)
    assert m * one == m == one * m
    assert m**0 == one


def test_addition_and_zero():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    zero = scalar_matrix(2, 0)
    assert a + b == b + a
    assert a + zero == a
    assert a * zero == zero


def test_reduction():
    m = Matrix([[-1, 0], [0, DEFAULT_MOD + 1]])
    assert m.rows == ((DEFAULT_MOD - 1, 0), (0, 1))


def test_errors():
    with pytest.raises(ValueError):
        Matrix([[1, 2]])
    with pytest.raises(ValueError):
        Matrix([[1]]) * Matrix([[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        scalar_matrix(0, 1)