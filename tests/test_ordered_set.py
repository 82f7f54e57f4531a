import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.ordered_set import OrderedSet


@pytest.fixture
def odd_set():
    tree = OrderedSet()
    for i in range(1, 11, 2):
        tree.add(i)
    return tree


def test_order_of_key_on_odd_numbers(odd_set):
    assert [odd_set.order_of_key(v) for v in range(1, 11, 2)] == list(range(5))
    assert odd_set.order_of_key(11) == len(odd_set)
    assert odd_set.order_of_key(-1) == 0
    assert odd_set.order_of_key(2) == odd_set.order_of_key(3)


def test_find_by_order(odd_set):
    assert odd_set.find_by_order(3) == 7
    with pytest.raises(IndexError):
        odd_set.find_by_order(10)
    with pytest.raises(IndexError):
        odd_set.find_by_order(-1)


def test_duplicates_are_ignored():
    tree = OrderedSet([3, 3, 1])
    tree.add(3)
    assert list(tree) == [1, 3]


def test_discard_removes(odd_set):
    odd_set.discard(5)
    odd_set.discard(6)
    assert 5 not in odd_set
    assert list(odd_set) == [1, 3, 7, 9]


@given(st.lists(st.integers(-100, 100), max_size=50), st.integers(-110, 110))
def test_rank_and_select_are_inverse(values, probe):
    tree = OrderedSet()
    for v in values:
        tree.add(v)
    ordered = sorted(set(values))
    assert list(tree) == ordered
    assert tree.order_of_key(probe) == len([v for v in ordered if v < probe])
    for rank, v in enumerate(ordered):
        assert tree.find_by_order(rank) == v
        assert tree.order_of_key(v) == rank