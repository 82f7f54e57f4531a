import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sparse_table import SparseTable


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40), st.data())
def test_query_min_and_max(values, data):
    low = SparseTable(values, min)
    high = SparseTable(values, max)
    l = data.draw(st.integers(0, len(values) - 1))
    r = data.draw(st.integers(l, len(values) - 1))
    assert low.query(l, r) == min(values[l : r + 1])
    assert high.query(l, r) == max(values[l : r + 1])


@given(st.lists(st.text(max_size=2), min_size=1, max_size=40), st.data())
def test_fold_keeps_order(values, data):
    table = SparseTable(values, operator.add)
    l = data.draw(st.integers(0, len(values) - 1))
    r = data.draw(st.integers(l, len(values) - 1))
    assert table.fold(l, r) == "".join(values[l : r + 1])


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40), st.data())
def test_fold_sum(values, data):
    table = SparseTable(values, operator.add)
    l = data.draw(st.integers(0, len(values) - 1))
    r = data.draw(st.integers(l, len(values) - 1))
    assert table.fold(l, r) == sum(values[l : r + 1])


def test_single_position_returns_value():
    values = [8, 3, 9]
    table = SparseTable(values, min)
    assert [table.query(i, i) for i in range(3)] == values
    assert [table.fold(i, i) for i in range(3)] == values


def test_bad_ranges_raise():
    table = SparseTable([1, 2, 3], min)
    with pytest.raises(IndexError):
        table.query(2, 1)
    with pytest.raises(IndexError):
        table.query(0, 3)
    with pytest.raises(IndexError):
        table.fold(-1, 1)