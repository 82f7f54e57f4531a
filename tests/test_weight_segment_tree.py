import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.weight_segment_tree import WeightSegmentTree


@given(st.lists(st.integers(-50, 50), max_size=40), st.data())
def test_top_sum_matches_sorted(values, data):
    tree = WeightSegmentTree(-50, 50)
    for v in values:
        tree.add(v, 1)
    k = data.draw(st.integers(0, len(values)))
    assert tree.top_sum(k) == sum(sorted(values, reverse=True)[:k])


@given(
    st.lists(st.tuples(st.integers(0, 1000), st.integers(1, 5)), max_size=20),
    st.data(),
)
def test_counts_act_as_copies(pairs, data):
    tree = WeightSegmentTree(0, 1000)
    expanded = []
    for v, c in pairs:
        tree.add(v, c)
        expanded.extend([v] * c)
    k = data.draw(st.integers(0, len(expanded)))
    assert tree.top_sum(k) == sum(sorted(expanded, reverse=True)[:k])


def test_too_many_requested_raises():
    tree = WeightSegmentTree(1, 10)
    tree.add(4, 2)
    with pytest.raises(ValueError):
        tree.top_sum(3)


def test_empty_tree_raises_for_positive_k():
    tree = WeightSegmentTree(1, 10)
    with pytest.raises(ValueError):
        tree.top_sum(1)


def test_negative_count_removes():
    tree = WeightSegmentTree(1, 10)
    tree.add(5, 2)
    tree.add(7, 1)
    tree.add(5, -1)
    assert tree.top_sum(2) == 5 + 7
    with pytest.raises(ValueError):
        tree.top_sum(3)


def test_value_outside_range_raises():
    tree = WeightSegmentTree(1, 10)
    with pytest.raises(ValueError):
        tree.add(11, 1)
    with pytest.raises(ValueError):
        WeightSegmentTree(5, 4)