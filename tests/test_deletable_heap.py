from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.deletable_heap import DeletableHeap


def test_top_is_largest_pushed():
    heap = DeletableHeap()
    for v in [4, 9, 1]:
        heap.push(v)
    assert heap.top() == 9


def test_discarded_top_is_skipped():
    heap = DeletableHeap()
    for v in [4, 9, 1]:
        heap.push(v)
    heap.discard(9)
    assert heap.top() == 4
    heap.discard(1)
    assert heap.top() == 4


def test_empty_heap_raises():
    heap = DeletableHeap()
    with pytest.raises(IndexError):
        heap.top()
    heap.push(3)
    heap.discard(3)
    with pytest.raises(IndexError):
        heap.top()


@given(st.lists(st.tuples(st.booleans(), st.integers(-20, 20)), max_size=60))
def test_matches_multiset_model(ops):
    heap = DeletableHeap()
    model = Counter()
    for is_push, v in ops:
        if is_push or model[v] == 0:
            heap.push(v)
            model[v] += 1
        else:
            heap.discard(v)
            model[v] -= 1
        present = [k for k, c in model.items() if c > 0]
        if present:
            assert heap.top() == max(present)
        else:
            with pytest.raises(IndexError):
                heap.top()