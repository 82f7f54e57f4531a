import pytest

from algokit.bridges import EdgeBiconnectedComponents


def test_triangle_with_tail():
    g = EdgeBiconnectedComponents(4, [(1, 2), (2, 3), (3, 1), (3, 4)])
    assert [g.is_bridge(i) for i in range(1, 5)] == [False, False, False, True]
    assert g.component(1) == g.component(2) == g.component(3)
    assert g.component(4) != g.component(1)
    assert len(g.components) == 2


def test_tree_edges_all_bridges():
    edges = [(1, 2), (2, 3), (2, 4), (4, 5)]
    g = EdgeBiconnectedComponents(5, edges)
    assert all(g.is_bridge(i) for i in range(1, len(edges) + 1))
    assert sorted(len(c) for c in g.components) == [1] * 5


def test_components_partition_vertices():
    edges = [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4), (3, 4), (7, 7)]
    g = EdgeBiconnectedComponents(8, edges)
    seen = sorted(v for c in g.components for v in c)
    assert seen == list(range(1, 9))
    for number, comp in enumerate(g.components, start=1):
        assert all(g.component(v) == number for v in comp)
    assert g.is_bridge(7)
    assert not g.is_bridge(1)


def test_errors():
    g = EdgeBiconnectedComponents(2, [(1, 2)])
    with pytest.raises(IndexError):
        g.is_bridge(2)
    with pytest.raises(IndexError):
        g.component(3)
    with pytest.raises(IndexError):
        EdgeBiconnectedComponents(2, [(1, 3)])