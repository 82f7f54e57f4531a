import pytest

from algokit.lca import BinaryLiftingLCA

EDGES = [(1, 2, 3), (1, 3, 5), (2, 4, 7), (2, 5, 11), (5, 6, 13)]


@pytest.fixture
def tree():
    t = BinaryLiftingLCA(6)
    for u, v, w in EDGES:
        t.add_edge(u, v, w)
    t.build(1)
    return t


def test_siblings(tree):
    assert tree.lca(4, 5) == 2
    assert tree.lca(4, 6) == 2
    assert tree.lca(3, 6) == 1


def test_self_and_root(tree):
    for u in range(1, 7):
        assert tree.lca(u, u) == u
        assert tree.lca(u, 1) == 1
        assert tree.distance(u, u) == 0


def test_distance_along_path(tree):
    assert tree.distance(4, 5) == 7 + 11
    assert tree.distance(6, 3) == 13 + 11 + 3 + 5


def test_distance_symmetric_and_through_lca(tree):
    for u in range(1, 7):
        for v in range(1, 7):
            a = tree.lca(u, v)
            assert tree.distance(u, v) == tree.distance(v, u)
            assert tree.distance(u, v) == tree.distance(u, a) + tree.distance(a, v)


def test_default_weight_counts_edges():
    t = BinaryLiftingLCA(4)
    t.add_edge(1, 2)
    t.add_edge(2, 3)
    t.add_edge(3, 4)
    t.build()
    assert t.distance(1, 4) == 3
    assert t.lca(4, 2) == 2


def test_other_root():
    t = BinaryLiftingLCA(3)
    t.add_edge(1, 2)
    t.add_edge(2, 3)
    t.build(3)
    assert t.lca(1, 2) == 2


def test_errors():
    t = BinaryLiftingLCA(2)
    with pytest.raises(IndexError):
        t.add_edge(0, 3)
    t.add_edge(1, 2)
    with pytest.raises(RuntimeError):
        t.lca(1, 2)
    with pytest.raises(ValueError):
        BinaryLiftingLCA(0)