import pytest

from algorithmics.disjoint_set import UnionFind
from algorithmics.mst import Edge, kruskal, kruskal_weight, prim_tree, prim_weight

MATRIX = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _edges_of(matrix):
    return [
        (i, j, matrix[i][j])
        for i in range(len(matrix))
        for j in range(i + 1, len(matrix))
        if matrix[i][j]
    ]


EDGES = _edges_of(MATRIX)


def test_kruskal_weight_of_example_graph():
    assert kruskal_weight(5, EDGES) == 16


def test_prim_weight_matches_kruskal():
    assert prim_weight(5, EDGES) == kruskal_weight(5, EDGES)


def test_kruskal_edges_sum_to_weight():
    tree = kruskal(5, EDGES)
    assert sum(e.weight for e in tree) == kruskal_weight(5, EDGES)


def test_kruskal_edges_span_the_graph():
    tree = kruskal(5, EDGES)
    assert len(tree) == 4
    sets = UnionFind(5)
    for edge in tree:
        assert edge.source < edge.target
        assert not sets.same_set(edge.source, edge.target)
        sets.union(edge.source, edge.target)
    assert sets.num_sets() == 1


def test_kruskal_accepts_edge_objects():
    edges = [Edge(*e) for e in EDGES]
    assert kruskal(5, edges) == kruskal(5, EDGES)


def test_prim_tree_edges_come_from_matrix():
    tree = prim_tree(MATRIX)
    assert [e.target for e in tree] == [1, 2, 3, 4]
    for edge in tree:
        assert edge.weight == MATRIX[edge.target][edge.source]
    assert sum(e.weight for e in tree) == kruskal_weight(5, EDGES)


def test_tree_input_is_its_own_spanning_tree():
    edges = [(0, 1, 4), (1, 2, 9), (1, 3, 1)]
    total = sum(w for _, _, w in edges)
    assert kruskal_weight(4, edges) == total
    assert prim_weight(4, edges) == total


def test_kruskal_disconnected_raises():
    with pytest.raises(ValueError):
        kruskal(4, [(0, 1, 1), (2, 3, 1)])


def test_prim_tree_disconnected_raises():
    with pytest.raises(ValueError):
        prim_tree([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_vertex_out_of_range_raises():
    with pytest.raises(ValueError):
        kruskal_weight(2, [(0, 5, 1)])


def test_single_vertex_has_empty_tree():
    assert kruskal(1, []) == []
    assert prim_tree([[0]]) == []