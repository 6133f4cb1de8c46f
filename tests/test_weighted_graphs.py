import pytest

from algodrills.disjoint_set import DisjointSet
from algodrills.weighted_graphs import (
    UNREACHABLE,
    dijkstra,
    shortest_path_dag,
    spanning_tree_weight,
)


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def _kruskal(n, edges):
    ds = DisjointSet(n)
    total = 0
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if ds.find(u) != ds.find(v):
            ds.union_by_size(u, v)
            total += w
    return total


SOURCE_DIJKSTRA = [
    [(1, 4), (2, 4)],
    [(0, 4), (2, 2)],
    [(0, 4), (1, 2), (3, 3), (4, 1), (5, 6)],
    [(2, 3), (5, 2)],
    [(2, 1), (5, 3)],
    [(2, 6), (3, 2), (5, 3)],
]

SOURCE_PRIM_EDGES = [(0, 1, 2), (0, 2, 1), (1, 2, 1), (2, 3, 2), (3, 4, 1), (4, 2, 2)]


def test_dijkstra_source_example():
    assert dijkstra(SOURCE_DIJKSTRA, 0) == [0, 4, 4, 7, 5, 8]


def test_dijkstra_distances_satisfy_edge_relaxation():
    dist = dijkstra(SOURCE_DIJKSTRA, 3)
    assert dist[3] == 0
    for node, neighbours in enumerate(SOURCE_DIJKSTRA):
        for target, weight in neighbours:
            assert dist[target] <= dist[node] + weight


def test_dijkstra_unreachable():
    adj = [[(1, 3)], [], []]
    dist = dijkstra(adj, 0)
    assert dist[:2] == [0, 3]
    assert dist[2] == UNREACHABLE == 10**9


def test_dijkstra_bad_source():
    with pytest.raises(ValueError):
        dijkstra([[]], 1)


def test_spanning_tree_source_example():
    assert spanning_tree_weight(_undirected(5, SOURCE_PRIM_EDGES)) == 5


@pytest.mark.parametrize(
    "n, edges",
    [
        (5, SOURCE_PRIM_EDGES),
        (4, [(0, 1, 10), (1, 2, 1), (2, 3, 7), (0, 3, 3), (0, 2, 4), (1, 3, 9)]),
        (3, [(0, 1, 5), (1, 2, 5), (0, 2, 5)]),
    ],
)
def test_spanning_tree_matches_kruskal(n, edges):
    assert spanning_tree_weight(_undirected(n, edges)) == _kruskal(n, edges)


def test_spanning_tree_single_vertex():
    assert spanning_tree_weight([[]]) == 0


def test_spanning_tree_empty_graph():
    with pytest.raises(ValueError):
        spanning_tree_weight([])


def test_dag_matches_dijkstra_for_positive_weights():
    edges = [(0, 1, 2), (0, 4, 1), (1, 2, 3), (4, 2, 2), (2, 3, 6), (4, 5, 4), (5, 3, 1)]
    adj = [[] for _ in range(6)]
    for u, v, w in edges:
        adj[u].append((v, w))
    assert shortest_path_dag(6, edges) == dijkstra(adj, 0)


def test_dag_unreachable_is_minus_one():
    result = shortest_path_dag(4, [(0, 1, 2), (2, 3, 1)])
    assert result == [0, 2, -1, -1]


def test_dag_negative_weights():
    edges = [(0, 1, 5), (0, 2, 2), (2, 1, -4)]
    assert shortest_path_dag(3, edges) == [0, -2, 2]


def test_dag_bad_vertex():
    with pytest.raises(ValueError):
        shortest_path_dag(2, [(0, 2, 1)])