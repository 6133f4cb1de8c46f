import itertools

import pytest

from algodrills.disjoint_set import DisjointSet


def test_fresh_nodes_are_their_own_representatives():
    ds = DisjointSet(5)
    assert [ds.find(node) for node in range(6)] == list(range(6))


def test_source_walkthrough():
    ds = DisjointSet(7)
    ds.union_by_size(1, 2)
    ds.union_by_size(2, 3)
    ds.union_by_size(4, 5)
    ds.union_by_size(6, 7)
    ds.union_by_size(3, 7)
    assert ds.find(5) != ds.find(6)
    assert ds.find(1) == ds.find(7)
    ds.union_by_rank(5, 6)
    assert ds.find(5) == ds.find(6)


@pytest.mark.parametrize("method", ["union_by_rank", "union_by_size"])
def test_union_is_transitive(method):
    ds = DisjointSet(6)
    getattr(ds, method)(0, 1)
    getattr(ds, method)(2, 3)
    getattr(ds, method)(1, 3)
    group = {ds.find(node) for node in (0, 1, 2, 3)}
    assert len(group) == 1
    assert ds.find(4) not in group
    assert ds.find(5) not in group
    assert ds.find(4) != ds.find(5)


@pytest.mark.parametrize("method", ["union_by_rank", "union_by_size"])
def test_repeated_union_keeps_partition(method):
    ds = DisjointSet(4)
    getattr(ds, method)(1, 2)
    getattr(ds, method)(2, 1)
    getattr(ds, method)(1, 1)
    assert ds.find(1) == ds.find(2)
    assert ds.find(3) != ds.find(1)


def test_chain_of_unions_joins_everything():
    ds = DisjointSet(10)
    for u, v in itertools.pairwise(range(11)):
        ds.union_by_size(u, v)
    assert len({ds.find(node) for node in range(11)}) == 1


def test_find_is_stable_after_compression():
    ds = DisjointSet(8)
    for u, v in [(0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (4, 6), (0, 4)]:
        ds.union_by_rank(u, v)
    first = [ds.find(node) for node in range(9)]
    second = [ds.find(node) for node in range(9)]
    assert first == second
    assert len(set(first[:8])) == 1
    assert first[8] == 8


@pytest.mark.parametrize("node", [-1, 4, 100])
def test_out_of_range_node_raises(node):
    ds = DisjointSet(3)
    with pytest.raises(ValueError):
        ds.find(node)
    with pytest.raises(ValueError):
        ds.union_by_size(0, node)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)