"""Weighted graphs: Dijkstra distances, Prim spanning-tree weight and DAG shortest paths."""

import heapq
from typing import Iterable, Sequence

from algodrills.graph_traversal import topological_sort_dfs

UNREACHABLE = 10**9

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def dijkstra(adj: WeightedAdjacency, src: int) -> list[int]:
    """Return the least total weight from src to every vertex; UNREACHABLE where none."""
    if not 0 <= src < len(adj):
        raise ValueError(f"source {src} is outside the range 0..{len(adj) - 1}")
    dist = [UNREACHABLE] * len(adj)
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adj[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def spanning_tree_weight(adj: WeightedAdjacency) -> int:
    """Return the weight of the minimum spanning tree grown from vertex 0 (Prim)."""
    if not adj:
        raise ValueError("graph has no vertices")
    visited = [False] * len(adj)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adj[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total


def shortest_path_dag(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int]:
    """Return shortest distances from vertex 0 in a weighted DAG; -1 where unreachable."""
    if n < 1:
        raise ValueError("graph has no vertices")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < n:
                raise ValueError(f"vertex {vertex} is outside the range 0..{n - 1}")
        adj[u].append((v, weight))
    order = topological_sort_dfs([[target for target, _ in neighbours] for neighbours in adj])
    dist = [UNREACHABLE] * n
    dist[0] = 0
    for node in order:
        if dist[node] == UNREACHABLE:
            continue
        for target, weight in adj[node]:
            if dist[node] + weight < dist[target]:
                dist[target] = dist[node] + weight
    return [-1 if distance == UNREACHABLE else distance for distance in dist]