"""Graph representations, breadth/depth-first traversal, topological order and unit-weight paths."""

from collections import deque
from typing import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]
Edge = tuple[int, int]


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside the range 0..{count - 1}")


def adjacency_matrix(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return an (n+1) x (n+1) 0/1 matrix of the undirected edges on vertices 0..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    matrix = [[0] * (n + 1) for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n + 1)
        _check_vertex(v, n + 1)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def adjacency_list(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return neighbour lists for vertices 0..n, each undirected edge stored both ways."""
    if n < 0:
        raise ValueError("n must not be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n + 1)
        _check_vertex(v, n + 1)
        adj[u].append(v)
        adj[v].append(u)
    return adj


def bfs(start: int, adj: Adjacency) -> list[int]:
    """Return the vertices reachable from start in breadth-first order."""
    _check_vertex(start, len(adj))
    visited = [False] * len(adj)
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def _depth_first(adj: Adjacency, root: int, visited: list[bool], preorder: list[int],
                 postorder: list[int]) -> None:
    visited[root] = True
    preorder.append(root)
    stack = [(root, iter(adj[root]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                preorder.append(neighbour)
                stack.append((neighbour, iter(adj[neighbour])))
                break
        else:
            stack.pop()
            postorder.append(node)


def dfs(adj: Adjacency, start: int = 1) -> list[int]:
    """Return the vertices reachable from start in depth-first (preorder) order."""
    _check_vertex(start, len(adj))
    visited = [False] * len(adj)
    preorder: list[int] = []
    _depth_first(adj, start, visited, preorder, [])
    return preorder


def topological_sort_dfs(adj: Adjacency) -> list[int]:
    """Order the vertices of a directed acyclic graph by reversed depth-first finish time."""
    visited = [False] * len(adj)
    finished: list[int] = []
    for root in range(len(adj)):
        if not visited[root]:
            _depth_first(adj, root, visited, [], finished)
    return finished[::-1]


def topological_sort_kahn(adj: Adjacency) -> list[int]:
    """Order vertices by repeatedly removing those with no incoming edges.

    On a graph with a cycle the vertices on or behind it are left out.
    """
    indegree = [0] * len(adj)
    for neighbours in adj:
        for target in neighbours:
            indegree[target] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adj[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def shortest_path_unit(n: int, edges: Iterable[Edge], src: int) -> list[int]:
    """Return edge counts from src to each of vertices 0..n-1 in an undirected graph; -1 if unreachable."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adj[u].append(v)
        adj[v].append(u)
    _check_vertex(src, n)
    dist = [-1] * n
    dist[src] = 0
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if dist[neighbour] == -1:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist