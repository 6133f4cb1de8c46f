"""Disjoint-set forest with path compression and union by rank or by size."""


class DisjointSet:
    """Tracks which of the nodes 0..n belong to the same component."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise ValueError(f"node {node} is outside the range 0..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Return the representative of node's component, compressing the path to it."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the components of u and v, hanging the shallower tree under the deeper."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1

    def union_by_size(self, u: int, v: int) -> None:
        """Join the components of u and v, hanging the smaller tree under the larger."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]