"""Lowest common ancestors by binary lifting."""

from collections import deque


class BinaryLiftingLCA:
    """Weighted tree on vertices ``1..n`` answering ancestor and distance queries."""

    def __init__(self, n):
        if n < 1:
            raise ValueError("n must be positive")
        self._n = n
        self._levels = n.bit_length()
        self._depth = [0] * (n + 1)
        self._dist = [0] * (n + 1)
        self._adj = [[] for _ in range(n + 1)]
        self._up = [[0] * (self._levels + 1) for _ in range(n + 1)]
        self._built = False

    def _check(self, u):
        if not 1 <= u <= self._n:
            raise IndexError(f"vertex {u} out of range")

    def add_edge(self, u, v, w=1):
        """Add an undirected edge of weight ``w``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        self._adj[v].append((u, w))

    def build(self, root=1):
        """Root the tree at ``root`` and fill the jump tables."""
        self._check(root)
        depth, dist, up = self._depth, self._dist, self._up
        queue = deque([root])
        depth[root] = 1
        while queue:
            u = queue.popleft()
            for v, w in self._adj[u]:
                if depth[v]:
                    continue
                depth[v] = depth[u] + 1
                dist[v] = dist[u] + w
                row = up[v]
                row[0] = u
                for k in range(1, self._levels + 1):
                    row[k] = up[row[k - 1]][k - 1]
                queue.append(v)
        self._built = True

    def lca(self, a, b):
        """Return the lowest common ancestor of ``a`` and ``b``."""
        if not self._built:
            raise RuntimeError("build() has not been called")
        self._check(a)
        self._check(b)
        depth, up = self._depth, self._up
        if depth[a] < depth[b]:
            a, b = b, a
        for k in reversed(range(self._levels + 1)):
            if depth[up[a][k]] >= depth[b]:
                a = up[a][k]
        if a == b:
            return a
        for k in reversed(range(self._levels + 1)):
            if up[a][k] != up[b][k]:
                a = up[a][k]
                b = up[b][k]
        return up[a][0]

    def distance(self, u, v):
        """Weighted length of the path between ``u`` and ``v``."""
        return self._dist[u] + self._dist[v] - 2 * self._dist[self.lca(u, v)]