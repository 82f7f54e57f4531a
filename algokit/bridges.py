"""Bridges and edge-biconnected components of an undirected graph."""


class EdgeBiconnectedComponents:
    """Tarjan's bridge search over vertices ``1..n``.

    Edges are numbered from 1 in the order given. As in the classic
    formulation, the edge back to a vertex's DFS parent is skipped by
    vertex, so parallel edges to the parent do not count as cycles.
    """

    def __init__(self, n, edges):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        adj = [[] for _ in range(n + 1)]
        edge_count = 0
        for index, (x, y) in enumerate(edges, start=1):
            for v in (x, y):
                if not 1 <= v <= n:
                    raise IndexError(f"vertex {v} out of range")
            adj[x].append((y, index))
            adj[y].append((x, index))
            edge_count = index
        self._adj = adj
        self._dfn = [0] * (n + 1)
        self._low = [0] * (n + 1)
        self._id = [0] * (n + 1)
        self._bridge = [False] * (edge_count + 1)
        self._edge_count = edge_count
        self.components = []
        self._timer = 0
        for u in range(1, n + 1):
            if not self._dfn[u]:
                self._search(u)

    def _visit(self, u, stack):
        self._timer += 1
        self._dfn[u] = self._low[u] = self._timer
        stack.append(u)

    def _search(self, root):
        dfn, low = self._dfn, self._low
        pending = []
        self._visit(root, pending)
        frames = [(root, -1, iter(self._adj[root]), 0)]
        while frames:
            u, parent, neighbours, _ = frames[-1]
            descended = False
            for v, index in neighbours:
                if v == parent:
                    continue
                if not dfn[v]:
                    self._visit(v, pending)
                    frames.append((v, u, iter(self._adj[v]), index))
                    descended = True
                    break
                if dfn[v] < dfn[u]:
                    low[u] = min(low[u], dfn[v])
            if descended:
                continue
            _, _, _, via = frames.pop()
            if dfn[u] == low[u]:
                component = []
                number = len(self.components) + 1
                while True:
                    w = pending.pop()
                    component.append(w)
                    self._id[w] = number
                    if w == u:
                        break
                self.components.append(component)
            if frames:
                p = frames[-1][0]
                low[p] = min(low[p], low[u])
                if low[u] > dfn[p]:
                    self._bridge[via] = True

    def is_bridge(self, index):
        """Tell whether edge number ``index`` is a bridge."""
        if not 1 <= index <= self._edge_count:
            raise IndexError(f"edge {index} out of range")
        return self._bridge[index]

    def component(self, u):
        """Number, from 1, of the component holding vertex ``u``."""
        if not 1 <= u <= self._n:
            raise IndexError(f"vertex {u} out of range")
        return self._id[u]