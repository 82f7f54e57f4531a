"""Heavy-light decomposition of a tree and path/subtree range structures."""

from .segment_tree import LazySegmentTree


class HeavyLightDecomposition:
    """Tree on vertices ``1..n`` split into heavy chains.

    Every vertex gets a position in ``0..n-1``; each heavy chain and each
    subtree occupies a contiguous block of positions. The root has depth 0.
    """

    def __init__(self, n, edges, root=1):
        if n < 1:
            raise ValueError("n must be positive")
        edges = list(edges)
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        self._n = n
        self._check(root)
        self.root = root
        adj = [[] for _ in range(n + 1)]
        for u, v in edges:
            self._check(u)
            self._check(v)
            adj[u].append(v)
            adj[v].append(u)

        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        visited = [False] * (n + 1)
        visited[root] = True
        order = []
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)
        if len(order) != n:
            raise ValueError("the edges do not form a connected tree")

        size = [1] * (n + 1)
        size[0] = 0
        heavy = [0] * (n + 1)
        for u in reversed(order):
            for v in adj[u]:
                if v == parent[u]:
                    continue
                size[u] += size[v]
                if size[v] > size[heavy[u]]:
                    heavy[u] = v

        dfn = [0] * (n + 1)
        top = [0] * (n + 1)
        seq = [0] * n
        pos = 0
        stack = [(root, root)]
        while stack:
            u, head = stack.pop()
            dfn[u] = pos
            seq[pos] = u
            top[u] = head
            pos += 1
            lights = [v for v in adj[u] if v != parent[u] and v != heavy[u]]
            stack.extend((v, v) for v in reversed(lights))
            if heavy[u]:
                stack.append((heavy[u], head))

        self._parent = parent
        self._depth = depth
        self._size = size
        self._dfn = dfn
        self._top = top
        self._seq = seq

    def __len__(self):
        return self._n

    def _check(self, u):
        if not 1 <= u <= self._n:
            raise IndexError(f"vertex {u} out of range")

    def lca(self, u, v):
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        top, depth, parent = self._top, self._depth, self._parent
        while top[u] != top[v]:
            if depth[top[u]] > depth[top[v]]:
                u = parent[top[u]]
            else:
                v = parent[top[v]]
        return u if depth[u] < depth[v] else v

    def distance(self, u, v):
        """Number of edges on the path between ``u`` and ``v``."""
        depth = self._depth
        return depth[u] + depth[v] - 2 * depth[self.lca(u, v)]

    def is_ancestor(self, u, v):
        """Tell whether ``u`` is ``v`` or an ancestor of ``v``."""
        self._check(u)
        self._check(v)
        dfn = self._dfn
        return dfn[u] <= dfn[v] <= dfn[u] + self._size[u] - 1

    def jump(self, u, k):
        """The ancestor ``k`` levels above ``u``, or None above the root."""
        self._check(u)
        if k < 0:
            raise ValueError("k must be non-negative")
        depth, top = self._depth, self._top
        if depth[u] < k:
            return None
        target = depth[u] - k
        while depth[top[u]] > target:
            u = self._parent[top[u]]
        return self._seq[self._dfn[u] - depth[u] + target]

    def path_ranges(self, u, v):
        """Inclusive position ranges that together cover the path ``u``..``v``."""
        self._check(u)
        self._check(v)
        top, depth, dfn = self._top, self._depth, self._dfn
        ranges = []
        while top[u] != top[v]:
            if depth[top[u]] < depth[top[v]]:
                u, v = v, u
            ranges.append((dfn[top[u]], dfn[u]))
            u = self._parent[top[u]]
        if depth[u] > depth[v]:
            u, v = v, u
        ranges.append((dfn[u], dfn[v]))
        return ranges

    def subtree_range(self, u):
        """Inclusive position range covering the subtree of ``u``."""
        self._check(u)
        start = self._dfn[u]
        return start, start + self._size[u] - 1


class PathSegmentTree(HeavyLightDecomposition):
    """Lazy segment tree laid over a tree's vertices for path and subtree work.

    The operations are those of :class:`LazySegmentTree`. ``values`` holds
    the value of vertex ``u`` at index ``u - 1``; when omitted every vertex
    starts at ``identity``.
    """

    def __init__(self, n, edges, op, identity, mapping, composition, tag_identity,
                 values=None, root=1):
        super().__init__(n, edges, root)
        if values is None:
            values = [identity] * n
        else:
            values = list(values)
            if len(values) != n:
                raise ValueError(f"expected {n} values, got {len(values)}")
        self._op = op
        self._identity = identity
        self._tree = LazySegmentTree(
            (values[u - 1] for u in self._seq),
            op, identity, mapping, composition, tag_identity,
        )

    def set_point(self, u, value):
        """Replace the value of vertex ``u``."""
        self._check(u)
        self._tree.set(self._dfn[u], value)

    def update_path(self, u, v, tag):
        """Apply ``tag`` to every vertex on the path ``u``..``v``."""
        for l, r in self.path_ranges(u, v):
            self._tree.range_apply(l, r, tag)

    def update_subtree(self, u, tag):
        """Apply ``tag`` to every vertex in the subtree of ``u``."""
        l, r = self.subtree_range(u)
        self._tree.range_apply(l, r, tag)

    def query_path(self, u, v):
        """Combine the values of the vertices on the path ``u``..``v``."""
        result = self._identity
        for l, r in self.path_ranges(u, v):
            result = self._op(result, self._tree.range_query(l, r))
        return result

    def query_point(self, u):
        """Value of vertex ``u``."""
        return self.query_path(u, u)

    def query_subtree(self, u):
        """Combine the values of the subtree of ``u``."""
        l, r = self.subtree_range(u)
        return self._tree.range_query(l, r)


def _sum_op(a, b):
    return a[0] + b[0], a[1] + b[1]


def _sum_mapping(tag, info):
    return info[0] + tag * info[1], info[1]


def _add(a, b):
    return a + b


def _max_mapping(tag, value):
    return value + tag


class PathSumTree(PathSegmentTree):
    """Vertex values with additions and sums over paths and subtrees."""

    def __init__(self, n, edges, values, root=1):
        values = list(values)
        if len(values) != n:
            raise ValueError(f"expected {n} values, got {len(values)}")
        super().__init__(
            n, edges, _sum_op, (0, 0), _sum_mapping, _add, 0,
            values=[(x, 1) for x in values], root=root,
        )

    def add_path(self, u, v, k):
        """Add ``k`` to every vertex on the path ``u``..``v``."""
        self.update_path(u, v, k)

    def add_subtree(self, u, k):
        """Add ``k`` to every vertex in the subtree of ``u``."""
        self.update_subtree(u, k)

    def sum_path(self, u, v):
        """Sum of the values on the path ``u``..``v``."""
        return self.query_path(u, v)[0]

    def sum_subtree(self, u):
        """Sum of the values in the subtree of ``u``."""
        return self.query_subtree(u)[0]


class PathMaxTree(PathSegmentTree):
    """Vertex values with additions and maxima over paths and subtrees."""

    def __init__(self, n, edges, values, root=1):
        super().__init__(
            n, edges, max, float("-inf"), _max_mapping, _add, 0,
            values=values, root=root,
        )

    def add_path(self, u, v, k):
        """Add ``k`` to every vertex on the path ``u``..``v``."""
        self.update_path(u, v, k)

    def add_subtree(self, u, k):
        """Add ``k`` to every vertex in the subtree of ``u``."""
        self.update_subtree(u, k)

    def max_path(self, u, v):
        """Largest value on the path ``u``..``v``."""
        return self.query_path(u, v)

    def max_subtree(self, u):
        """Largest value in the subtree of ``u``."""
        return self.query_subtree(u)