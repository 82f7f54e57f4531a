"""Disjoint-set union (union-find)."""


class DSU:
    """Disjoint sets over the elements ``0..n``.

    ``merge(x, y)`` attaches the root of ``y`` under the root of ``x``;
    ``find`` compresses paths by halving.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def find(self, x):
        """Return the representative of the set holding ``x``."""
        parent = self._parent
        if not 0 <= x < len(parent):
            raise IndexError(f"element {x} out of range")
        while x != parent[x]:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def same(self, x, y):
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def merge(self, x, y):
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return False
        self._size[x] += self._size[y]
        self._parent[y] = x
        return True

    def size(self, x):
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]