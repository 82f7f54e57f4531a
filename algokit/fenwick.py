"""Binary indexed trees: point update, range update and two-dimensional."""


class Fenwick:
    """Point additions and prefix sums over positions ``0..n-1``."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._tree = [0] * n

    def __len__(self):
        return self._n

    def add(self, i, value):
        """Add ``value`` at position ``i``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range")
        i += 1
        while i <= self._n:
            self._tree[i - 1] += value
            i += i & -i

    def prefix_sum(self, i):
        """Sum of positions ``0..i``; zero when ``i`` is negative."""
        if i >= self._n:
            raise IndexError(f"position {i} out of range")
        total = 0
        i += 1
        while i > 0:
            total += self._tree[i - 1]
            i -= i & -i
        return total

    def range_sum(self, l, r):
        """Sum of positions ``l..r`` inclusive."""
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def kth(self, k):
        """Smallest position whose prefix sum reaches ``k``.

        Values must be non-negative. Returns ``len(self)`` when the total
        stays below ``k``.
        """
        pos = 0
        cur = 0
        step = 1 << (self._n.bit_length() - 1) if self._n else 0
        while step:
            if pos + step <= self._n and cur + self._tree[pos + step - 1] < k:
                pos += step
                cur += self._tree[pos - 1]
            step >>= 1
        return pos


class RangeFenwick:
    """Range additions and range sums over positions ``1..n``."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._base = [0] * (n + 2)
        self._scaled = [0] * (n + 2)

    def _add(self, tree, x, value):
        while x <= self._n:
            tree[x] += value
            x += x & -x

    @staticmethod
    def _sum(tree, x):
        total = 0
        while x > 0:
            total += tree[x]
            x -= x & -x
        return total

    def range_add(self, l, r, value):
        """Add ``value`` to every position in ``l..r``."""
        if l > r:
            raise ValueError("empty range")
        if l < 1 or r > self._n:
            raise IndexError(f"range {l}..{r} out of bounds")
        self._add(self._base, l, value)
        self._add(self._base, r + 1, -value)
        self._add(self._scaled, l, l * value)
        self._add(self._scaled, r + 1, -(r + 1) * value)

    def prefix_sum(self, x):
        """Sum of positions ``1..x``; zero when ``x`` is below 1."""
        if x > self._n:
            raise IndexError(f"position {x} out of range")
        return self._sum(self._base, x) * (x + 1) - self._sum(self._scaled, x)

    def range_sum(self, l, r):
        """Sum of positions ``l..r`` inclusive."""
        return self.prefix_sum(r) - self.prefix_sum(l - 1)


class Fenwick2D:
    """Point additions and rectangle sums over ``1..n`` by ``1..m``."""

    def __init__(self, n, m):
        if n < 0 or m < 0:
            raise ValueError("dimensions must be non-negative")
        self._n = n
        self._m = m
        self._tree = [[0] * (m + 1) for _ in range(n + 1)]

    def add(self, x, y, value):
        """Add ``value`` at cell ``(x, y)``."""
        if not (1 <= x <= self._n and 1 <= y <= self._m):
            raise IndexError(f"cell ({x}, {y}) out of range")
        i = x
        while i <= self._n:
            row = self._tree[i]
            j = y
            while j <= self._m:
                row[j] += value
                j += j & -j
            i += i & -i

    def prefix_sum(self, x, y):
        """Sum of the rectangle ``1..x`` by ``1..y``."""
        if x > self._n or y > self._m:
            raise IndexError(f"cell ({x}, {y}) out of range")
        total = 0
        i = x
        while i > 0:
            row = self._tree[i]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_sum(self, x1, y1, x2, y2):
        """Sum of the rectangle ``x1..x2`` by ``y1..y2`` inclusive."""
        return (
            self.prefix_sum(x2, y2)
            - self.prefix_sum(x2, y1 - 1)
            - self.prefix_sum(x1 - 1, y2)
            + self.prefix_sum(x1 - 1, y1 - 1)
        )