"""Dynamically allocated segment tree over a range of integer values."""


class WeightSegmentTree:
    """Multiset of integers in ``lo..hi`` that sums its largest members.

    Nodes are created only along the paths of values that are added.
    """

    def __init__(self, lo, hi):
        if lo > hi:
            raise ValueError("empty value range")
        self.lo = lo
        self.hi = hi
        # Node 0 is an empty sentinel standing for every missing child.
        self._left = [0]
        self._right = [0]
        self._total = [0]
        self._count = [0]
        self._root = 0

    def _new_node(self):
        self._left.append(0)
        self._right.append(0)
        self._total.append(0)
        self._count.append(0)
        return len(self._count) - 1

    def add(self, value, count):
        """Add ``count`` copies of ``value``; a negative count removes."""
        if not self.lo <= value <= self.hi:
            raise ValueError(f"value {value} outside {self.lo}..{self.hi}")
        if not self._root:
            self._root = self._new_node()
        node, lo, hi = self._root, self.lo, self.hi
        path = []
        while lo < hi:
            path.append(node)
            mid = (lo + hi) >> 1
            if value <= mid:
                child = self._left[node]
                if not child:
                    child = self._new_node()
                    self._left[node] = child
                hi = mid
            else:
                child = self._right[node]
                if not child:
                    child = self._new_node()
                    self._right[node] = child
                lo = mid + 1
            node = child
        self._total[node] += value * count
        self._count[node] += count
        for node in reversed(path):
            left, right = self._left[node], self._right[node]
            self._total[node] = self._total[left] + self._total[right]
            self._count[node] = self._count[left] + self._count[right]

    def top_sum(self, k):
        """Sum of the ``k`` largest stored values."""
        node, lo, hi = self._root, self.lo, self.hi
        if k > self._count[node]:
            raise ValueError(f"fewer than {k} values stored")
        result = 0
        while lo < hi:
            mid = (lo + hi) >> 1
            right = self._right[node]
            if k <= self._count[right]:
                node = right
                lo = mid + 1
            else:
                k -= self._count[right]
                result += self._total[right]
                node = self._left[node]
                hi = mid
        return result + k * lo