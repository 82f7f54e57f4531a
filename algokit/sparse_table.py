"""Sparse tables for static range queries."""


class SparseTable:
    """Static range queries over ``values`` combined with ``op``.

    Positions are ``0..len(values)-1`` and ranges are inclusive.
    """

    def __init__(self, values, op):
        self._op = op
        level = list(values)
        self._n = len(level)
        self._table = [level]
        j = 1
        while (1 << j) <= self._n:
            prev = self._table[-1]
            half = 1 << (j - 1)
            self._table.append(
                [op(prev[i], prev[i + half]) for i in range(self._n - (1 << j) + 1)]
            )
            j += 1

    def __len__(self):
        return self._n

    def _check(self, l, r):
        if not 0 <= l <= r < self._n:
            raise IndexError(f"range {l}..{r} out of bounds")

    def query(self, l, r):
        """Combine ``l..r`` from two overlapping blocks; ``op`` must be idempotent."""
        self._check(l, r)
        k = (r - l + 1).bit_length() - 1
        level = self._table[k]
        return self._op(level[l], level[r - (1 << k) + 1])

    def fold(self, l, r):
        """Combine ``l..r`` left to right from disjoint blocks."""
        self._check(l, r)
        result = self._table[0][l]
        p = l + 1
        for i in reversed(range(len(self._table))):
            if p + (1 << i) - 1 <= r:
                result = self._op(result, self._table[i][p])
                p += 1 << i
        return result