"""Max-heap with deletion of arbitrary values."""

import heapq


class DeletableHeap:
    """Max-heap whose deletions are recorded and applied lazily at ``top``."""

    def __init__(self):
        self._items = []
        self._removed = []

    def push(self, x):
        """Insert ``x``."""
        heapq.heappush(self._items, -x)

    def discard(self, x):
        """Remove one copy of ``x``, which must be present."""
        heapq.heappush(self._removed, -x)

    def top(self):
        """Return the largest value still present."""
        items, removed = self._items, self._removed
        while removed and items and items[0] == removed[0]:
            heapq.heappop(items)
            heapq.heappop(removed)
        if not items:
            raise IndexError("top of empty heap")
        return -items[0]