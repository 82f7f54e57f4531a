"""Sorted set with rank and select queries."""

from sortedcontainers import SortedList


class OrderedSet:
    """Set of distinct, mutually comparable values kept in sorted order."""

    def __init__(self, iterable=()):
        self._items = SortedList(set(iterable))

    def add(self, value):
        """Insert ``value`` if it is not present."""
        if value not in self._items:
            self._items.add(value)

    def discard(self, value):
        """Remove ``value`` if it is present."""
        self._items.discard(value)

    def order_of_key(self, value):
        """Number of stored values strictly less than ``value``."""
        return self._items.bisect_left(value)

    def find_by_order(self, k):
        """Return the value of zero-based rank ``k``."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"rank {k} out of range")
        return self._items[k]

    def __len__(self):
        return len(self._items)

    def __contains__(self, value):
        return value in self._items

    def __iter__(self):
        return iter(self._items)