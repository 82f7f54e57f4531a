"""Runs of equal values over a contiguous integer range."""

from typing import Any, NamedTuple

from sortedcontainers import SortedDict


class Segment(NamedTuple):
    """Positions ``start..end`` inclusive, all holding ``value``."""

    start: int
    end: int
    value: Any


class IntervalMap:
    """Positions ``l..r`` covered by contiguous runs, each with one value."""

    def __init__(self, l, r, value):
        if l > r:
            raise ValueError("empty range")
        self._runs = SortedDict({l: (r, value)})

    def _bounds(self):
        lo = self._runs.peekitem(0)[0]
        hi = self._runs.peekitem(-1)[1][0]
        return lo, hi

    def _check(self, l, r):
        if l > r:
            raise ValueError("empty range")
        lo, hi = self._bounds()
        if l < lo or r > hi:
            raise IndexError(f"range {l}..{r} outside {lo}..{hi}")

    def split(self, pos):
        """Make a run start at ``pos`` and return it.

        Returns None when ``pos`` is one past the last position.
        """
        runs = self._runs
        if pos in runs:
            end, value = runs[pos]
            return Segment(pos, end, value)
        index = runs.bisect_right(pos) - 1
        if index < 0:
            raise IndexError(f"position {pos} before the range")
        start, (end, value) = runs.peekitem(index)
        if pos == end + 1:
            return None
        if pos > end:
            raise IndexError(f"position {pos} after the range")
        runs[start] = (pos - 1, value)
        runs[pos] = (end, value)
        return Segment(pos, end, value)

    def assign(self, l, r, value):
        """Set every position in ``l..r`` to ``value`` as one run."""
        self._check(l, r)
        self.split(r + 1)
        self.split(l)
        for start in list(self._runs.irange(l, r)):
            del self._runs[start]
        self._runs[l] = (r, value)

    def segments(self, l, r):
        """Return the runs that exactly cover ``l..r``, in order."""
        self._check(l, r)
        self.split(r + 1)
        self.split(l)
        return [
            Segment(start, *self._runs[start]) for start in self._runs.irange(l, r)
        ]

    def __iter__(self):
        for start, (end, value) in self._runs.items():
            yield Segment(start, end, value)