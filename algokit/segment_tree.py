"""Segment tree with lazy range updates over user-supplied operations."""


class LazySegmentTree:
    """Range queries and lazy range updates over positions ``0..n-1``.

    Values are combined with ``op``, whose neutral element is ``identity``.
    A tag changes a value through ``mapping(tag, value)``. Two tags are
    joined by ``composition(new, old)``, and ``tag_identity`` is the tag
    that changes nothing. Ranges are inclusive; a range with ``l == r + 1``
    is empty.
    """

    def __init__(self, values, op, identity, mapping, composition, tag_identity):
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(values)
        self._op = op
        self._identity = identity
        self._mapping = mapping
        self._composition = composition
        self._tag_identity = tag_identity
        size = 4 * self._n
        self._info = [identity] * size
        self._tag = [tag_identity] * size
        self._build(1, 0, self._n - 1, values)

    def __len__(self):
        return self._n

    def _build(self, u, l, r, values):
        if l == r:
            self._info[u] = values[l]
            return
        mid = (l + r) >> 1
        self._build(2 * u, l, mid, values)
        self._build(2 * u + 1, mid + 1, r, values)
        self._pull(u)

    def _pull(self, u):
        self._info[u] = self._op(self._info[2 * u], self._info[2 * u + 1])

    def _apply_node(self, u, tag):
        self._info[u] = self._mapping(tag, self._info[u])
        self._tag[u] = self._composition(tag, self._tag[u])

    def _push(self, u):
        tag = self._tag[u]
        self._apply_node(2 * u, tag)
        self._apply_node(2 * u + 1, tag)
        self._tag[u] = self._tag_identity

    def _check_position(self, p):
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _check_range(self, l, r):
        """Validate ``l..r``; return False when it is empty."""
        if l == r + 1:
            if not 0 <= l <= self._n:
                raise IndexError(f"range {l}..{r} out of bounds")
            return False
        if not 0 <= l <= r < self._n:
            raise IndexError(f"range {l}..{r} out of bounds")
        return True

    def set(self, p, value):
        """Replace the value at position ``p``."""
        self._check_position(p)
        self._set(1, 0, self._n - 1, p, value)

    def _set(self, u, l, r, p, value):
        if l == r:
            self._info[u] = value
            return
        mid = (l + r) >> 1
        self._push(u)
        if p <= mid:
            self._set(2 * u, l, mid, p, value)
        else:
            self._set(2 * u + 1, mid + 1, r, p, value)
        self._pull(u)

    def get(self, p):
        """Return the value at position ``p``."""
        self._check_position(p)
        return self._query(1, 0, self._n - 1, p, p)

    def apply(self, p, tag):
        """Apply ``tag`` to position ``p``."""
        self._check_position(p)
        self._range_apply(1, 0, self._n - 1, p, p, tag)

    def range_apply(self, l, r, tag):
        """Apply ``tag`` to every position in ``l..r``."""
        if self._check_range(l, r):
            self._range_apply(1, 0, self._n - 1, l, r, tag)

    def _range_apply(self, u, l, r, x, y, tag):
        if r < x or l > y:
            return
        if x <= l and r <= y:
            self._apply_node(u, tag)
            return
        mid = (l + r) >> 1
        self._push(u)
        self._range_apply(2 * u, l, mid, x, y, tag)
        self._range_apply(2 * u + 1, mid + 1, r, x, y, tag)
        self._pull(u)

    def range_query(self, l, r):
        """Combine the values of ``l..r``; ``identity`` for an empty range."""
        if not self._check_range(l, r):
            return self._identity
        return self._query(1, 0, self._n - 1, l, r)

    def _query(self, u, l, r, x, y):
        if r < x or l > y:
            return self._identity
        if x <= l and r <= y:
            return self._info[u]
        mid = (l + r) >> 1
        self._push(u)
        if y <= mid:
            return self._query(2 * u, l, mid, x, y)
        if x > mid:
            return self._query(2 * u + 1, mid + 1, r, x, y)
        return self._op(
            self._query(2 * u, l, mid, x, y),
            self._query(2 * u + 1, mid + 1, r, x, y),
        )

    def find_first(self, l, r, pred):
        """Leftmost position in ``l..r`` whose value satisfies ``pred``.

        ``pred`` is tested on combined values of whole nodes and must hold
        for a combination whenever it holds for one of its parts. Returns
        None when no position qualifies.
        """
        if not self._check_range(l, r):
            return None
        return self._find(1, 0, self._n - 1, l, r, pred, leftmost=True)

    def find_last(self, l, r, pred):
        """Rightmost position in ``l..r`` whose value satisfies ``pred``."""
        if not self._check_range(l, r):
            return None
        return self._find(1, 0, self._n - 1, l, r, pred, leftmost=False)

    def _find(self, u, l, r, x, y, pred, leftmost):
        if r < x or l > y:
            return None
        if x <= l and r <= y and not pred(self._info[u]):
            return None
        if l == r:
            return l
        mid = (l + r) >> 1
        self._push(u)
        halves = [(2 * u, l, mid), (2 * u + 1, mid + 1, r)]
        if not leftmost:
            halves.reverse()
        for child, cl, cr in halves:
            found = self._find(child, cl, cr, x, y, pred, leftmost)
            if found is not None:
                return found
        return None