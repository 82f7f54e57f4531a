"""Prefix tree counting inserted words."""


class Trie:
    """Multiset of strings stored as a prefix tree."""

    def __init__(self):
        self._children = [{}]
        self._count = [0]

    def insert(self, word):
        """Add one copy of ``word``."""
        node = 0
        for ch in word:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = len(self._children)
                self._children[node][ch] = nxt
                self._children.append({})
                self._count.append(0)
            node = nxt
        self._count[node] += 1

    def count(self, word):
        """Number of times ``word`` was inserted."""
        node = 0
        for ch in word:
            node = self._children[node].get(ch)
            if node is None:
                return 0
        return self._count[node]