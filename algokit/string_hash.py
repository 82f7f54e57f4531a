"""Polynomial rolling hashes of a string, forward and reversed.

Positions are 1-based and ranges ``l..r`` inclusive; ``l == r + 1`` is empty.
"""

DEFAULT_BASE = 131
DEFAULT_MOD = 1410412741


class SingleHash:
    """Prefix and suffix hashes of ``s`` under one base and modulus."""

    def __init__(self, s, base=DEFAULT_BASE, mod=DEFAULT_MOD):
        self.n = len(s)
        self.mod = mod
        codes = [ord(ch) for ch in s]
        self._pw = [1] * (self.n + 1)
        self._fwd = [0] * (self.n + 1)
        self._rev = [0] * (self.n + 2)
        for i, c in enumerate(codes, start=1):
            self._pw[i] = self._pw[i - 1] * base % mod
            self._fwd[i] = (self._fwd[i - 1] * base + c) % mod
        for i in range(self.n, 0, -1):
            self._rev[i] = (self._rev[i + 1] * base + codes[i - 1]) % mod

    def _check(self, l, r):
        if not (1 <= l and r <= self.n and l <= r + 1):
            raise IndexError(f"range {l}..{r} out of bounds")

    def get(self, l, r):
        """Hash of ``s[l..r]`` read forward."""
        self._check(l, r)
        return (self._fwd[r] - self._fwd[l - 1] * self._pw[r - l + 1]) % self.mod

    def get_reversed(self, l, r):
        """Hash of ``s[l..r]`` read backward."""
        self._check(l, r)
        return (self._rev[l] - self._rev[r + 1] * self._pw[r - l + 1]) % self.mod

    def is_palindrome(self, l, r):
        return self.get(l, r) == self.get_reversed(l, r)

    def same(self, l1, r1, l2, r2):
        return self.get(l1, r1) == self.get(l2, r2)

    def _join(self, h1, h2, l2, r2):
        return (h1 * self._pw[r2 - l2 + 1] + h2) % self.mod

    def merge_ff(self, l1, r1, l2, r2):
        """Hash of the first range forward followed by the second forward."""
        return self._join(self.get(l1, r1), self.get(l2, r2), l2, r2)

    def merge_fr(self, l1, r1, l2, r2):
        """Hash of the first range forward followed by the second reversed."""
        return self._join(self.get(l1, r1), self.get_reversed(l2, r2), l2, r2)

    def merge_rf(self, l1, r1, l2, r2):
        """Hash of the first range reversed followed by the second forward."""
        return self._join(self.get_reversed(l1, r1), self.get(l2, r2), l2, r2)

    def merge_rr(self, l1, r1, l2, r2):
        """Hash of the first range reversed followed by the second reversed."""
        return self._join(self.get_reversed(l1, r1), self.get_reversed(l2, r2), l2, r2)


class DoubleHash:
    """Two independent hashes; results are pairs."""

    def __init__(self, s):
        self._first = SingleHash(s, 131, 1_000_000_007)
        self._second = SingleHash(s, 13331, 998244353)

    def _pair(self, name, *args):
        return getattr(self._first, name)(*args), getattr(self._second, name)(*args)

    def get(self, l, r):
        return self._pair("get", l, r)

    def get_reversed(self, l, r):
        return self._pair("get_reversed", l, r)

    def is_palindrome(self, l, r):
        return self._first.is_palindrome(l, r) and self._second.is_palindrome(l, r)

    def same(self, l1, r1, l2, r2):
        return self._first.same(l1, r1, l2, r2) and self._second.same(l1, r1, l2, r2)

    def merge_ff(self, l1, r1, l2, r2):
        return self._pair("merge_ff", l1, r1, l2, r2)

    def merge_fr(self, l1, r1, l2, r2):
        return self._pair("merge_fr", l1, r1, l2, r2)

    def merge_rf(self, l1, r1, l2, r2):
        return self._pair("merge_rf", l1, r1, l2, r2)

    def merge_rr(self, l1, r1, l2, r2):
        return self._pair("merge_rr", l1, r1, l2, r2)