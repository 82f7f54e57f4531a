"""Prefix function, substring search and Z-function."""


def prefix_function(s):
    """``pi[i]`` is the longest proper border of ``s[:i+1]``."""
    pi = [0] * len(s)
    j = 0
    for i in range(1, len(s)):
        while j and s[j] != s[i]:
            j = pi[j - 1]
        if s[j] == s[i]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(text, pattern):
    """Return ``(start, end)`` inclusive index pairs where ``pattern`` occurs."""
    if not pattern:
        raise ValueError("empty pattern")
    pi = prefix_function(pattern)
    m = len(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j and pattern[j] != ch:
            j = pi[j - 1]
        if pattern[j] == ch:
            j += 1
        if j == m:
            found.append((i - m + 1, i))
            j = pi[j - 1]
    return found


def z_function(s):
    """``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``; ``z[0] == len(s)``."""
    n = len(s)
    if not n:
        return []
    z = [0] * (n + 1)
    z[0] = n
    j = 1
    for i in range(1, n):
        z[i] = max(0, min(j + z[j] - i, z[i - j]))
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > j + z[j]:
            j = i
    return z[:n]