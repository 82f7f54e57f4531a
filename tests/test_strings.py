import os

import pytest
from hypothesis import given, strategies as st

from algokit.strings import find_occurrences, prefix_function, z_function

words = st.text(alphabet="ab", max_size=40)


@given(words)
def test_prefix_function_is_longest_border(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, k in enumerate(pi):
        prefix = s[: i + 1]
        assert k < len(prefix)
        assert prefix[:k] == prefix[len(prefix) - k :]
        assert all(prefix[:b] != prefix[len(prefix) - b :] for b in range(k + 1, len(prefix)))


@given(words, st.text(alphabet="ab", min_size=1, max_size=4))
def test_find_occurrences(text, pattern):
    m = len(pattern)
    expected = [(k, k + m - 1) for k in range(len(text) - m + 1) if text[k : k + m] == pattern]
    assert find_occurrences(text, pattern) == expected


def test_overlapping_matches():
    assert find_occurrences("aaaa", "aa") == [(0, 1), (1, 2), (2, 3)]


def test_empty_pattern():
    with pytest.raises(ValueError):
        find_occurrences("abc", "")


@given(words)
def test_z_function(s):
    z = z_function(s)
    assert len(z) == len(s)
    for i in range(len(s)):
        assert z[i] == len(os.path.commonprefix([s, s[i:]]))