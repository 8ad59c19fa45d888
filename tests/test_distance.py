"""
Tests for Levenshtein distance
==============================
"""

import pytest

from sprie.distance import levenshtein_distance


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize("a, b, expected", [
        ("cat", "cat", 0),
        ("cat", "bat", 1),
        ("cat", "cats", 1),
        ("cats", "cat", 1),
        ("kitten", "sitting", 3),
        ("wrold", "world", 2),
        ("flaw", "lawn", 2),
    ])
    def test_known_distances(self, a, b, expected):
        """Test distances for classic pairs."""
        assert levenshtein_distance(a, b) == expected

    def test_empty_strings(self):
        """Test that distance to the empty string is the other length."""
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("", "spell") == 5
        assert levenshtein_distance("spell", "") == 5

    @pytest.mark.parametrize("a, b", [
        ("helo", "hello"), ("careful", "cat"), ("", "abc"), ("sunday", "saturday"),
    ])
    def test_symmetric(self, a, b):
        """Test that argument order does not change the result."""
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_matches_plain_table(self):
        """Test the row-wise fill against a cell-by-cell table."""
        def plain(a, b):
            prev = list(range(len(b) + 1))
            for i, ca in enumerate(a, start=1):
                row = [i]
                for j, cb in enumerate(b, start=1):
                    row.append(min(prev[j] + 1, row[j - 1] + 1, prev[j - 1] + (ca != cb)))
                prev = row
            return prev[-1]

        words = ["", "a", "ab", "ba", "abc", "careful", "caret", "banana", "bandana", "aaaa"]
        for a in words:
            for b in words:
                assert levenshtein_distance(a, b) == plain(a, b)

    def test_returns_python_int(self):
        """Test that the result is a plain int, not a numpy scalar."""
        assert type(levenshtein_distance("abc", "abd")) is int
