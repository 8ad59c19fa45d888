"""Levenshtein edit distance."""

from __future__ import annotations

import numpy as np


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes or substitutions
    turning *a* into *b*, from the full (len(a)+1) x (len(b)+1) table.

    Each row is filled in one pass: deletes and substitutions come from the
    row above, and inserts are folded in with a running minimum, since
    ``min(t[k] + j - k for k <= j)`` equals ``j + min(t[k] - k for k <= j)``.
    """
    rows, cols = len(a) + 1, len(b) + 1
    steps = np.arange(cols)
    target = np.array([ord(ch) for ch in b], dtype=np.int64)
    dp = np.zeros((rows, cols), dtype=np.int64)
    dp[0] = steps

    for i in range(1, rows):
        prev = dp[i - 1]
        cost = (target != ord(a[i - 1])).astype(np.int64)
        row = np.empty(cols, dtype=np.int64)
        row[0] = i
        row[1:] = np.minimum(prev[1:] + 1, prev[:-1] + cost)
        dp[i] = np.minimum.accumulate(row - steps) + steps
    return int(dp[rows - 1, cols - 1])
