"""Ranked correction candidates for a misspelled word.

Candidates come from three sources, consulted in order until the budget
is filled:

  1. Dictionary words within the edit-distance bound, nearest first
     (ties keep trie order).
  2. Dictionary words sharing the first three letters of the query.
  3. Literal letter substitutions (ph/f, c/k, z/s, i/y) that produce a
     dictionary word.

The substitution table is ordered: when the budget truncates the list,
earlier rules win.
"""

from __future__ import annotations

import logging

from sprie.distance import levenshtein_distance
from sprie.trie import Trie
from sprie.words import clean_word, normalize_word

log = logging.getLogger("sprie.suggest")

PREFIX_LENGTH = 3

SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("ph", "f"),
    ("f", "ph"),
    ("c", "k"),
    ("k", "c"),
    ("z", "s"),
    ("s", "z"),
    ("i", "y"),
    ("y", "i"),
)


def suggest(
    word: str,
    dictionary: Trie,
    max_suggestions: int = 5,
    max_distance: int = 2,
    include_prefix: bool = True,
) -> list[str]:
    """Up to *max_suggestions* distinct candidates for *word*, best first."""
    query = normalize_word(clean_word(word))
    picked: dict[str, None] = {}

    def room() -> int:
        return max_suggestions - len(picked)

    if room() <= 0:
        return []

    for candidate in distance_suggestions(query, dictionary, max_distance)[:max_suggestions]:
        picked.setdefault(candidate)

    if include_prefix and room() > 0:
        fresh = [w for w in prefix_suggestions(query, dictionary) if w not in picked]
        for candidate in fresh[:room()]:
            picked.setdefault(candidate)

    if room() > 0:
        fresh = [w for w in substitution_suggestions(query, dictionary) if w not in picked]
        for candidate in fresh[:room()]:
            picked.setdefault(candidate)

    log.debug("suggestions for %r: %s", query, list(picked))
    return list(picked)[:max_suggestions]


def distance_suggestions(query: str, dictionary: Trie, max_distance: int) -> list[str]:
    """Words within *max_distance*, sorted by exact distance (stable)."""
    candidates = dictionary.words_within_distance(query, max_distance)
    return sorted(candidates, key=lambda w: levenshtein_distance(query, w))


def prefix_suggestions(query: str, dictionary: Trie) -> list[str]:
    prefix = query[:min(len(query), PREFIX_LENGTH)]
    return dictionary.words_with_prefix(prefix)


def substitution_suggestions(query: str, dictionary: Trie) -> list[str]:
    """Apply each rule to every occurrence; keep results the dictionary knows."""
    found: list[str] = []
    for old, new in SUBSTITUTIONS:
        if old in query:
            candidate = query.replace(old, new)
            if dictionary.contains(candidate):
                found.append(candidate)
    return found
