"""Shared fixtures."""

import pytest

from sprie.trie import Trie

SMALL_DICTIONARY = ["hello", "world", "test", "spell", "check", "word", "help"]
CAR_WORDS = ["cat", "car", "card", "care", "careful"]

WORD_LIST = [
    "apple", "apply", "ape", "application", "banana", "band", "bandana",
    "can", "cane", "candle", "cat", "catch", "dog", "dot", "dote", "zebra",
]


@pytest.fixture
def car_trie() -> Trie:
    trie = Trie()
    for word in CAR_WORDS:
        trie.insert(word)
    return trie


@pytest.fixture
def word_trie() -> Trie:
    trie = Trie()
    for word in WORD_LIST:
        trie.insert(word)
    return trie
