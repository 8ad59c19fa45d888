"""Word extraction, cleaning and validation."""

from __future__ import annotations

import re
from collections import Counter

WORD_SEPARATORS = re.compile(r"[\s\-_.,!?;:()\[\]{}\"/\\]+")
PUNCTUATION = re.compile(r"[.,!?;:()\[\]{}\"/\\]")
EDGE_NON_WORD = re.compile(r"^\W+|\W+$")
DIGITS = re.compile(r"\d")
LETTER = re.compile(r"[a-zA-Z]")

COMMON_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before", "after",
    "above", "below", "between", "among", "within", "without", "under", "over",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "must", "can", "shall", "this", "that", "these", "those", "i", "you", "he",
    "she", "it", "we", "they", "me", "him", "her", "us", "them", "my", "your",
    "his", "its", "our", "their", "mine", "yours", "hers", "ours", "theirs",
})


def extract_words(text: str) -> list[str]:
    """Lowercased, cleaned, valid words of *text* in document order."""
    words = (clean_word(w) for w in WORD_SEPARATORS.split(text.lower()))
    return [w for w in words if is_valid_word(w)]


def clean_word(word: str) -> str:
    word = PUNCTUATION.sub("", word)
    return EDGE_NON_WORD.sub("", word).strip()


def is_valid_word(word: str) -> bool:
    """At least two characters, at least one letter, no digits."""
    if not word or len(word) < 2:
        return False
    if DIGITS.search(word):
        return False
    return LETTER.search(word) is not None


def normalize_word(word: str) -> str:
    return word.lower().strip()


def remove_duplicates(words: list[str]) -> list[str]:
    return list(dict.fromkeys(words))


def sort_words(words: list[str]) -> list[str]:
    return sorted(words, key=lambda w: (w.lower(), w))


def word_frequency(words: list[str]) -> Counter:
    return Counter(normalize_word(w) for w in words)


def filter_by_length(words: list[str], min_length: int = 2, max_length: int = 50) -> list[str]:
    return [w for w in words if min_length <= len(w) <= max_length]


def capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()
