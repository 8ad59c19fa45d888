"""Default dictionary discovery with a built-in fallback word list."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprie.checker import SpellChecker

log = logging.getLogger("sprie")

PACKAGE_DATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data", "dictionary.txt")

SEARCH_PATHS = (
    PACKAGE_DATA,
    "dictionary.txt",
    os.path.join("data", "dictionary.txt"),
    "/usr/share/dict/words",
    "/usr/dict/words",
)

MINIMAL_WORDS = (
    "the", "be", "to", "of", "and", "in", "that", "have", "it", "for",
    "not", "on", "with", "he", "as", "you", "do", "at", "this", "but",
    "his", "by", "from", "they", "we", "say", "her", "she", "or", "an",
    "will", "my", "one", "all", "would", "there", "their", "what", "so",
    "up", "out", "if", "about", "who", "get", "which", "go",
    "hello", "world", "example", "test", "file", "spell", "check", "word",
    "text", "language", "computer", "program", "software", "application",
)


def find_dictionary(explicit: str | None = None) -> str | None:
    """First existing word list: *explicit*, then the usual locations."""
    search_paths: list[str] = []
    if explicit:
        search_paths.append(explicit)
    search_paths.extend(SEARCH_PATHS)

    for path in search_paths:
        if os.path.exists(path):
            return path
    return None


def load_default_dictionary(checker: SpellChecker, path: str | None = None) -> str | None:
    """Load the discovered word list into *checker*.

    Returns the path that was loaded, or None when the built-in minimal
    list had to be used instead.
    """
    found = find_dictionary(path)
    if path and found != path:
        log.warning("Dictionary file not found: %s", path)

    if found is not None:
        checker.load_dictionary_from_file(found)
        if checker.word_count:
            return found

    log.warning("No dictionary file found -- using built-in minimal word list.")
    log.warning("Run bootstrap.py or pass --dictionary for best results.")
    checker.load_dictionary(MINIMAL_WORDS)
    return None
