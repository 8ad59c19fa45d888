"""Spell checker: dictionary trie, ignore list and suggestion ranking."""

from __future__ import annotations

import logging
from typing import Iterable

from sprie.files import read_file, read_lines
from sprie.options import SpellCheckOptions
from sprie.result import SpellCheckResult
from sprie.suggest import suggest
from sprie.trie import Trie
from sprie.words import COMMON_WORDS, clean_word, extract_words, is_valid_word, normalize_word

log = logging.getLogger("sprie")


class SpellChecker:
    """Checks words, text and documents against a trie-backed dictionary.

    Words in the ignore set are always reported correct.  The ignore set
    starts with the built-in common words (unless disabled) plus any
    ``custom_ignore_words`` from the options.
    """

    def __init__(self, options: SpellCheckOptions | None = None):
        self.options = options or SpellCheckOptions()
        self._trie = Trie()
        self.ignore_words: set[str] = set()
        if self.options.ignore_common_words:
            self.ignore_words.update(COMMON_WORDS)
        for word in self.options.custom_ignore_words:
            self.add_ignore_word(word)

    @property
    def dictionary(self) -> Trie:
        return self._trie

    @property
    def word_count(self) -> int:
        return len(self._trie)

    # dictionary management

    def load_dictionary(self, words: Iterable[str]) -> int:
        """Insert every valid word; ``#`` comments and blank lines are skipped.
        Returns the number of words accepted."""
        accepted = 0
        for raw in words:
            if not raw.strip() or raw.lstrip().startswith("#"):
                continue
            if self.add_word(raw):
                accepted += 1
        return accepted

    def load_dictionary_from_file(self, path: str) -> int:
        lines = read_lines(path)
        accepted = self.load_dictionary(lines)
        log.info("Loaded %s words from %s", f"{accepted:,}", path)
        return accepted

    def add_word(self, word: str) -> bool:
        cleaned = clean_word(word)
        if not is_valid_word(cleaned):
            log.debug("Rejected dictionary entry %r", word)
            return False
        self._trie.insert(cleaned)
        return True

    def add_ignore_word(self, word: str) -> None:
        self.ignore_words.add(normalize_word(word))

    def remove_ignore_word(self, word: str) -> None:
        self.ignore_words.discard(normalize_word(word))

    def is_ignored(self, word: str) -> bool:
        return normalize_word(clean_word(word)) in self.ignore_words

    # checking

    def check_word(self, word: str) -> SpellCheckResult:
        cleaned = clean_word(word)
        if normalize_word(cleaned) in self.ignore_words:
            return SpellCheckResult(word, True)
        if not is_valid_word(cleaned):
            return SpellCheckResult(word, False)
        if self._trie.contains(cleaned):
            return SpellCheckResult(word, True)
        return SpellCheckResult(word, False, self.get_suggestions(cleaned))

    def check_text(self, text: str) -> list[SpellCheckResult]:
        """Misspelled tokens of *text*, in document order."""
        results = (self.check_word(w) for w in extract_words(text))
        return [r for r in results if not r.is_correct]

    def check_lines(self, text: str) -> list[SpellCheckResult]:
        """Like check_text, but each result carries its 1-based line and column.

        The column is that of the token's first case-insensitive occurrence
        on its line, so a repeated token always reports the first offset.
        """
        results: list[SpellCheckResult] = []
        for line_no, line in enumerate(text.split("\n"), start=1):
            lowered = line.lower()
            for word in extract_words(line):
                result = self.check_word(word)
                if result.is_correct:
                    continue
                index = lowered.find(word.lower())
                column = index + 1 if index >= 0 else None
                results.append(result.located(line_no, column))
        return results

    def check_file(self, path: str) -> list[SpellCheckResult]:
        return self.check_lines(read_file(path))

    def get_suggestions(self, word: str) -> list[str]:
        return suggest(
            word,
            self._trie,
            max_suggestions=self.options.max_suggestions,
            max_distance=self.options.max_distance,
            include_prefix=self.options.include_prefix_suggestions,
        )
