"""
Tests for default dictionary discovery
======================================
"""

import logging

import pytest

import sprie.dictionary as dictionary
from sprie.checker import SpellChecker


@pytest.fixture
def no_search_paths(monkeypatch):
    monkeypatch.setattr(dictionary, "SEARCH_PATHS", ())


class TestFindDictionary:
    """Tests for find_dictionary."""

    def test_explicit_path_first(self, tmp_path):
        """Test that an existing explicit path wins."""
        path = tmp_path / "words.txt"
        path.write_text("hello\n", encoding="utf-8")
        assert dictionary.find_dictionary(str(path)) == str(path)

    def test_nothing_found(self, no_search_paths, tmp_path):
        """Test that None is returned when no file exists."""
        assert dictionary.find_dictionary(str(tmp_path / "missing.txt")) is None


class TestLoadDefaultDictionary:
    """Tests for load_default_dictionary."""

    def test_loads_file(self, tmp_path):
        """Test loading an explicit word list."""
        path = tmp_path / "words.txt"
        path.write_text("# list\nsprie\nchecker\n", encoding="utf-8")
        checker = SpellChecker()
        assert dictionary.load_default_dictionary(checker, str(path)) == str(path)
        assert checker.word_count == 2

    def test_minimal_fallback(self, no_search_paths, caplog):
        """Test the built-in word list when nothing is on disk."""
        checker = SpellChecker()
        with caplog.at_level(logging.WARNING, logger="sprie"):
            assert dictionary.load_default_dictionary(checker) is None
        assert "minimal word list" in caplog.text
        assert checker.check_word("hello").is_correct
        assert checker.word_count == len(set(dictionary.MINIMAL_WORDS))
