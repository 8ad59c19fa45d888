"""sprie -- trie-backed spell checker."""

__version__ = "1.0.0"

from sprie.trie import Trie, TrieNode
from sprie.distance import levenshtein_distance
from sprie.suggest import SUBSTITUTIONS, suggest
from sprie.options import SpellCheckOptions
from sprie.result import SpellCheckResult
from sprie.checker import SpellChecker
from sprie.dictionary import find_dictionary, load_default_dictionary
from sprie.report import format_results, generate_report

__all__ = [
    "SUBSTITUTIONS",
    "SpellCheckOptions",
    "SpellCheckResult",
    "SpellChecker",
    "Trie",
    "TrieNode",
    "find_dictionary",
    "format_results",
    "generate_report",
    "levenshtein_distance",
    "load_default_dictionary",
    "suggest",
]
