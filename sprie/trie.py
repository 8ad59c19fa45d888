"""Prefix trie for word, prefix and bounded edit-distance lookups."""

from __future__ import annotations

import logging

log = logging.getLogger("sprie.trie")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def sorted_children(self) -> list[tuple[str, TrieNode]]:
        """Children in character-code order, so every traversal is deterministic."""
        return sorted(self.children.items())


class Trie:
    """Prefix trie over a lowercased word list.

    Words are stored lowercase; every query is lowercased before it walks
    the tree.  Enumeration always visits children in character-code order.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def insert(self, word: str) -> None:
        word = word.lower()
        if not word:
            # the root must never become terminal
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word.lower())
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix.lower()) is not None

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Every stored word starting with *prefix*, in traversal order."""
        prefix = prefix.lower()
        node = self._walk(prefix)
        if node is None:
            return []
        results: list[str] = []
        self._collect(node, prefix, results)
        return results

    def all_words(self) -> list[str]:
        results: list[str] = []
        self._collect(self.root, "", results)
        return results

    def words_within_distance(self, query: str, max_distance: int) -> list[str]:
        """Every stored word within *max_distance* edits of *query*.

        One Levenshtein row is carried down each path: a child's row is
        derived from its parent's in O(len(query)).  A subtree is skipped
        once every entry of the row exceeds *max_distance*, since the row
        minimum never decreases along a path.
        """
        query = query.lower()
        results: list[str] = []
        first_row = list(range(len(query) + 1))
        for ch, child in self.root.sorted_children():
            self._search(child, ch, query, max_distance, first_row, results)
        log.debug("%d words within distance %d of %r", len(results), max_distance, query)
        return results

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _collect(self, node: TrieNode, word: str, results: list[str]) -> None:
        if node.is_terminal:
            results.append(word)
        for ch, child in node.sorted_children():
            self._collect(child, word + ch, results)

    def _search(
        self,
        node: TrieNode,
        word: str,
        query: str,
        max_distance: int,
        prev_row: list[int],
        results: list[str],
    ) -> None:
        ch = word[-1]
        row = [prev_row[0] + 1]
        for i in range(1, len(query) + 1):
            insert_cost = row[i - 1] + 1
            delete_cost = prev_row[i] + 1
            replace_cost = prev_row[i - 1] + (query[i - 1] != ch)
            row.append(min(insert_cost, delete_cost, replace_cost))

        if node.is_terminal and row[-1] <= max_distance:
            results.append(word)

        if min(row) <= max_distance:
            for next_ch, child in node.sorted_children():
                self._search(child, word + next_ch, query, max_distance, row, results)
