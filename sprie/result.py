"""Per-token spell check result."""

from __future__ import annotations

from typing import Iterable


class SpellCheckResult:
    """Outcome of checking one token.  Line and column are 1-based and only
    set for document checks."""

    __slots__ = ("word", "is_correct", "suggestions", "line", "column")

    def __init__(
        self,
        word: str,
        is_correct: bool,
        suggestions: Iterable[str] = (),
        line: int | None = None,
        column: int | None = None,
    ):
        self.word = word
        self.is_correct = is_correct
        self.suggestions: tuple[str, ...] = tuple(suggestions)
        self.line = line
        self.column = column

    def located(self, line: int, column: int | None) -> SpellCheckResult:
        """Copy of this result carrying a document position."""
        return SpellCheckResult(self.word, self.is_correct, self.suggestions, line, column)

    def to_dict(self) -> dict:
        data = {
            "word": self.word,
            "is_correct": self.is_correct,
            "suggestions": list(self.suggestions),
        }
        if self.line is not None:
            data["line"] = self.line
        if self.column is not None:
            data["column"] = self.column
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpellCheckResult):
            return NotImplemented
        return (
            self.word == other.word
            and self.is_correct == other.is_correct
            and self.suggestions == other.suggestions
            and self.line == other.line
            and self.column == other.column
        )

    def __hash__(self) -> int:
        return hash((self.word, self.is_correct, self.suggestions, self.line, self.column))

    def __repr__(self) -> str:
        status = "ok" if self.is_correct else "misspelled"
        where = f" @{self.line}:{self.column}" if self.line is not None else ""
        hints = f" -> {', '.join(self.suggestions)}" if self.suggestions else ""
        return f"{self.word!r} {status}{where}{hints}"
