"""Spell checker configuration."""

from __future__ import annotations

from typing import Iterable

DEFAULT_MAX_SUGGESTIONS = 5
DEFAULT_MAX_DISTANCE = 2


class SpellCheckOptions:
    """Tuning knobs for a SpellChecker.  ``None`` means "use the default"."""

    __slots__ = (
        "max_suggestions", "max_distance", "include_prefix_suggestions",
        "ignore_common_words", "custom_ignore_words",
    )

    def __init__(
        self,
        max_suggestions: int | None = None,
        max_distance: int | None = None,
        include_prefix_suggestions: bool | None = None,
        ignore_common_words: bool | None = None,
        custom_ignore_words: Iterable[str] | None = None,
    ):
        if max_suggestions is None:
            max_suggestions = DEFAULT_MAX_SUGGESTIONS
        if max_distance is None:
            max_distance = DEFAULT_MAX_DISTANCE
        if max_suggestions < 0:
            raise ValueError(f"max_suggestions must be >= 0, got {max_suggestions}")
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")

        self.max_suggestions = max_suggestions
        self.max_distance = max_distance
        self.include_prefix_suggestions = include_prefix_suggestions is not False
        self.ignore_common_words = ignore_common_words is not False
        self.custom_ignore_words: tuple[str, ...] = tuple(custom_ignore_words or ())

    def __repr__(self) -> str:
        return (
            f"SpellCheckOptions(max_suggestions={self.max_suggestions}, "
            f"max_distance={self.max_distance}, "
            f"include_prefix_suggestions={self.include_prefix_suggestions}, "
            f"ignore_common_words={self.ignore_common_words}, "
            f"custom_ignore_words={list(self.custom_ignore_words)})"
        )
