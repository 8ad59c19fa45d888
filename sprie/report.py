"""Plain-text rendering of spell check results."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from sprie.files import write_file
from sprie.result import SpellCheckResult

NO_ERRORS = "no spelling errors found!"


def _location(result: SpellCheckResult) -> str:
    if result.line is None:
        return ""
    column = f", column {result.column}" if result.column is not None else ""
    return f" (line {result.line}{column})"


def format_results(results: Sequence[SpellCheckResult]) -> str:
    """Console listing of *results*."""
    if not results:
        return NO_ERRORS

    lines = [f"found {len(results)} spelling errors-", ""]
    for i, result in enumerate(results, start=1):
        lines.append(f'{i}. "{result.word}"{_location(result)}')
        if result.suggestions:
            lines.append(f"suggestions- {', '.join(result.suggestions)}")
        else:
            lines.append("no suggestions available")
        lines.append("")
    return "\n".join(lines)


def generate_report(results: Sequence[SpellCheckResult], output_path: str | None = None) -> str:
    """Timestamped report; also written to *output_path* when given."""
    lines = [
        "spell check report",
        f"generated- {datetime.now(timezone.utc).isoformat()}",
        f"total errors- {len(results)}",
        "",
    ]
    if not results:
        lines.append(NO_ERRORS)
    else:
        for i, result in enumerate(results, start=1):
            suggestions = ", ".join(result.suggestions) if result.suggestions else "none"
            lines.append(f'{i}. "{result.word}"{_location(result)}')
            lines.append(f"   suggestions: {suggestions}")
            lines.append("")

    report = "\n".join(lines).rstrip() + "\n"
    if output_path:
        write_file(output_path, report)
    return report
