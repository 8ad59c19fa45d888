"""Text file helpers used by the checker, report and CLI."""

from __future__ import annotations

import os


def read_file(path: str) -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(f"file not found- {path}")
    try:
        with open(os.path.abspath(path), "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"error reading file {path}- {exc}") from exc


def read_lines(path: str) -> list[str]:
    """Non-blank lines of *path*, without line endings."""
    return [line for line in read_file(path).splitlines() if line.strip()]


def write_file(path: str, content: str) -> None:
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise OSError(f"error writing file {path}- {exc}") from exc


def file_exists(path: str) -> bool:
    return os.path.exists(path)
