"""Gitignore handling for directory traversal, using pathspec."""

from __future__ import annotations

from pathlib import Path

import pathspec


def compile_patterns(lines: list[str]) -> pathspec.PathSpec | None:
    """
    Compile gitignore-syntax lines into a `PathSpec`, skipping blanks and comments.
    Returns `None` when nothing is left.
    """
    lines = [line for line in lines if line.strip() and not line.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def load_gitignore(directory: Path) -> pathspec.PathSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `PathSpec`,
    or `None` if the file is missing, unreadable, not UTF-8, or empty.
    """
    gitignore = directory / ".gitignore"
    try:
        text = gitignore.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return compile_patterns(text.splitlines())
