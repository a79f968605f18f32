"""Writes resolved files as fenced blocks with a relative path header."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TextIO

from gencontext.reporting import Reporter

FENCE = "```"


def read_text(path: str) -> str:
    """
    Read a whole file as UTF-8, keeping line endings as they are. Undecodable
    bytes are replaced rather than raising.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def format_block(display_path: str, content: str) -> str:
    return f"{display_path}:\n{FENCE}\n{content}\n{FENCE}\n"


def emit_files(
    files: Sequence[str],
    output: TextIO,
    reporter: Reporter,
    cwd: str | None = None,
) -> list[str]:
    """
    Write one block per file to `output`, with a blank line between blocks but
    not after the last one. Read errors are reported and the file is skipped.

    Returns the files that were written.
    """
    base = cwd if cwd is not None else os.getcwd()
    written: list[str] = []
    last_index = len(files) - 1
    for index, path in enumerate(files):
        try:
            content = read_text(path)
        except OSError as e:
            reporter.error(f"Error reading {path}: {e}")
            continue

        output.write(format_block(os.path.relpath(path, base), content))
        # The separator depends on list position, not on whether later files read.
        if index != last_index:
            output.write("\n")
        written.append(path)
    return written
