"""
Text/binary classification.

The verdict is a pure function of the first few kilobytes of a file: a zero
byte anywhere in the sample means binary, otherwise the share of printable
ASCII bytes (plus tab, newline and carriage return) in the first kilobyte
decides.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

SAMPLE_SIZE = 8192
"""Bytes read from each file; zero bytes are searched for in this whole window."""

PRINTABLE_WINDOW = 1024
"""Bytes over which the printable ratio is computed."""

MIN_PRINTABLE_RATIO = 0.8

_PRINTABLE = frozenset(range(32, 127)) | {9, 10, 13}


class Classification(Enum):
    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True)
class FilterResult:
    """Files kept as text and files skipped as binary, both in input order."""

    text_files: list[str]
    skipped_files: list[str]

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_files)


def classify_bytes(data: bytes) -> Classification:
    """Classify a byte sample. Empty input is text."""
    if not data:
        return Classification.TEXT

    if 0 in data[:SAMPLE_SIZE]:
        return Classification.BINARY

    window = data[:PRINTABLE_WINDOW]
    printable = sum(1 for byte in window if byte in _PRINTABLE)
    if printable / len(window) < MIN_PRINTABLE_RATIO:
        return Classification.BINARY
    return Classification.TEXT


def is_binary_bytes(data: bytes) -> bool:
    return classify_bytes(data) is Classification.BINARY


def is_binary_file(path: str) -> bool:
    """
    Read the head of `path` and classify it. A file that can't be read is
    reported as not binary, leaving the error to whoever reads it next.
    """
    try:
        with open(path, "rb") as f:
            sample = f.read(SAMPLE_SIZE)
    except OSError:
        return False
    return is_binary_bytes(sample)


def filter_text_files(files: Sequence[str]) -> FilterResult:
    """Split `files` into text and binary, preserving order."""
    text_files: list[str] = []
    skipped_files: list[str] = []
    for path in files:
        if is_binary_file(path):
            skipped_files.append(path)
        else:
            text_files.append(path)
    return FilterResult(text_files=text_files, skipped_files=skipped_files)
