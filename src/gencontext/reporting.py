"""
Diagnostic channel for resolution, classification, and emission.

Library code never prints directly. It reports through a `Reporter`, and the CLI
supplies one that writes to stderr.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO


class Reporter(Protocol):
    """Receives non-fatal diagnostics."""

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class StderrReporter:
    """Writes every diagnostic as one line on stderr (or the given stream)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def error(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)

    def info(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)


@dataclass
class CollectingReporter:
    """Keeps diagnostics in memory, for API callers and tests."""

    errors: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)
