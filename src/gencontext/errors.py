"""Top-level failures of a gencontext run."""

from __future__ import annotations


class ContextError(ValueError):
    """A run produced nothing to emit."""


class NoMatchingFilesError(ContextError):
    def __init__(self) -> None:
        super().__init__("No matching files found")


class NoTextFilesError(ContextError):
    def __init__(self) -> None:
        super().__init__("No text files found")
