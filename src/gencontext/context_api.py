"""
Programmatic entry points: resolve specifiers, drop binary files, and emit the
bundle.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from strif import atomic_output_file

from gencontext.classifier import filter_text_files
from gencontext.emitter import emit_files
from gencontext.errors import NoMatchingFilesError, NoTextFilesError
from gencontext.file_resolver import FileResolver, ResolverConfig
from gencontext.reporting import Reporter, StderrReporter


@dataclass
class ContextResult:
    """What a run selected, skipped, and actually wrote."""

    files: list[str]
    skipped_files: list[str] = field(default_factory=list)
    written_files: list[str] = field(default_factory=list)


def resolve_context_files(
    paths: Sequence[str],
    include_binary: bool = False,
    config: ResolverConfig | None = None,
    reporter: Reporter | None = None,
) -> ContextResult:
    """
    Resolve `paths` and, unless `include_binary` is set, filter out binary files.

    Raises `NoMatchingFilesError` if nothing resolves and `NoTextFilesError` if
    every resolved file is binary.
    """
    reporter = reporter if reporter is not None else StderrReporter()

    all_files = FileResolver(config, reporter).resolve(paths)
    if not all_files:
        raise NoMatchingFilesError()

    if include_binary:
        return ContextResult(files=all_files)

    filtered = filter_text_files(all_files)
    if not filtered.text_files:
        raise NoTextFilesError()
    if filtered.skipped_count:
        reporter.info(
            f"Skipped {filtered.skipped_count} binary file(s). "
            "Use --include-binary to include them."
        )
    return ContextResult(files=filtered.text_files, skipped_files=filtered.skipped_files)


def generate_context(
    paths: Sequence[str],
    output: str | TextIO = "-",
    include_binary: bool = False,
    config: ResolverConfig | None = None,
    reporter: Reporter | None = None,
) -> ContextResult:
    """
    Resolve, filter, and write the bundle for `paths`.

    `output` is a stream, `-` for stdout, or a file path. Files are written
    atomically, creating parent directories as needed.
    """
    reporter = reporter if reporter is not None else StderrReporter()
    result = resolve_context_files(paths, include_binary, config, reporter)

    if not isinstance(output, str):
        result.written_files = emit_files(result.files, output, reporter)
    elif output == "-":
        result.written_files = emit_files(result.files, sys.stdout, reporter)
    else:
        with atomic_output_file(Path(output), make_parents=True) as temp_path:
            with open(temp_path, "w", encoding="utf-8", newline="") as f:
                result.written_files = emit_files(result.files, f, reporter)
    return result
