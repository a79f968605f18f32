"""
FileResolver: turns specifiers into a flat, deduplicated list of file paths.

Each specifier is tried in a fixed order and the first interpretation that works
wins: existing directory, then glob, then literal path. Paths are kept as the
strings produced by expansion and are never canonicalized, so `./a.txt` and
`a.txt` stay distinct.
"""

from __future__ import annotations

import glob
import os
import re
from collections.abc import Iterator, Sequence
from pathlib import Path

import pathspec

from gencontext.file_resolver.gitignore import compile_patterns, load_gitignore
from gencontext.file_resolver.types import ResolvedSpecifier, ResolverConfig, SpecifierKind
from gencontext.reporting import Reporter, StderrReporter

# (directory holding the .gitignore, compiled spec)
_IgnoreChain = list[tuple[str, pathspec.PathSpec]]
# (directory, inherited ignore chain, remaining entries)
_Frame = tuple[str, _IgnoreChain, Iterator[os.DirEntry[str]]]


class FileResolver:
    """
    Expands paths, glob patterns, and directories into concrete file paths.

    Per-specifier problems never raise: an unreadable directory is reported and
    skipped, and a specifier that matches nothing contributes no files.
    """

    def __init__(self, config: ResolverConfig | None = None, reporter: Reporter | None = None) -> None:
        self._config: ResolverConfig = config if config is not None else ResolverConfig()
        self._reporter: Reporter = reporter if reporter is not None else StderrReporter()
        self._exclude_spec: pathspec.PathSpec | None = compile_patterns(self._config.exclude)
        # Cache gitignore specs per directory to avoid re-reading from disk.
        self._gitignore_cache: dict[str, pathspec.PathSpec | None] = {}

    def resolve(self, specifiers: Sequence[str]) -> list[str]:
        """
        Resolve all specifiers and return the concatenated expansions with exact
        duplicates removed (first occurrence kept).
        """
        files: list[str] = []
        for specifier in specifiers:
            files.extend(self.resolve_specifier(specifier).files)
        return list(dict.fromkeys(files))

    def resolve_specifier(self, specifier: str) -> ResolvedSpecifier:
        """
        Interpret a single specifier:
        - Existing directory → recursively walked
        - Glob with one or more matches → the matches, as returned
        - Existing literal path → the path itself
        - Otherwise → unresolved, no files
        """
        if os.path.isdir(specifier):
            files = self.walk_directory(specifier)
            return ResolvedSpecifier(specifier, SpecifierKind.DIRECTORY, tuple(files))

        try:
            matches = glob.glob(specifier, recursive=True)
        except (OSError, ValueError, re.error):
            # A failing glob is treated like one with no matches.
            matches = []
        if matches:
            return ResolvedSpecifier(specifier, SpecifierKind.GLOB, tuple(matches))

        if os.path.exists(specifier):
            return ResolvedSpecifier(specifier, SpecifierKind.LITERAL, (specifier,))
        return ResolvedSpecifier(specifier, SpecifierKind.UNRESOLVED)

    def walk_directory(self, directory: str) -> list[str]:
        """
        List every regular file below `directory`, in directory read order.
        Symlinks are not followed.

        Traversal keeps its own stack of pending directories, so depth is bounded by
        the filesystem rather than the interpreter's recursion limit.
        """
        files: list[str] = []
        root_frame = self._open_directory(directory, [])
        if root_frame is None:
            return files

        stack: list[_Frame] = [root_frame]
        while stack:
            current, ignore_chain, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            full_path = os.path.normpath(os.path.join(current, entry.name))
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                self._reporter.error(f"Error reading directory {current}: {e}")
                stack.pop()
                continue

            if is_dir:
                if not self._is_excluded(full_path, directory, ignore_chain, is_dir=True):
                    frame = self._open_directory(full_path, ignore_chain)
                    if frame is not None:
                        stack.append(frame)
            elif is_file:
                if not self._is_excluded(full_path, directory, ignore_chain, is_dir=False):
                    files.append(full_path)
        return files

    def _open_directory(self, directory: str, ignore_chain: _IgnoreChain) -> _Frame | None:
        """
        List a directory's entries up front. An unreadable directory is reported
        and yields `None`; the caller carries on with its siblings.
        """
        if self._config.respect_gitignore:
            spec = self._get_gitignore(directory)
            if spec is not None:
                ignore_chain = [*ignore_chain, (directory, spec)]

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            self._reporter.error(f"Error reading directory {directory}: {e}")
            return None
        return directory, ignore_chain, iter(entries)

    def _is_excluded(
        self, path: str, walk_root: str, ignore_chain: _IgnoreChain, is_dir: bool
    ) -> bool:
        """Check a traversal entry against exclusion patterns and gitignore rules."""
        if self._exclude_spec is None and not ignore_chain:
            return False
        suffix = "/" if is_dir else ""

        if self._exclude_spec is not None:
            if self._exclude_spec.match_file(_relative_posix(path, walk_root) + suffix):
                return True

        for base, spec in ignore_chain:
            if spec.match_file(_relative_posix(path, base) + suffix):
                return True
        return False

    def _get_gitignore(self, directory: str) -> pathspec.PathSpec | None:
        """Load and cache gitignore for a directory."""
        if directory not in self._gitignore_cache:
            self._gitignore_cache[directory] = load_gitignore(Path(directory))
        return self._gitignore_cache[directory]


def _relative_posix(path: str, start: str) -> str:
    return os.path.relpath(path, start).replace(os.sep, "/")
