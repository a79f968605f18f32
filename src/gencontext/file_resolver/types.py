"""Configuration and result types for file resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class ResolverConfig:
    """
    Configuration for specifier resolution.

    The defaults reproduce plain resolution: every regular file reachable from a
    directory specifier is returned. `exclude` holds gitignore-syntax patterns
    matched relative to the walk root; they only apply during directory traversal,
    never to explicit files or glob matches.
    """

    exclude: list[str] = field(default_factory=list)
    respect_gitignore: bool = False


class SpecifierKind(Enum):
    """How a single specifier was interpreted."""

    DIRECTORY = "directory"
    GLOB = "glob"
    LITERAL = "literal"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolvedSpecifier:
    """The outcome of resolving one specifier: its interpretation and the files it yields."""

    specifier: str
    kind: SpecifierKind
    files: tuple[str, ...] = ()
