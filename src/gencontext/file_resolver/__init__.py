"""
File-set resolution: paths, glob patterns, and directories into a flat file list.

Usage::

    from gencontext.file_resolver import FileResolver, ResolverConfig

    resolver = FileResolver(ResolverConfig(exclude=["node_modules/"]))
    files = resolver.resolve(["README.md", "src/", "docs/*.md"])
"""

from gencontext.file_resolver.resolver import FileResolver
from gencontext.file_resolver.types import ResolvedSpecifier, ResolverConfig, SpecifierKind

__all__ = [
    "FileResolver",
    "ResolvedSpecifier",
    "ResolverConfig",
    "SpecifierKind",
]
