"""
gencontext: bundle files, globs, and directories into one fenced text document.
"""

from gencontext.classifier import Classification, classify_bytes, filter_text_files, is_binary_file
from gencontext.context_api import ContextResult, generate_context, resolve_context_files
from gencontext.errors import ContextError, NoMatchingFilesError, NoTextFilesError
from gencontext.file_resolver import FileResolver, ResolverConfig

__all__ = [
    "Classification",
    "ContextError",
    "ContextResult",
    "FileResolver",
    "NoMatchingFilesError",
    "NoTextFilesError",
    "ResolverConfig",
    "classify_bytes",
    "filter_text_files",
    "generate_context",
    "is_binary_file",
    "resolve_context_files",
]
