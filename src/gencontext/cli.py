#!/usr/bin/env python3
"""
gencontext: Concatenate files, globs, or directories into one document, with a
path header and a code fence around each file

Common usage:
  gencontext README.md src/
  gencontext 'src/**/*.py' pyproject.toml
  gencontext --list-files .
  gencontext -o context.md --exclude 'node_modules/' .

Binary files are skipped unless --include-binary is given.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import io
import sys
from dataclasses import dataclass

from gencontext.context_api import generate_context, resolve_context_files
from gencontext.errors import ContextError
from gencontext.file_resolver import ResolverConfig
from gencontext.reporting import StderrReporter


@dataclass
class Options:
    """Command-line options for the gencontext tool."""

    paths: list[str]
    output: str
    include_binary: bool
    exclude: list[str]
    respect_gitignore: bool
    list_files: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    """Parse command-line arguments."""
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="gencontext",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=str,
        default=[],
        help="File names, globs, or directories to concatenate",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "--include-binary",
        action="store_true",
        default=False,
        help="Include binary files in the output (not recommended)",
    )
    parser.add_argument(
        "--exclude-binary",
        action="store_true",
        default=True,
        help="Exclude binary files from the output (default behavior)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip paths matching this gitignore-style pattern while walking directories "
        "(e.g., 'node_modules/'). Can be repeated",
    )
    parser.add_argument(
        "--respect-gitignore",
        action="store_true",
        dest="respect_gitignore",
        help="Honor .gitignore files while walking directories",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print resolved file paths without their contents",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # --exclude-binary is the default; an explicit --include-binary always wins.
    return Options(
        paths=opts.paths,
        output=opts.output,
        include_binary=opts.include_binary,
        exclude=opts.exclude,
        respect_gitignore=opts.respect_gitignore,
        list_files=opts.list_files,
        version=opts.version,
    )


def _use_utf8_stdout() -> None:
    """Emit UTF-8 with untranslated newlines on stdout, whatever the locale."""
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", newline="")


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the gencontext CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options = _parse_args(args)

    # Display version information if requested
    if options.version:
        try:
            version = importlib.metadata.version("gencontext")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.paths:
        print("Error: No paths specified", file=sys.stderr)
        return 1

    config = ResolverConfig(
        exclude=options.exclude,
        respect_gitignore=options.respect_gitignore,
    )
    reporter = StderrReporter()
    if options.output == "-" or options.list_files:
        _use_utf8_stdout()

    try:
        if options.list_files:
            result = resolve_context_files(
                options.paths,
                include_binary=options.include_binary,
                config=config,
                reporter=reporter,
            )
            for f in result.files:
                print(f)
            return 0

        generate_context(
            options.paths,
            output=options.output,
            include_binary=options.include_binary,
            config=config,
            reporter=reporter,
        )
    except ContextError as e:
        # Nothing to emit: no matches, or only binary files.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Catch other potential file or processing errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
