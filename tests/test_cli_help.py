"""Tests for CLI help text."""

from __future__ import annotations

import pytest

from gencontext.cli import main


def _render_help(capsys: pytest.CaptureFixture[str]) -> str:
    """Run `gencontext --help` via CLI entrypoint and return captured stdout."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "gencontext: Concatenate files, globs, or directories into one document" in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "gencontext README.md src/" in out
    assert "gencontext --list-files ." in out


def test_help_lists_binary_options(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "--include-binary" in out
    assert "--exclude-binary" in out
    assert "Binary files are skipped unless --include-binary is given." in out
