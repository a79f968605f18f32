"""Tests for text/binary classification."""

from __future__ import annotations

from pathlib import Path

from gencontext.classifier import (
    Classification,
    classify_bytes,
    filter_text_files,
    is_binary_bytes,
    is_binary_file,
)


def test_empty_is_text():
    assert classify_bytes(b"") is Classification.TEXT


def test_plain_ascii_is_text():
    assert classify_bytes(b"def main():\n\treturn 0\r\n") is Classification.TEXT


def test_null_byte_is_binary():
    assert classify_bytes(b"hello\x00world") is Classification.BINARY


def test_null_byte_wins_over_printable_ratio():
    data = b"a" * 8000 + b"\x00" + b"a" * 100
    assert is_binary_bytes(data)


def test_null_byte_past_sample_is_ignored():
    data = b"a" * 9000 + b"\x00"
    assert not is_binary_bytes(data)


def test_null_byte_at_last_sampled_position():
    assert is_binary_bytes(b"a" * 8191 + b"\x00")
    assert not is_binary_bytes(b"a" * 8192 + b"\x00")


def test_printable_ratio_threshold():
    # 820 / 1024 printable is just above 0.8, 819 / 1024 just below.
    assert not is_binary_bytes(b"a" * 820 + b"\x80" * 204)
    assert is_binary_bytes(b"a" * 819 + b"\x80" * 205)


def test_printable_ratio_uses_first_kilobyte_only():
    assert not is_binary_bytes(b"a" * 1024 + b"\xff" * 5000)
    assert is_binary_bytes(b"\xff" * 1024 + b"a" * 5000)


def test_short_input_uses_its_own_length():
    assert is_binary_bytes(b"\x80")
    assert is_binary_bytes(b"ab\x80\x80\x80")
    assert not is_binary_bytes(b"abcd\x80")


def test_control_and_high_bytes_are_not_printable():
    assert is_binary_bytes(bytes([127]) * 10)
    assert is_binary_bytes(bytes([27, 8, 12]) * 10)
    assert not is_binary_bytes(b"\t\n\r" * 10)


def test_non_ascii_utf8_text_counts_as_binary():
    assert is_binary_bytes("日本語のテキスト".encode() * 20)


def test_is_binary_file(tmp_path: Path):
    text = tmp_path / "a.txt"
    text.write_text("hello\n")
    blob = tmp_path / "c.bin"
    blob.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    empty = tmp_path / "empty"
    empty.write_bytes(b"")

    assert not is_binary_file(str(text))
    assert is_binary_file(str(blob))
    assert not is_binary_file(str(empty))


def test_is_binary_file_fails_open(tmp_path: Path):
    assert not is_binary_file(str(tmp_path / "missing"))
    assert not is_binary_file(str(tmp_path))


def test_filter_text_files_preserves_order(tmp_path: Path):
    paths: list[str] = []
    for name, data in [
        ("1.txt", b"one"),
        ("2.bin", b"\x00\x01"),
        ("3.txt", b"three"),
        ("4.bin", b"\xff" * 10),
        ("5.txt", b""),
    ]:
        path = tmp_path / name
        path.write_bytes(data)
        paths.append(str(path))

    result = filter_text_files(paths)
    assert result.text_files == [paths[0], paths[2], paths[4]]
    assert result.skipped_files == [paths[1], paths[3]]
    assert result.skipped_count == 2


def test_filter_text_files_empty():
    result = filter_text_files([])
    assert result.text_files == []
    assert result.skipped_count == 0
