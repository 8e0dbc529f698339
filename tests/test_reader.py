# topmark:header:start
#
#   project      : PragmaScan
#   file         : test_reader.py
#   file_relpath : tests/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for fixture reading: BOM handling, newline normalization and errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pragmascan.errors import FixtureReadError
from pragmascan.reader import normalize_newlines, read_fixture_text
from tests.conftest import mark_integration, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    "raw, expected",
    [
        ("a\nb\n", "a\nb\n"),
        ("a\r\nb\r\n", "a\nb\n"),
        ("a\rb\r", "a\nb\n"),
        ("a\r\n\r\nb", "a\n\nb"),
        ("", ""),
    ],
)
def test_normalize_newlines(raw: str, expected: str) -> None:
    """CRLF and lone CR become LF without merging blank lines."""
    assert normalize_newlines(raw) == expected


@mark_integration
def test_read_strips_bom(tmp_path: Path) -> None:
    """A leading UTF-8 BOM is not part of the first line."""
    path = tmp_path / "bom.py"
    path.write_bytes(b"\xef\xbb\xbf# [A]\r\nx = 1\r\n")
    assert read_fixture_text(path) == "# [A]\nx = 1\n"


@mark_integration
def test_read_missing_file(tmp_path: Path) -> None:
    """Missing files report ``not_found``."""
    path = tmp_path / "nope.py"
    with pytest.raises(FixtureReadError) as excinfo:
        read_fixture_text(path)
    assert excinfo.value.reason == "not_found"
    assert excinfo.value.path == path


@mark_integration
def test_read_invalid_utf8(tmp_path: Path) -> None:
    """Undecodable bytes report ``encoding``."""
    path = tmp_path / "latin1.py"
    path.write_bytes(b"# caf\xe9\n")
    with pytest.raises(FixtureReadError) as excinfo:
        read_fixture_text(path)
    assert excinfo.value.reason == "encoding"


@mark_integration
def test_read_directory_is_io_error(tmp_path: Path) -> None:
    """Reading a directory is reported as an I/O error."""
    with pytest.raises(FixtureReadError) as excinfo:
        read_fixture_text(tmp_path)
    assert excinfo.value.reason == "io"
