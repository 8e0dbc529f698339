# topmark:header:start
#
#   project      : PragmaScan
#   file         : test_file.py
#   file_relpath : tests/pragma/test_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PragmaFile`, the scanned-fixture wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pragmascan.config.model import Config
from pragmascan.dialects.base import CommentDialect
from pragmascan.errors import FixtureReadError, UnknownDialectError
from pragmascan.pragma.file import PragmaFile
from pragmascan.pragma.model import Issue
from tests.conftest import make_pragma, mark_integration, mark_pipeline

if TYPE_CHECKING:
    from pathlib import Path

GO_FIXTURE = 'package main\n\nfunc main() {\n\t// [GO-W1000]: 2\n\tfoo() // [GO-W1001]\n}\n'


@mark_pipeline
def test_from_content_records_prefixes() -> None:
    """The prefixes used for scanning are kept on the result."""
    pf = PragmaFile.from_content(GO_FIXTURE, ["//"])
    assert pf.comment_prefixes == ("//",)
    assert pf.path is None
    assert len(pf) == 1
    assert pf.pragma_at(5) == make_pragma({"GO-W1000": (Issue("", 2),), "GO-W1001": ()})
    assert pf.pragma_at(4) is None


@mark_pipeline
def test_iteration_is_in_line_order() -> None:
    """Iterating yields ``(line, pragma)`` pairs sorted by line."""
    pf = PragmaFile.from_content("a // [B]\nb\nc // [A]\n", ["//"])
    assert [line for line, _ in pf] == [1, 3]


@mark_integration
def test_from_path_resolves_dialect(tmp_path: Path) -> None:
    """Prefixes come from the dialect registry when not given."""
    fixture = tmp_path / "main.go"
    fixture.write_text(GO_FIXTURE, encoding="utf-8")

    pf = PragmaFile.from_path(fixture)

    assert pf.path == fixture
    assert pf.comment_prefixes == ("//",)
    assert list(pf.pragmas) == [5]


@mark_integration
def test_from_path_explicit_prefixes(tmp_path: Path) -> None:
    """Explicit prefixes bypass dialect lookup, even for unknown extensions."""
    fixture = tmp_path / "page.tmpl"
    fixture.write_text("<!-- [T-1] -->\n<p>x</p>\n", encoding="utf-8")

    pf = PragmaFile.from_path(fixture, ["<!--"])

    assert pf.pragmas == {2: make_pragma({"T-1": ()})}


@mark_integration
def test_from_path_uses_config_dialects(tmp_path: Path) -> None:
    """Dialects from configuration are consulted."""
    fixture = tmp_path / "page.tmpl"
    fixture.write_text("{# [T-1] #}\n<p>x</p>\n", encoding="utf-8")
    config = Config(
        dialects={"jinja": CommentDialect("jinja", ("{#",), extensions=(".tmpl",))},
    )

    pf = PragmaFile.from_path(fixture, config=config)

    assert pf.comment_prefixes == ("{#",)
    assert 2 in pf.pragmas


@mark_integration
def test_from_path_unknown_dialect(tmp_path: Path) -> None:
    """Unknown file types need explicit prefixes."""
    fixture = tmp_path / "data.unknownext"
    fixture.write_text("x\n", encoding="utf-8")

    with pytest.raises(UnknownDialectError):
        PragmaFile.from_path(fixture)


@mark_integration
def test_from_path_missing_file(tmp_path: Path) -> None:
    """A missing fixture raises a read error with reason ``not_found``."""
    with pytest.raises(FixtureReadError) as excinfo:
        PragmaFile.from_path(tmp_path / "missing.py")
    assert excinfo.value.reason == "not_found"


@mark_integration
def test_from_path_crlf_line_numbers(tmp_path: Path) -> None:
    """CRLF fixtures produce the same line numbers as LF ones."""
    fixture = tmp_path / "main.go"
    fixture.write_bytes(GO_FIXTURE.replace("\n", "\r\n").encode("utf-8"))

    assert PragmaFile.from_path(fixture).pragmas == PragmaFile.from_content(GO_FIXTURE, ["//"]).pragmas
