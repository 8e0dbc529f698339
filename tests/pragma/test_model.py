# topmark:header:start
#
#   project      : PragmaScan
#   file         : test_model.py
#   file_relpath : tests/pragma/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Pragma` hit bookkeeping used by test harnesses."""

from __future__ import annotations

import pytest

from pragmascan.pragma.model import Issue, Pragma
from tests.conftest import mark_pipeline


@mark_pipeline
def test_declare_initializes_hit_false() -> None:
    """Declaring a code adds it to both maps."""
    pragma = Pragma()
    pragma.declare("A", (Issue("x", 1),))
    assert pragma.issues == {"A": (Issue("x", 1),)}
    assert pragma.hit == {"A": False}


@mark_pipeline
def test_redeclare_replaces_issues_and_resets_hit() -> None:
    """A later declaration replaces the earlier one."""
    pragma = Pragma()
    pragma.declare("A", (Issue("x", 1),))
    pragma.mark_hit("A")
    pragma.declare("A", (Issue("y", 2),))
    assert pragma.issues["A"] == (Issue("y", 2),)
    assert pragma.hit["A"] is False


@mark_pipeline
def test_mark_hit_and_unhit_codes() -> None:
    """The harness flips hit flags; unhit codes are reported in declaration order."""
    pragma = Pragma()
    for code in ("C", "A", "B"):
        pragma.declare(code, ())
    pragma.mark_hit("A")
    assert pragma.codes == ["C", "A", "B"]
    assert pragma.unhit_codes() == ["C", "B"]


@mark_pipeline
def test_mark_hit_undeclared_code_raises() -> None:
    """Findings for undeclared codes are a harness concern, not silently recorded."""
    pragma = Pragma()
    with pytest.raises(KeyError):
        pragma.mark_hit("NOPE")
    assert pragma.hit == {}


@mark_pipeline
def test_issue_defaults_are_wildcards() -> None:
    """An issue with no column or message matches anything."""
    assert Issue() == Issue(message="", column=0)
