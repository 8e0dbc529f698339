# topmark:header:start
#
#   project      : PragmaScan
#   file         : test_scanner_property.py
#   file_relpath : tests/pragma/test_scanner_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the scanner.

Generated fixtures carry the table predicted by an independent model of the
attachment rules; the scanner must agree with it. Arbitrary text must never make
the scanner raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from pragmascan.pragma.grammar import parse_pragmas
from pragmascan.pragma.scanner import scan
from tests.strategies_pragmascan import (
    PREFIX_SETS,
    render_declarations,
    s_any_text,
    s_declaration,
    s_fixture,
)

if TYPE_CHECKING:
    from pragmascan.pragma.model import PragmaDeclaration
    from tests.strategies_pragmascan import FixtureSample

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(sample=s_fixture())
def test_scan_matches_model(sample: FixtureSample) -> None:
    """Attachments, resets and end-of-file drops agree with the model."""
    result = scan(sample.content, sample.prefixes)

    assert {line: pragma.issues for line, pragma in result.items()} == sample.expected
    for pragma in result.values():
        assert pragma.hit == dict.fromkeys(pragma.issues, False)


@settings(deadline=None, max_examples=200)
@given(decls=st.lists(s_declaration(), min_size=1, max_size=4))
def test_rendered_declarations_parse_back(decls: list[PragmaDeclaration]) -> None:
    """Declarations written in pragma syntax are recovered exactly."""
    assert parse_pragmas(" " + render_declarations(decls)) == decls


@settings(deadline=None, max_examples=300)
@given(content=s_any_text(), prefixes=st.sampled_from(PREFIX_SETS))
def test_scan_is_total(content: str, prefixes: tuple[str, ...]) -> None:
    """Any text scans without error; attached lines are within the file."""
    result = scan(content, prefixes)

    line_count = len(content.split("\n"))
    assert all(1 <= line <= line_count for line in result)
    assert scan(content, prefixes) == result
