# topmark:header:start
#
#   project      : PragmaScan
#   file         : __init__.py
#   file_relpath : src/pragmascan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan package.

PragmaScan reads lint test fixtures and extracts the *pragmas* embedded in their
comments: declarations such as ``// [GO-W1000]: 10 "Hello"`` that state which
findings the analyzer is expected to report on a given source line. The result
is a per-line table a test harness can check real findings against.

Typical use:

    from pragmascan import scan

    pragmas = scan(content, ["//"])
    pragmas[9].issues["GO-W1000"]
"""

from __future__ import annotations

from pragmascan.pragma.classifier import ClassifiedLine, LineKind, classify
from pragmascan.pragma.file import PragmaFile
from pragmascan.pragma.grammar import parse_pragmas
from pragmascan.pragma.model import Issue, Pragma, PragmaDeclaration
from pragmascan.pragma.scanner import scan

__all__ = [
    "ClassifiedLine",
    "Issue",
    "LineKind",
    "Pragma",
    "PragmaDeclaration",
    "PragmaFile",
    "classify",
    "parse_pragmas",
    "scan",
]
