# topmark:header:start
#
#   project      : PragmaScan
#   file         : grammar.py
#   file_relpath : src/pragmascan/pragma/grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser for the pragma mini-grammar found inside comments.

Grammar (whitespace around tokens is insignificant):

    pragmas     := declaration (";" declaration)*
    declaration := "[" CODE "]" (":" entry_list)?
    entry_list  := entry ("," entry)*
    entry       := NUMBER STRING? | STRING

``NUMBER`` is a column and ``STRING`` a double-quoted message (no escapes). For
example ``[GO-W1000]: 10 "Hello", 20, "World"`` declares three issues: column 10
with message "Hello", column 20 with any message, and message "World" at any
column.

Parsing is permissive. Comment prose around or between
declarations is skipped, and an entry list simply stops at the first token that
is not an entry, so ordinary comments never produce errors.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pragmascan.config.logging import get_logger
from pragmascan.pragma.model import Issue, PragmaDeclaration

if TYPE_CHECKING:
    from pragmascan.config.logging import PragmaScanLogger

logger: PragmaScanLogger = get_logger(__name__)

# Codes may not contain brackets, so a stray "[" in prose does not swallow the
# next declaration.
_RE_CODE: Final[re.Pattern[str]] = re.compile(r"\[([^\[\]]+)\]")
_RE_COLON: Final[re.Pattern[str]] = re.compile(r"\s*:")
_RE_COMMA: Final[re.Pattern[str]] = re.compile(r"\s*,")
_RE_NUMBER: Final[re.Pattern[str]] = re.compile(r"\s*([0-9]+)")
_RE_STRING: Final[re.Pattern[str]] = re.compile(r'\s*"([^"]*)"')


def _parse_entry_list(text: str, pos: int) -> tuple[tuple[Issue, ...], int]:
    """Parse ``entry ("," entry)*`` starting at ``pos``.

    Returns:
        tuple[tuple[Issue, ...], int]: The parsed issues and the position just
            after the last consumed token.
    """
    issues: list[Issue] = []
    while True:
        number = _RE_NUMBER.match(text, pos)
        if number is not None:
            column = int(number.group(1))
            pos = number.end()
            message = ""
            string = _RE_STRING.match(text, pos)
            if string is not None:
                message = string.group(1)
                pos = string.end()
            issues.append(Issue(message=message, column=column))
        else:
            string = _RE_STRING.match(text, pos)
            if string is None:
                break
            issues.append(Issue(message=string.group(1), column=0))
            pos = string.end()

        comma = _RE_COMMA.match(text, pos)
        if comma is None:
            break
        pos = comma.end()

    return tuple(issues), pos


def parse_pragmas(comment_text: str) -> list[PragmaDeclaration]:
    """Extract all pragma declarations from one comment.

    Args:
        comment_text (str): Comment body, i.e. the text after the comment prefix.

    Returns:
        list[PragmaDeclaration]: Declarations in source order. Duplicate codes
            are all returned; an empty list when the text holds no ``[CODE]``.
    """
    declarations: list[PragmaDeclaration] = []
    pos = 0
    while True:
        match = _RE_CODE.search(comment_text, pos)
        if match is None:
            break
        pos = match.end()

        code = match.group(1).strip()
        if not code:
            continue

        issues: tuple[Issue, ...] = ()
        colon = _RE_COLON.match(comment_text, pos)
        if colon is not None:
            issues, pos = _parse_entry_list(comment_text, colon.end())

        logger.trace("Parsed pragma %s with %d issue(s)", code, len(issues))
        declarations.append(PragmaDeclaration(code=code, issues=issues))

    return declarations
