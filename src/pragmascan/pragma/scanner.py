# topmark:header:start
#
#   project      : PragmaScan
#   file         : scanner.py
#   file_relpath : src/pragmascan/pragma/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner that attaches pragmas to the code lines they describe.

The scan is a single pass carrying one piece of state, the *pending* list of
declarations collected from comment-only lines since the last attachment:

- a comment-only line appends its declarations to ``pending``;
- a code line with a trailing comment attaches ``pending`` followed by its own
  declarations to itself, then clears ``pending`` (even when nothing was
  attached);
- a plain code line attaches ``pending`` (if any) to itself and clears it;
- at end of input, whatever is still pending is dropped.

Within one attachment a code declared twice keeps the issue list of its later
declaration, i.e. the one closest to the code line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pragmascan.config.logging import get_logger
from pragmascan.pragma.classifier import LineKind, classify
from pragmascan.pragma.grammar import parse_pragmas
from pragmascan.pragma.model import Pragma

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pragmascan.config.logging import PragmaScanLogger
    from pragmascan.pragma.model import PragmaDeclaration

logger: PragmaScanLogger = get_logger(__name__)


def _attach(
    result: dict[int, Pragma],
    line_no: int,
    declarations: Sequence[PragmaDeclaration],
) -> None:
    pragma = result.setdefault(line_no, Pragma())
    for decl in declarations:
        pragma.declare(decl.code, decl.issues)
    logger.debug("Line %d: attached %s", line_no, ", ".join(pragma.codes))


def _split_lines(content: str) -> list[str]:
    """Split on LF; a final newline terminates the last line rather than opening one."""
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def scan(content: str, comment_prefixes: Sequence[str]) -> dict[int, Pragma]:
    """Build the per-line pragma table for a fixture.

    Args:
        content (str): Full fixture text with ``\\n``-delimited lines.
        comment_prefixes (Sequence[str]): Ordered comment openers for the
            fixture's dialect(s), e.g. ``["//"]`` or ``["<!--", "//"]``.

    Returns:
        dict[int, Pragma]: 1-based line number to the pragma attached to that
            line. Lines without declarations are absent.
    """
    result: dict[int, Pragma] = {}
    pending: list[PragmaDeclaration] = []

    for line_no, line in enumerate(_split_lines(content), start=1):
        classified = classify(line, comment_prefixes)
        logger.trace("Line %d: %s", line_no, classified.kind.value)

        if classified.kind is LineKind.COMMENT_ONLY:
            pending.extend(parse_pragmas(classified.comment_text))
            continue

        if classified.kind is LineKind.CODE_WITH_COMMENT:
            pending.extend(parse_pragmas(classified.comment_text))

        if pending:
            _attach(result, line_no, pending)
            pending = []

    if pending:
        logger.debug(
            "Dropping %d pragma(s) after the last code line: %s",
            len(pending),
            ", ".join(decl.code for decl in pending),
        )

    return result
