# topmark:header:start
#
#   project      : PragmaScan
#   file         : classifier.py
#   file_relpath : src/pragmascan/pragma/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification against a set of comment prefixes.

The classifier does not parse the host language. A line whose indentation-stripped
content starts with a known prefix is a comment-only line; otherwise the first
prefix found anywhere in the line opens a trailing comment. Prefixes are tried in
the order given so that one fixture can mix dialects (``<!--`` in markup regions,
``//`` in embedded scripts).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class LineKind(Enum):
    """Classification of one physical line.

    Members:
        COMMENT_ONLY: The trimmed line starts with a comment prefix.
        CODE_WITH_COMMENT: Code followed by a comment on the same line.
        CODE: No comment prefix found.
    """

    COMMENT_ONLY = "comment_only"
    CODE_WITH_COMMENT = "code_with_comment"
    CODE = "code"


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of [`classify`][pragmascan.pragma.classifier.classify].

    Attributes:
        kind (LineKind): The line classification.
        comment_text (str): Text following the matched prefix (untrimmed); empty
            for ``CODE`` lines.
        prefix (str | None): The prefix that matched, if any.
    """

    kind: LineKind
    comment_text: str = ""
    prefix: str | None = None


_PLAIN_CODE = ClassifiedLine(LineKind.CODE)


def classify(line: str, prefixes: Sequence[str]) -> ClassifiedLine:
    """Classify ``line`` using the ordered comment ``prefixes``.

    Args:
        line (str): One physical line, without its newline.
        prefixes (Sequence[str]): Comment openers, tried in order; empty strings
            are ignored.

    Returns:
        ClassifiedLine: The classification; never raises.
    """
    active = [p for p in prefixes if p]

    stripped = line.lstrip()
    for prefix in active:
        if stripped.startswith(prefix):
            return ClassifiedLine(
                LineKind.COMMENT_ONLY,
                comment_text=stripped[len(prefix) :],
                prefix=prefix,
            )

    # Plain substring search: prefix tokens inside host string literals are
    # accepted as comment openers.
    for prefix in active:
        idx = line.find(prefix)
        if idx >= 0:
            return ClassifiedLine(
                LineKind.CODE_WITH_COMMENT,
                comment_text=line[idx + len(prefix) :],
                prefix=prefix,
            )

    return _PLAIN_CODE
