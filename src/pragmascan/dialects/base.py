# topmark:header:start
#
#   project      : PragmaScan
#   file         : base.py
#   file_relpath : src/pragmascan/dialects/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment dialect definition.

A *comment dialect* ties a family of fixture files (recognized by extension or
exact filename) to the ordered comment prefixes the scanner should try for them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class CommentDialect:
    """Represents a comment dialect recognized by PragmaScan.

    Attributes:
        name (str): Internal identifier (e.g. ``"python"``).
        comment_prefixes (tuple[str, ...]): Comment openers in match order. Mixed
            documents list the markup opener first (e.g. ``("<!--", "//")``).
        extensions (tuple[str, ...]): Filename extensions including the leading
            dot; multi-part extensions such as ``.d.ts`` are allowed.
        filenames (tuple[str, ...]): Exact basenames (e.g. ``"Makefile"``).
        description (str): Human-readable description.
    """

    name: str
    comment_prefixes: tuple[str, ...]
    extensions: tuple[str, ...] = field(default_factory=tuple)
    filenames: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def matches_filename(self, path: Path) -> bool:
        """Return True if the basename of ``path`` is one of ``filenames``."""
        return path.name in self.filenames

    def matching_extension(self, path: Path) -> str | None:
        """Return the longest extension of this dialect that ``path`` ends with."""
        name = path.name.lower()
        best: str | None = None
        for ext in self.extensions:
            if name.endswith(ext.lower()) and (best is None or len(ext) > len(best)):
                best = ext
        return best
