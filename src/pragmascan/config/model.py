# topmark:header:start
#
#   project      : PragmaScan
#   file         : model.py
#   file_relpath : src/pragmascan/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration model.

The scanning core needs no configuration; the only configurable aspect is the
dialect table that maps fixture files to comment prefixes. Configuration is
immutable once loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from pragmascan.dialects.base import CommentDialect


@dataclass(frozen=True)
class Config:
    """Resolved PragmaScan configuration.

    Attributes:
        dialects (dict[str, CommentDialect]): User-declared dialects keyed by
            name. They replace built-in dialects of the same name.
        source (Path | None): File the configuration was read from, if any.
    """

    dialects: dict[str, CommentDialect] = field(default_factory=lambda: {})
    source: Path | None = None

    @classmethod
    def from_defaults(cls) -> Config:
        """Return a configuration that uses only built-in dialects."""
        return cls()
