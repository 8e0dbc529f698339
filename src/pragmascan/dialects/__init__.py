# topmark:header:start
#
#   project      : PragmaScan
#   file         : __init__.py
#   file_relpath : src/pragmascan/dialects/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment dialects: which comment prefixes apply to which fixture files."""

from __future__ import annotations

from pragmascan.dialects.base import CommentDialect
from pragmascan.dialects.registry import (
    effective_dialects,
    get_dialect_registry,
    prefixes_for_path,
    resolve_dialect,
)

__all__ = [
    "CommentDialect",
    "effective_dialects",
    "get_dialect_registry",
    "prefixes_for_path",
    "resolve_dialect",
]
