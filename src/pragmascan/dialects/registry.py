# topmark:header:start
#
#   project      : PragmaScan
#   file         : registry.py
#   file_relpath : src/pragmascan/dialects/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment dialect registry and path resolution.

The built-in registry is constructed lazily on first access and cached. The
returned mapping is a plain ``dict`` and should be treated as immutable by
callers; user-defined dialects from configuration are layered on top per call
(see [`effective_dialects`][pragmascan.dialects.registry.effective_dialects]).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pragmascan.config.logging import get_logger
from pragmascan.dialects.builtins import DIALECTS
from pragmascan.errors import UnknownDialectError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pragmascan.config.logging import PragmaScanLogger
    from pragmascan.config.model import Config
    from pragmascan.dialects.base import CommentDialect

logger: PragmaScanLogger = get_logger(__name__)


def _dedupe_by_name(items: Iterable[CommentDialect]) -> dict[str, CommentDialect]:
    """Index dialects by name, keeping the first occurrence."""
    acc: dict[str, CommentDialect] = {}
    for dialect in items:
        if dialect.name in acc:
            logger.warning("Duplicate dialect name detected: %s (keeping first)", dialect.name)
            continue
        acc[dialect.name] = dialect
    return acc


@lru_cache(maxsize=1)
def get_dialect_registry() -> dict[str, CommentDialect]:
    """Return the built-in dialects keyed by name."""
    registry = _dedupe_by_name(DIALECTS)
    logger.debug("Loaded %d built-in comment dialects", len(registry))
    return registry


def effective_dialects(config: Config | None = None) -> dict[str, CommentDialect]:
    """Return built-in dialects overlaid with those declared in ``config``.

    A configured dialect replaces the built-in dialect of the same name.
    """
    merged = dict(get_dialect_registry())
    if config is not None:
        merged.update(config.dialects)
    return merged


def resolve_dialect(
    path: Path | str,
    dialects: Mapping[str, CommentDialect] | None = None,
) -> CommentDialect | None:
    """Find the dialect for ``path``.

    Exact filename matches win over extension matches; among extension matches
    the longest extension wins (so ``x.d.ts`` beats ``.ts`` when both exist).

    Args:
        path (Path | str): Fixture path; only its basename is inspected.
        dialects (Mapping[str, CommentDialect] | None): Dialects to search;
            defaults to the built-in registry.

    Returns:
        CommentDialect | None: The matching dialect, or None.
    """
    candidates = dialects if dialects is not None else get_dialect_registry()
    p = Path(path)

    for dialect in candidates.values():
        if dialect.matches_filename(p):
            logger.trace("Path %s matched dialect %s by filename", p, dialect.name)
            return dialect

    best: CommentDialect | None = None
    best_len = 0
    for dialect in candidates.values():
        ext = dialect.matching_extension(p)
        if ext is not None and len(ext) > best_len:
            best, best_len = dialect, len(ext)

    if best is not None:
        logger.trace("Path %s matched dialect %s by extension", p, best.name)
    return best


def prefixes_for_path(path: Path | str, config: Config | None = None) -> tuple[str, ...]:
    """Return the comment prefixes to use for ``path``.

    Raises:
        UnknownDialectError: If no dialect matches ``path``.
    """
    dialect = resolve_dialect(path, effective_dialects(config))
    if dialect is None:
        raise UnknownDialectError(Path(path))
    return dialect.comment_prefixes
