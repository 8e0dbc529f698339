# topmark:header:start
#
#   project      : PragmaScan
#   file         : reader.py
#   file_relpath : src/pragmascan/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixture reader.

Reads a fixture as UTF-8 text ready for [`scan`][pragmascan.pragma.scanner.scan]:
a leading BOM is dropped and CRLF / lone CR line endings are normalized to LF so
that line numbers match what editors and analyzers report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pragmascan.config.logging import get_logger
from pragmascan.errors import FixtureReadError

if TYPE_CHECKING:
    from pathlib import Path

    from pragmascan.config.logging import PragmaScanLogger

logger: PragmaScanLogger = get_logger(__name__)

_BOM: Final[str] = "\ufeff"


def normalize_newlines(text: str) -> str:
    """Collapse CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_fixture_text(path: Path) -> str:
    """Read a fixture file as normalized text.

    Args:
        path (Path): Fixture path.

    Returns:
        str: File content with LF line endings and no BOM.

    Raises:
        FixtureReadError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise FixtureReadError(path, "not_found", f"File not found: {path}") from e
    except OSError as e:
        raise FixtureReadError(path, "io", f"Cannot read {path}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FixtureReadError(path, "encoding", f"{path} is not valid UTF-8: {e}") from e

    if text.startswith(_BOM):
        logger.debug("Stripping UTF-8 BOM from %s", path)
        text = text[len(_BOM) :]

    return normalize_newlines(text)
