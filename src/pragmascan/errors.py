# topmark:header:start
#
#   project      : PragmaScan
#   file         : errors.py
#   file_relpath : src/pragmascan/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for PragmaScan.

The scanning core (classifier, grammar, merger) never raises: malformed pragmas
are just ordinary comment text. These exceptions cover the surrounding layers
(fixture reading, dialect resolution, configuration loading). The CLI translates
them into `click` errors with dedicated exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PragmaScanError(Exception):
    """Base class for all PragmaScan library errors."""


class FixtureReadError(PragmaScanError):
    """A fixture file could not be read or decoded.

    Attributes:
        path (Path): The fixture path.
        reason (str): Short machine-friendly reason (``"not_found"``,
            ``"encoding"``, ``"io"``).
    """

    def __init__(self, path: Path, reason: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason


class UnknownDialectError(PragmaScanError):
    """No comment dialect is registered for a fixture path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No comment dialect known for '{path}'; pass comment prefixes explicitly")
        self.path = path


class ConfigError(PragmaScanError):
    """Configuration is missing, malformed or has the wrong shape."""
