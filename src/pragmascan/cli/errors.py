# topmark:header:start
#
#   project      : PragmaScan
#   file         : errors.py
#   file_relpath : src/pragmascan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PragmaScan CLI.

Usage:
    Raise these in commands to stop with a standardized message and exit code.
    Library errors from `pragmascan.errors` are translated with
    [`from_fixture_error`][pragmascan.cli.errors.from_fixture_error].

Styling:
    Errors are printed through the project console when one is present in the
    Click context, otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from pragmascan.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pragmascan.errors import FixtureReadError


class PragmaScanCliError(click.ClickException):
    """Base class for all PragmaScan CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(self.format_message())


class PragmaScanUsageError(PragmaScanCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PragmaScanConfigError(PragmaScanCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PragmaScanFileNotFoundError(PragmaScanCliError):
    """Error when a fixture path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PragmaScanIOError(PragmaScanCliError):
    """Error for I/O errors reading fixtures."""

    exit_code = ExitCode.IO_ERROR


class PragmaScanEncodingError(PragmaScanCliError):
    """Error for fixtures that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class PragmaScanUnsupportedFileTypeError(PragmaScanCliError):
    """Error when no fixture could be matched to a comment dialect."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


def from_fixture_error(exc: FixtureReadError) -> PragmaScanCliError:
    """Map a fixture read failure onto the matching CLI error."""
    if exc.reason == "not_found":
        return PragmaScanFileNotFoundError(str(exc))
    if exc.reason == "encoding":
        return PragmaScanEncodingError(str(exc))
    return PragmaScanIOError(str(exc))
