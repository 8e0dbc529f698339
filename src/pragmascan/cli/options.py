# topmark:header:start
#
#   project      : PragmaScan
#   file         : options.py
#   file_relpath : src/pragmascan/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Centralizes reusable options (verbosity, output format, config file) so that
commands stay thin.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from pragmascan.cli.errors import PragmaScanUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
        DEFAULT: Human-friendly text output.
        JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        PragmaScanUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PragmaScanUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (also list fixtures without pragmas).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings about skipped fixtures.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option resolving to [`OutputFormat`][]."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat]),
        default=OutputFormat.DEFAULT.value,
        show_default=True,
        callback=lambda _ctx, _param, value: OutputFormat(value),
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--config`` option pointing at a TOML configuration file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Configuration file (default: pragmascan.toml or [tool.pragmascan] in pyproject.toml).",
    )(f)
