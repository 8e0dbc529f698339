# topmark:header:start
#
#   project      : PragmaScan
#   file         : cmd_common.py
#   file_relpath : src/pragmascan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by PragmaScan commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pragmascan.cli.console import ClickConsole
from pragmascan.cli.errors import PragmaScanConfigError
from pragmascan.config.io import load_config
from pragmascan.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from pragmascan.config.model import Config


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the group context, creating one if absent."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole()
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity (``-1`` quiet, ``0`` terse, ``>0`` verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def load_cli_config(config_path: Path | None) -> Config:
    """Load configuration for a command, translating errors for Click.

    Raises:
        PragmaScanConfigError: If the configuration cannot be loaded.
    """
    try:
        return load_config(config_path)
    except ConfigError as exc:
        raise PragmaScanConfigError(str(exc)) from exc
