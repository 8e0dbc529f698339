# topmark:header:start
#
#   project      : PragmaScan
#   file         : main.py
#   file_relpath : src/pragmascan/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands. Internal logging is configured from the
``PRAGMASCAN_LOG_LEVEL`` environment variable, independently of ``-v``/``-q``
which only affect program output.
"""

from __future__ import annotations

import click

from pragmascan.cli.commands.dialects import dialects_command
from pragmascan.cli.commands.scan import scan_command
from pragmascan.cli.commands.version import version_command
from pragmascan.cli.console import ClickConsole
from pragmascan.cli.options import common_verbose_options, resolve_verbosity
from pragmascan.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    # Color only when writing to a terminal
    enable_color = not no_color and click.get_text_stream("stdout").isatty()
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PragmaScan: extract expected-issue pragmas from lint test fixtures.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the PragmaScan CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'pragmascan scan [PATHS...]' to list fixture pragmas.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(scan_command)

cli.add_command(dialects_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
