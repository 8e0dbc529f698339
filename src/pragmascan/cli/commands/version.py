# topmark:header:start
#
#   project      : PragmaScan
#   file         : version.py
#   file_relpath : src/pragmascan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan `version` command."""

from __future__ import annotations

import json

import click

from pragmascan.cli.cmd_common import get_console
from pragmascan.cli.options import OutputFormat, output_format_option
from pragmascan.constants import PRAGMASCAN_VERSION


@click.command(
    name="version",
    help="Show the current version of PragmaScan.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Print the installed PragmaScan version."""
    console = get_console(ctx)
    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": PRAGMASCAN_VERSION}))
        return
    console.print(PRAGMASCAN_VERSION)
