# topmark:header:start
#
#   project      : PragmaScan
#   file         : dialects.py
#   file_relpath : src/pragmascan/cli/commands/dialects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan `dialects` command.

Lists the comment dialects PragmaScan knows about (built-ins plus any declared in
configuration), with the comment prefixes and file name rules of each.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from pragmascan.cli.cmd_common import get_console, get_effective_verbosity, load_cli_config
from pragmascan.cli.options import OutputFormat, config_option, output_format_option
from pragmascan.dialects.registry import effective_dialects

if TYPE_CHECKING:
    from pragmascan.dialects.base import CommentDialect


def _serialize(dialect: CommentDialect) -> dict[str, Any]:
    return {
        "name": dialect.name,
        "description": dialect.description,
        "comment_prefixes": list(dialect.comment_prefixes),
        "extensions": list(dialect.extensions),
        "filenames": list(dialect.filenames),
    }


@click.command(
    name="dialects",
    help="List supported comment dialects.",
)
@config_option
@output_format_option
@click.pass_context
def dialects_command(
    ctx: click.Context,
    *,
    config_path: Path | None,
    output_format: OutputFormat,
) -> None:
    """List comment dialects.

    Args:
        ctx (click.Context): Click context carrying the console and verbosity.
        config_path (Path | None): Explicit configuration file.
        output_format (OutputFormat): Rendering format.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    config = load_cli_config(config_path)
    dialects = sorted(effective_dialects(config).values(), key=lambda d: d.name)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps([_serialize(d) for d in dialects], indent=2))
        return

    console.print("Supported comment dialects:\n")
    width = max(len(d.name) for d in dialects)
    for d in dialects:
        prefixes = " ".join(d.comment_prefixes)
        line = f"  {console.styled(d.name.ljust(width), bold=True)}  {prefixes}"
        if vlevel > 0:
            rules = ", ".join([*d.extensions, *d.filenames])
            line += f"  ({rules})" if rules else ""
        console.print(line)
