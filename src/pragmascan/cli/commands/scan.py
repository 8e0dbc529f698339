# topmark:header:start
#
#   project      : PragmaScan
#   file         : scan.py
#   file_relpath : src/pragmascan/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan `scan` command.

Prints the pragma table of one or more fixture files. Each pragma is echoed in
the same syntax it is written in, prefixed with ``path:line:``:

    fixture.go:9: [GO-W1000]: 10 "Hello", 20, "World"

Comment prefixes are resolved per file from the dialect registry unless given
explicitly with ``--prefix``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from pragmascan.cli.cmd_common import get_console, get_effective_verbosity, load_cli_config
from pragmascan.cli.errors import PragmaScanUnsupportedFileTypeError, from_fixture_error
from pragmascan.cli.options import OutputFormat, config_option, output_format_option
from pragmascan.config.logging import get_logger
from pragmascan.errors import FixtureReadError, UnknownDialectError
from pragmascan.pragma.file import PragmaFile

if TYPE_CHECKING:
    from pragmascan.config.logging import PragmaScanLogger
    from pragmascan.pragma.model import Issue, Pragma

logger: PragmaScanLogger = get_logger(__name__)


def render_issue(issue: Issue) -> str:
    """Render one issue in pragma syntax (``10 "msg"``, ``10`` or ``"msg"``)."""
    parts: list[str] = []
    if issue.column:
        parts.append(str(issue.column))
    if issue.message or not issue.column:
        parts.append(f'"{issue.message}"')
    return " ".join(parts)


def render_pragma(pragma: Pragma) -> str:
    """Render all declarations of a pragma, ``;``-separated."""
    decls: list[str] = []
    for code, issues in pragma.issues.items():
        if issues:
            decls.append(f"[{code}]: " + ", ".join(render_issue(i) for i in issues))
        else:
            decls.append(f"[{code}]")
    return "; ".join(decls)


def pragma_file_to_dict(pf: PragmaFile) -> dict[str, Any]:
    """Serialize a scanned fixture for JSON output."""
    return {
        str(line): {
            code: [{"column": i.column, "message": i.message} for i in issues]
            for code, issues in pragma.issues.items()
        }
        for line, pragma in pf
    }


@click.command(
    name="scan",
    help="Extract expected-issue pragmas from fixture files.",
    epilog="""
Comment prefixes are taken from the file's dialect (see 'pragmascan dialects')
unless --prefix is given. Repeat --prefix for mixed-dialect fixtures, markup
prefix first (e.g. --prefix '<!--' --prefix '//').
""",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    "--prefix",
    "-p",
    "prefixes",
    multiple=True,
    help="Comment prefix to recognize (repeatable; overrides dialect lookup).",
)
@config_option
@output_format_option
@click.pass_context
def scan_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    prefixes: tuple[str, ...],
    config_path: Path | None,
    output_format: OutputFormat,
) -> None:
    """Scan fixtures and print their pragma tables.

    Args:
        ctx (click.Context): Click context carrying the console and verbosity.
        paths (tuple[Path, ...]): Fixture files to scan.
        prefixes (tuple[str, ...]): Explicit comment prefixes, if any.
        config_path (Path | None): Explicit configuration file.
        output_format (OutputFormat): Rendering format.

    Raises:
        PragmaScanUnsupportedFileTypeError: If none of the fixtures could be
            matched to a comment dialect.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    config = load_cli_config(config_path)

    scanned: list[PragmaFile] = []
    skipped: list[Path] = []
    for path in paths:
        try:
            pf = PragmaFile.from_path(path, prefixes or None, config=config)
        except UnknownDialectError as exc:
            skipped.append(path)
            if vlevel >= 0:
                console.warn(f"Skipping {path}: {exc}")
            continue
        except FixtureReadError as exc:
            raise from_fixture_error(exc) from exc
        logger.info("Scanned %s: %d line(s) with pragmas", path, len(pf))
        scanned.append(pf)

    if not scanned and skipped:
        raise PragmaScanUnsupportedFileTypeError(
            f"No comment dialect known for: {', '.join(str(p) for p in skipped)}"
        )

    if output_format is OutputFormat.JSON:
        payload = {str(pf.path): pragma_file_to_dict(pf) for pf in scanned}
        console.print(json.dumps(payload, indent=2))
        return

    for pf in scanned:
        if not pf.pragmas and vlevel > 0:
            console.print(console.styled(f"{pf.path}: no pragmas", dim=True))
        for line, pragma in pf:
            location = console.styled(f"{pf.path}:{line}:", bold=True)
            console.print(f"{location} {render_pragma(pragma)}")
