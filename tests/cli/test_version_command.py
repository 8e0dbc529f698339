# topmark:header:start
#
#   project      : PragmaScan
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and the bare group invocation."""

from __future__ import annotations

import json

from pragmascan.constants import PRAGMASCAN_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string exactly."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == PRAGMASCAN_VERSION


@mark_cli
def test_version_json() -> None:
    """JSON output wraps the version in an object."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": PRAGMASCAN_VERSION}


@mark_cli
def test_no_command_prints_hint_and_help() -> None:
    """Running the group alone prints a hint and the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "pragmascan scan" in result.output
    assert "Commands:" in result.output
