# topmark:header:start
#
#   project      : PragmaScan
#   file         : constants.py
#   file_relpath : src/pragmascan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PRAGMASCAN_VERSION: str = get_version("pragmascan")

# Config discovery, in order of precedence
CONFIG_FILE_NAME: str = "pragmascan.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "pragmascan"
