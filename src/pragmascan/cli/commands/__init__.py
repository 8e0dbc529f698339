# topmark:header:start
#
#   project      : PragmaScan
#   file         : __init__.py
#   file_relpath : src/pragmascan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PragmaScan CLI subcommands."""

from __future__ import annotations
