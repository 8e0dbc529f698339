# topmark:header:start
#
#   project      : PragmaScan
#   file         : __init__.py
#   file_relpath : src/pragmascan/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for PragmaScan."""

from __future__ import annotations
