# topmark:header:start
#
#   project      : PragmaScan
#   file         : __main__.py
#   file_relpath : src/pragmascan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PragmaScan via ``python -m pragmascan``.

Delegates to [`cli`][pragmascan.cli.main.cli], so it behaves exactly like the
``pragmascan`` console script.

Examples:
    Scan a Go fixture::

        python -m pragmascan scan testdata/unused.go
"""

from __future__ import annotations

from pragmascan.cli.main import cli

if __name__ == "__main__":
    cli()
