# topmark:header:start
#
#   project      : PragmaScan
#   file         : __init__.py
#   file_relpath : src/pragmascan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for PragmaScan.

Importing this package does not import the TOML loader, so the dialect registry
can depend on [`Config`][pragmascan.config.model.Config] without cycles. Use
`pragmascan.config.io.load_config` to read configuration files.
"""

from __future__ import annotations

from pragmascan.config.model import Config

__all__ = ["Config"]
