# topmark:header:start
#
#   project      : PragmaScan
#   file         : exit_codes.py
#   file_relpath : src/pragmascan/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PragmaScan CLI.

Values follow the BSD `sysexits` convention so that CI tooling can tell a
missing fixture from a configuration mistake.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PragmaScan CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: Fixture is not valid UTF-8. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Fixture path does not exist. Mirrors ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: No comment dialect known for any of the given
            fixtures. Mirrors ``EX_UNAVAILABLE (69)``.
        IO_ERROR: Other error reading a fixture. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
