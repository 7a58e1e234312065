# spdxmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/spdxmark/cli/exit_codes.py
#   project      : SpdxMark
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Exit codes for the SpdxMark CLI.

SpdxMark aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for SpdxMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FORMAT_ERROR: Malformed input data (DEP-5). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        INVALID_REQUEST: Request cannot be honored (e.g., binary ``.license`` file).
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    INVALID_REQUEST = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
