# topmark:header:start
#
#   project      : Lintframe
#   file         : exit_codes.py
#   file_relpath : src/lintframe/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Lintframe CLI.

Lintframe aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``FAILURE = 1`` is reserved for the
normal "the report contains errors" outcome, which lets CI jobs fail on lint
errors while still distinguishing broken invocations.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Lintframe CLI.

    Attributes:
        SUCCESS: The report was rendered and contains no error-severity message.
        FAILURE: The report was rendered and contains at least one non-ignored error.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: The report is not valid JSON or does not follow the report
            structure. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The report file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the report. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (invalid value in a config file or the
            environment). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
