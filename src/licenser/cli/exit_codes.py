# licenser:header:start
#
#   project      : Licenser
#   file         : exit_codes.py
#   file_relpath : src/licenser/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Exit codes for the Licenser CLI.

Values follow the BSD ``sysexits`` convention where practical. ``WOULD_CHANGE``
(2) is the exception: `licenser check` uses it to report files that are missing
a license or carry a drifting one, so tests must also assert that Click raised
no usage error (which exits with 2 as well).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Licenser CLI."""

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
