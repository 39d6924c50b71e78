# licenser:header:start
#
#   project      : Licenser
#   file         : errors.py
#   file_relpath : src/licenser/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Click exceptions raised by Licenser commands.

Each class carries the exit code of its failure class. Core errors from
`licenser.errors` are translated with `from_core_error`.
"""

from __future__ import annotations

import click

from licenser.cli.exit_codes import ExitCode
from licenser.errors import ConfigMissingError, LicenserError, LicenserIOError, RenderError


class LicenserCliError(click.ClickException):
    """Base class for all Licenser CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; Click adds the ``Error:`` prefix."""
        return str(getattr(self, "message", ""))


class LicenserUsageError(LicenserCliError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class LicenserConfigError(LicenserCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class LicenserFileNotFoundError(LicenserCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LicenserCliIOError(LicenserCliError):
    """A file could not be read or written."""

    exit_code = ExitCode.IO_ERROR


def from_core_error(error: LicenserError) -> LicenserCliError:
    """Map a core exception onto the matching CLI exception."""
    if isinstance(error, LicenserIOError):
        return LicenserCliIOError(str(error))
    if isinstance(error, (ConfigMissingError, RenderError)):
        return LicenserConfigError(str(error))
    return LicenserCliError(str(error))
