# licenser:header:start
#
#   project      : Licenser
#   file         : version.py
#   file_relpath : src/licenser/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser `version` command."""

from __future__ import annotations

import click

from licenser.cli.cmd_common import get_console
from licenser.constants import LICENSER_VERSION


@click.command(name="version", help="Show the installed version of Licenser.")
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the Licenser version."""
    get_console(ctx).print(LICENSER_VERSION)
