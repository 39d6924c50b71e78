# licenser:header:start
#
#   project      : Licenser
#   file         : strip.py
#   file_relpath : src/licenser/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser `strip` command: remove license headers from files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from licenser.cli.cmd_common import (
    collect_files,
    get_console,
    get_runtime,
    get_verbosity,
    styled_label,
)
from licenser.cli.errors import LicenserUsageError, from_core_error
from licenser.cli.options import paths_argument
from licenser.engine.files import FileDocument
from licenser.engine.state import SaveOutcome
from licenser.errors import LicenserError

if TYPE_CHECKING:
    from licenser.cli.cmd_common import CliRuntime
    from licenser.cli.console import ClickConsole


@click.command(name="strip", help="Remove license headers from files.")
@paths_argument
@click.pass_context
def strip_command(ctx: click.Context, paths: tuple[Path, ...]) -> None:
    """Remove the license header (and the blank lines after it) from each file."""
    if not paths:
        raise LicenserUsageError("No paths given.")

    console: ClickConsole = get_console(ctx)
    runtime: CliRuntime = get_runtime(ctx)
    verbosity: int = get_verbosity(ctx)

    removed: int = 0
    for path in collect_files(paths, runtime.policy):
        try:
            outcome: SaveOutcome = runtime.service.remove_license(FileDocument.load(path))
        except LicenserError as e:
            raise from_core_error(e) from e
        if outcome is SaveOutcome.REMOVED:
            removed += 1
            if verbosity >= 0:
                console.print(f"{styled_label(console, outcome)}  {path}")

    if verbosity >= 0:
        console.print(f"{removed} header(s) removed")
