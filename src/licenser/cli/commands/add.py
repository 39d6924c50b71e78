# licenser:header:start
#
#   project      : Licenser
#   file         : add.py
#   file_relpath : src/licenser/cli/commands/add.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser `add` command: insert (or correct) license headers in files."""

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
from licenser.cli.options import license_option, paths_argument
from licenser.engine.files import FileDocument
from licenser.engine.state import SaveOutcome
from licenser.errors import LicenserError

if TYPE_CHECKING:
    from licenser.cli.cmd_common import CliRuntime
    from licenser.cli.console import ClickConsole


@click.command(name="add", help="Insert license headers into files that have none.")
@paths_argument
@license_option
@click.option(
    "--correct",
    is_flag=True,
    default=False,
    help="Also replace headers that drift from the template.",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Insert even when a license is already present.",
)
@click.pass_context
def add_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    license_name: str | None,
    correct: bool,
    force: bool,
) -> None:
    """Insert or correct license headers.

    Raises:
        LicenserUsageError: If ``--correct`` and ``--force`` are combined or no path is given.
        LicenserCliError: If the license cannot be rendered or a file cannot be written.
    """
    if correct and force:
        raise LicenserUsageError("The '--correct' and '--force' options are mutually exclusive.")
    if not paths:
        raise LicenserUsageError("No paths given.")

    console: ClickConsole = get_console(ctx)
    runtime: CliRuntime = get_runtime(ctx)
    verbosity: int = get_verbosity(ctx)

    changed: int = 0
    for path in collect_files(paths, runtime.policy):
        try:
            document = FileDocument.load(path)
            outcome: SaveOutcome = (
                runtime.service.correct_license(document, license_name)
                if correct
                else runtime.service.add_license(document, license_name, force=force)
            )
        except LicenserError as e:
            raise from_core_error(e) from e
        if outcome in (SaveOutcome.INSERTED, SaveOutcome.CORRECTED):
            changed += 1
        if verbosity >= 0 and (verbosity > 0 or outcome is not SaveOutcome.SKIPPED):
            console.print(f"{styled_label(console, outcome)}  {path}")

    if verbosity >= 0:
        console.print(f"{changed} file(s) updated")
