# licenser:header:start
#
#   project      : Licenser
#   file         : check.py
#   file_relpath : src/licenser/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser `check` command.

Reports, for every file, whether it carries the expected license header and
prints a coverage summary. Exits with ``WOULD_CHANGE`` (2) when a file is
missing a license or its header drifts from the template.
"""

from __future__ import annotations

from collections import Counter
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
from licenser.cli.exit_codes import ExitCode
from licenser.cli.options import license_option, paths_argument
from licenser.engine.files import FileDocument
from licenser.engine.state import HeaderStatus
from licenser.errors import LicenserIOError

if TYPE_CHECKING:
    from licenser.cli.cmd_common import CliRuntime
    from licenser.cli.console import ClickConsole
    from licenser.engine.analysis import LicenseReport


@click.command(name="check", help="Report missing and drifting license headers.")
@paths_argument
@license_option
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    license_name: str | None,
) -> None:
    """Check license headers without modifying files.

    Args:
        ctx (click.Context): Click context.
        paths (tuple[Path, ...]): Files or directories; the current directory if empty.
        license_name (str | None): Template to compare against.
    """
    console: ClickConsole = get_console(ctx)
    runtime: CliRuntime = get_runtime(ctx)
    verbosity: int = get_verbosity(ctx)

    files: list[Path] = collect_files(paths or (Path.cwd(),), runtime.policy)
    counts: Counter[HeaderStatus] = Counter()
    unreadable: int = 0

    for path in files:
        try:
            document: FileDocument = FileDocument.load(path)
        except LicenserIOError as e:
            console.warn(str(e))
            unreadable += 1
            continue
        report: LicenseReport = runtime.service.check(document, license_name)
        status: HeaderStatus = report.status
        counts[status] += 1
        if status is HeaderStatus.OK and verbosity < 1:
            continue
        if verbosity < 0 and status is HeaderStatus.UNVERIFIED:
            continue
        line: str = f"{styled_label(console, status)}  {path}"
        if verbosity > 1 and report.classification.matched_phrase:
            line += f"  (matched '{report.classification.matched_phrase}')"
        console.print(line)

    total: int = sum(counts.values())
    with_license: int = total - counts[HeaderStatus.MISSING]
    if verbosity >= 0:
        if total == 0:
            console.print("License coverage: no files")
        else:
            percentage: int = round(with_license * 100 / total)
            console.print(
                f"License coverage: {with_license}/{total} files ({percentage}%)"
                + (f", {counts[HeaderStatus.DRIFT]} drifting" if counts[HeaderStatus.DRIFT] else "")
            )

    if unreadable:
        ctx.exit(ExitCode.IO_ERROR)
    if counts[HeaderStatus.MISSING] or counts[HeaderStatus.DRIFT]:
        ctx.exit(ExitCode.WOULD_CHANGE)
