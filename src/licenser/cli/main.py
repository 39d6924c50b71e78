# licenser:header:start
#
#   project      : Licenser
#   file         : main.py
#   file_relpath : src/licenser/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser command line interface.

Group-level options (verbosity, color, extra config files) are resolved once
and stored on ``ctx.obj``; subcommands build the runtime lazily through
`licenser.cli.cmd_common.get_runtime`. Diagnostic logging is configured from
``LICENSER_LOG_LEVEL``, independently from program output.
"""

from __future__ import annotations

from pathlib import Path

import click

from licenser.cli.commands.add import add_command
from licenser.cli.commands.check import check_command
from licenser.cli.commands.strip import strip_command
from licenser.cli.commands.templates import templates_group
from licenser.cli.commands.version import version_command
from licenser.cli.console import ClickConsole
from licenser.cli.options import (
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from licenser.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_files: tuple[Path, ...],
) -> None:
    """Store verbosity, console and config file options on the Click context."""
    ctx.ensure_object(dict)
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    ctx.color = not no_color
    ctx.obj["config_files"] = config_files


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Licenser: detect, insert and correct license headers.",
)
@common_verbose_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_files: tuple[Path, ...],
) -> None:
    """Entry point for the Licenser CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_files=config_files,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'licenser check [PATHS...]' to report license headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(add_command)

cli.add_command(strip_command)

cli.add_command(templates_group)

if __name__ == "__main__":
    cli()
