# licenser:header:start
#
#   project      : Licenser
#   file         : options.py
#   file_relpath : src/licenser/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Shared Click options and their resolution."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from licenser.cli.errors import LicenserUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the program-output verbosity.

    ``0`` is the default, each ``-v`` adds one and ``-q`` yields ``-1``.

    Raises:
        LicenserUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LicenserUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report problems.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable ``--config`` option."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Extra TOML config file, applied after the discovered one (repeatable).",
    )(f)
    f = click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)
    return f


def license_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--license NAME`` (defaults to the configured license)."""
    return click.option(
        "--license",
        "license_name",
        default=None,
        metavar="NAME",
        help="License template to use instead of the configured default.",
    )(f)


def paths_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``PATHS...`` argument (files or directories)."""
    return click.argument(
        "paths",
        nargs=-1,
        type=click.Path(path_type=Path),
    )(f)
