# licenser:header:start
#
#   project      : Licenser
#   file         : console.py
#   file_relpath : src/licenser/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Program output for the CLI, kept apart from diagnostic logging."""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Writes user-facing output through Click.

    Args:
        enable_color (bool): Emit ANSI styles when True.
        out (TextIO | None): Stream for regular output (stdout by default).
        err (TextIO | None): Stream for warnings and errors (stderr by default).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a bright red error to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (plain when color is off)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
