# licenser:header:start
#
#   project      : Licenser
#   file         : templates.py
#   file_relpath : src/licenser/cli/commands/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser `templates` commands: list, show and edit license templates.

Custom templates are written to the ``[templates]`` table of the config file the
configuration was loaded from, or to ``licenser.toml`` in the current directory
when there is none.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from licenser.cli.cmd_common import get_console, get_runtime
from licenser.cli.errors import LicenserCliError, LicenserCliIOError, LicenserUsageError
from licenser.constants import CONFIG_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

    from licenser.cli.cmd_common import CliRuntime
    from licenser.cli.console import ClickConsole
    from licenser.templates.model import LicenseTemplate
    from licenser.templates.store import TemplateStore

P = ParamSpec("P")
R = TypeVar("R")


def _writable_store(ctx: click.Context) -> TemplateStore:
    runtime: CliRuntime = get_runtime(ctx)
    if runtime.store.config_path is None:
        runtime.store.config_path = runtime.root / CONFIG_FILE_NAME
    return runtime.store


def _read_content(text: str | None, file: Path | None) -> str:
    if (text is None) == (file is None):
        raise LicenserUsageError("Give exactly one of '--text' or '--file'.")
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            raise LicenserCliIOError(f"Cannot read {file}: {e}") from e
    return text or ""


def content_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--text`` / ``--file``."""
    f = click.option(
        "--file",
        "file",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Read the template text from a file.",
    )(f)
    f = click.option(
        "--text",
        default=None,
        help="Template text ({{year}}, {{name}}, {{email}}).",
    )(f)
    return f


@click.group(name="templates", help="List, show and edit license templates.")
def templates_group() -> None:
    """License template commands."""


@templates_group.command(name="list", help="List available license templates.")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    console: ClickConsole = get_console(ctx)
    runtime: CliRuntime = get_runtime(ctx)
    default: str | None = runtime.config.default_license
    for name in runtime.service.available_licenses():
        kind: str = "custom" if name in runtime.store.custom_templates else "built-in"
        marker: str = " (default)" if default is not None and name.lower() == default.lower() else ""
        console.print(f"{name:<16} {kind}{marker}")


@templates_group.command(name="show", help="Print the raw text of a template.")
@click.argument("name")
@click.pass_context
def show_command(ctx: click.Context, name: str) -> None:
    runtime: CliRuntime = get_runtime(ctx)
    template: LicenseTemplate | None = runtime.store.get_template(name)
    if template is None:
        raise LicenserCliError(f"No template named '{name}'")
    get_console(ctx).print(template.content, nl=not template.content.endswith("\n"))


@templates_group.command(name="add", help="Create a custom template.")
@click.argument("name")
@content_options
@click.pass_context
def add_template_command(
    ctx: click.Context,
    name: str,
    text: str | None,
    file: Path | None,
) -> None:
    store: TemplateStore = _writable_store(ctx)
    try:
        store.create_custom(name, _read_content(text, file))
    except ValueError as e:
        raise LicenserCliError(str(e)) from e
    except OSError as e:
        raise LicenserCliIOError(f"Cannot write {store.config_path}: {e}") from e
    get_console(ctx).print(f"Created template '{name}' in {store.config_path}")


@templates_group.command(name="update", help="Replace the text of a custom template.")
@click.argument("name")
@content_options
@click.pass_context
def update_template_command(
    ctx: click.Context,
    name: str,
    text: str | None,
    file: Path | None,
) -> None:
    store: TemplateStore = _writable_store(ctx)
    try:
        store.update_custom(name, _read_content(text, file))
    except KeyError as e:
        raise LicenserCliError(f"No custom template named '{name}'") from e
    except ValueError as e:
        raise LicenserCliError(str(e)) from e
    except OSError as e:
        raise LicenserCliIOError(f"Cannot write {store.config_path}: {e}") from e
    get_console(ctx).print(f"Updated template '{name}'")


@templates_group.command(name="remove", help="Delete a custom template.")
@click.argument("name")
@click.pass_context
def remove_template_command(ctx: click.Context, name: str) -> None:
    store: TemplateStore = _writable_store(ctx)
    try:
        store.delete_custom(name)
    except KeyError as e:
        raise LicenserCliError(f"No custom template named '{name}'") from e
    except OSError as e:
        raise LicenserCliIOError(f"Cannot write {store.config_path}: {e}") from e
    get_console(ctx).print(f"Removed template '{name}'")
