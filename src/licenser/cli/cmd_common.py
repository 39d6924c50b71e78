# licenser:header:start
#
#   project      : Licenser
#   file         : cmd_common.py
#   file_relpath : src/licenser/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Helpers shared by Licenser commands: runtime setup, file collection, output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from licenser.cli.errors import LicenserConfigError, LicenserFileNotFoundError
from licenser.comments.languages import language_for_path
from licenser.config.logging import get_logger
from licenser.config.model import MutableConfig
from licenser.config.policy import FilePolicy
from licenser.engine.service import LicenseService
from licenser.engine.settings import ConfigSettings
from licenser.templates.store import TemplateStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from licenser.cli.console import ClickConsole
    from licenser.config.logging import LicenserLogger
    from licenser.config.model import Config
    from licenser.core.colored_enum import ColoredStrEnum

logger: LicenserLogger = get_logger(__name__)


@dataclass
class CliRuntime:
    """Objects a command needs, built once per invocation."""

    config: Config
    store: TemplateStore
    settings: ConfigSettings
    service: LicenseService
    policy: FilePolicy
    root: Path


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context."""
    return ctx.find_root().obj["console"]


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the root context."""
    return int(ctx.find_root().obj.get("verbosity_level", 0))


def get_runtime(ctx: click.Context) -> CliRuntime:
    """Load configuration and build the runtime (cached on the root context).

    Raises:
        LicenserConfigError: If the configuration is invalid.
    """
    obj: dict[str, object] = ctx.find_root().obj
    cached: object | None = obj.get("runtime")
    if isinstance(cached, CliRuntime):
        return cached

    root: Path = Path.cwd()
    extra: tuple[Path, ...] = tuple(obj.get("config_files") or ())  # type: ignore[arg-type]
    try:
        config: Config = MutableConfig.load_merged(start=root, extra_files=extra).freeze()
    except ValueError as e:
        raise LicenserConfigError(f"Invalid configuration: {e}") from e
    logger.debug("Config files: %s", [str(p) for p in config.config_files])

    store: TemplateStore = TemplateStore.from_config(config)
    settings = ConfigSettings(config, store)
    runtime = CliRuntime(
        config=config,
        store=store,
        settings=settings,
        service=LicenseService(settings, store),
        policy=FilePolicy.from_config(config, root=root),
        root=root,
    )
    obj["runtime"] = runtime
    return runtime


def collect_files(paths: Iterable[Path], policy: FilePolicy) -> list[Path]:
    """Expand ``paths`` into the files Licenser may process.

    Directories are walked recursively. Every file is filtered through
    ``policy``; excluded files are skipped silently (logged at debug level).

    Raises:
        LicenserFileNotFoundError: If a path does not exist.
    """
    out: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        if not path.exists():
            raise LicenserFileNotFoundError(f"No such file or directory: {path}")
        base: Path | None = path if path.is_dir() else None
        candidates: Iterable[Path] = sorted(path.rglob("*")) if base is not None else (path,)
        for candidate in candidates:
            if not candidate.is_file() or candidate in seen:
                continue
            if policy.excludes(candidate, language_for_path(candidate), base=base):
                logger.debug("Skipping excluded file %s", candidate)
                continue
            seen.add(candidate)
            out.append(candidate)
    return out


def styled_label(console: ClickConsole, member: ColoredStrEnum) -> str:
    """Return the padded, colored label of a status enum member."""
    label: str = member.value.ljust(member.value_length)
    return member.color(label) if console.enable_color else label
