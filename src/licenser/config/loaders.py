# licenser:header:start
#
#   project      : Licenser
#   file         : loaders.py
#   file_relpath : src/licenser/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Load and write TOML configuration sources.

This module provides I/O helpers for reading Licenser configuration from
``licenser.toml`` / ``pyproject.toml`` and for persisting edits (custom
templates, feature toggles) back to disk. Parsing and rendering are done with
`tomlkit`; parsed documents are returned as plain ``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from licenser.config.keys import Toml
from licenser.config.logging import get_logger
from licenser.constants import (
    DEFAULT_COOLDOWN_MS,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_DRIFT_THRESHOLD,
    DEFAULT_FALLBACK_PREFIX,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_LICENSE_NAME,
    DEFAULT_MAX_LINES,
    PYPROJECT_FILE_NAME,
    PYPROJECT_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from licenser.config.getters import TomlTable
    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Licenser's runtime defaults as a TOML-compatible dict.

    This function performs no I/O. Feature flags default to off: a host has to
    opt in to automatic insertion and correction.

    Returns:
        TomlTable: A new dict, safe for callers to mutate.
    """
    return {
        Toml.SECTION_LICENSE: {
            Toml.KEY_DEFAULT: DEFAULT_LICENSE_NAME,
            Toml.KEY_AUTHOR_NAME: "",
            Toml.KEY_AUTHOR_EMAIL: "",
            # `year` defaults to unset: the renderer uses the current year.
        },
        Toml.SECTION_AUTO: {
            Toml.KEY_SAVE: False,
            Toml.KEY_CORRECT: False,
            Toml.KEY_COOLDOWN_MS: DEFAULT_COOLDOWN_MS,
            Toml.KEY_DEBOUNCE_MS: DEFAULT_DEBOUNCE_MS,
        },
        Toml.SECTION_DETECTION: {
            Toml.KEY_MAX_LINES: DEFAULT_MAX_LINES,
            Toml.KEY_FUZZY_THRESHOLD: DEFAULT_FUZZY_THRESHOLD,
            Toml.KEY_DRIFT_THRESHOLD: DEFAULT_DRIFT_THRESHOLD,
            Toml.KEY_FALLBACK_PREFIX: DEFAULT_FALLBACK_PREFIX,
        },
        Toml.SECTION_TEMPLATES: {},
        Toml.SECTION_FILES: {
            Toml.KEY_EXCLUDE_EXTENSIONS: [
                ".json",
                ".md",
                ".txt",
                ".xml",
                ".yml",
                ".yaml",
                ".png",
                ".jpg",
                ".jpeg",
                ".gif",
                ".svg",
                ".ico",
                ".pdf",
                ".zip",
                ".tar",
                ".gz",
                ".log",
            ],
            Toml.KEY_EXCLUDE_DIRS: [
                "node_modules",
                ".git",
                "dist",
                "build",
                "out",
                ".vscode",
                ".idea",
                "coverage",
                "tmp",
                "temp",
            ],
            Toml.KEY_EXCLUDE_LANGUAGES: ["plaintext", "json", "markdown"],
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content; an empty dict on failure (errors are logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_licenser_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Licenser table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.licenser]``; for any other file the
    whole document. Returns None when a pyproject has no such section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    section: Any = data
    for part in PYPROJECT_SECTION:
        section = section.get(part) if isinstance(section, dict) else None
    if not isinstance(section, dict) or not section:
        logger.debug("[%s] section missing in %s", ".".join(PYPROJECT_SECTION), path)
        return None
    return cast("TomlTable", section)


def to_toml(data: TomlTable) -> str:
    """Render a dict as TOML text."""
    return tomlkit.dumps(data)


def write_toml_table(path: Path, table: TomlTable) -> None:
    """Write ``table`` to ``path``, preserving unrelated content.

    For ``pyproject.toml`` the table is written under ``[tool.licenser]`` and
    every other section of the document (comments included) is kept as is.
    For any other file the sections present in ``table`` replace the ones on
    disk.

    Raises:
        OSError: When the file cannot be read or written.
    """
    doc: tomlkit.TOMLDocument
    if path.exists():
        doc = tomlkit.parse(path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()

    target: Any = doc
    if path.name == PYPROJECT_FILE_NAME:
        for part in PYPROJECT_SECTION:
            if part not in target:
                target[part] = tomlkit.table(is_super_table=part == PYPROJECT_SECTION[0])
            target = target[part]

    for key, value in table.items():
        target[key] = value

    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    logger.info("Wrote configuration to %s", path)
