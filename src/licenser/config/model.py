# licenser:header:start
#
#   project      : Licenser
#   file         : model.py
#   file_relpath : src/licenser/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot read by the engine.
    - `MutableConfig`: a mutable builder used while layering defaults, config
      files and CLI overrides; it is frozen into `Config` and can be thawed
      back for edits.

Layering:
    Scalar fields left as ``None`` on a builder mean "not set by this layer";
    `MutableConfig.merge_with` lets the other layer's set values win. Custom
    templates are merged by name.

Immutability:
    `Config` stores tuples and a read-only mapping and is ``frozen=True``. Use
    `Config.thaw` → edit → `MutableConfig.freeze` for updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from licenser.config.getters import (
    get_bool_value_or_none,
    get_float_value_or_none,
    get_int_value_or_none,
    get_list_value,
    get_string_value_or_none,
    get_table_value,
)
from licenser.config.keys import Toml
from licenser.config.loaders import (
    extract_licenser_table,
    load_defaults_dict,
    load_toml_dict,
)
from licenser.config.logging import get_logger
from licenser.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_COOLDOWN_MS,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_DRIFT_THRESHOLD,
    DEFAULT_FALLBACK_PREFIX,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_LINES,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from licenser.config.getters import TomlTable
    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Licenser.

    Attributes:
        default_license (str | None): Name of the template used for insertion and
            correction. None means no default license is configured.
        author_name (str): Value for ``{{name}}``; empty means "use the fallback".
        author_email (str): Value for ``{{email}}``; empty means "use the fallback".
        year (str | None): Value for ``{{year}}``; None means the current year.
        auto_save (bool): Insert a missing header when a document is saved.
        auto_correct (bool): Replace a drifting header when a document is saved.
        cooldown_ms (int): Minimum interval between two automatic corrections.
        debounce_ms (int): Quiet period before a save burst is processed.
        max_lines (int): Lines considered by simple license detection.
        fuzzy_threshold (float): Normalized edit distance accepted by fuzzy
            detection (lower is stricter).
        drift_threshold (int): Edit distance tolerated before a header drifts.
        fallback_prefix (str): Line prefix for languages without a known style.
        templates (Mapping[str, str]): Custom templates, name → raw text.
        exclude_extensions (tuple[str, ...]): File extensions never processed.
        exclude_dirs (tuple[str, ...]): Directory names never processed.
        exclude_languages (tuple[str, ...]): Language ids never processed.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns never processed.
        config_files (tuple[Path, ...]): Config files this snapshot was built from.
    """

    default_license: str | None
    author_name: str
    author_email: str
    year: str | None

    auto_save: bool
    auto_correct: bool
    cooldown_ms: int
    debounce_ms: int

    max_lines: int
    fuzzy_threshold: float
    drift_threshold: int
    fallback_prefix: str

    templates: Mapping[str, str]

    exclude_extensions: tuple[str, ...]
    exclude_dirs: tuple[str, ...]
    exclude_languages: tuple[str, ...]
    exclude_patterns: tuple[str, ...]

    config_files: tuple[Path, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict."""
        license_table: TomlTable = {
            Toml.KEY_AUTHOR_NAME: self.author_name,
            Toml.KEY_AUTHOR_EMAIL: self.author_email,
        }
        if self.default_license is not None:
            license_table[Toml.KEY_DEFAULT] = self.default_license
        if self.year is not None:
            license_table[Toml.KEY_YEAR] = self.year
        return {
            Toml.SECTION_LICENSE: license_table,
            Toml.SECTION_AUTO: {
                Toml.KEY_SAVE: self.auto_save,
                Toml.KEY_CORRECT: self.auto_correct,
                Toml.KEY_COOLDOWN_MS: self.cooldown_ms,
                Toml.KEY_DEBOUNCE_MS: self.debounce_ms,
            },
            Toml.SECTION_DETECTION: {
                Toml.KEY_MAX_LINES: self.max_lines,
                Toml.KEY_FUZZY_THRESHOLD: self.fuzzy_threshold,
                Toml.KEY_DRIFT_THRESHOLD: self.drift_threshold,
                Toml.KEY_FALLBACK_PREFIX: self.fallback_prefix,
            },
            Toml.SECTION_TEMPLATES: dict(self.templates),
            Toml.SECTION_FILES: {
                Toml.KEY_EXCLUDE_EXTENSIONS: list(self.exclude_extensions),
                Toml.KEY_EXCLUDE_DIRS: list(self.exclude_dirs),
                Toml.KEY_EXCLUDE_LANGUAGES: list(self.exclude_languages),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            default_license=self.default_license,
            author_name=self.author_name,
            author_email=self.author_email,
            year=self.year,
            auto_save=self.auto_save,
            auto_correct=self.auto_correct,
            cooldown_ms=self.cooldown_ms,
            debounce_ms=self.debounce_ms,
            max_lines=self.max_lines,
            fuzzy_threshold=self.fuzzy_threshold,
            drift_threshold=self.drift_threshold,
            fallback_prefix=self.fallback_prefix,
            templates=dict(self.templates),
            exclude_extensions=list(self.exclude_extensions),
            exclude_dirs=list(self.exclude_dirs),
            exclude_languages=list(self.exclude_languages),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration layer used while loading and merging.

    ``None`` means "not set by this layer". `freeze` fills anything still unset
    with the runtime defaults from `licenser.constants`.
    """

    default_license: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    year: str | None = None

    auto_save: bool | None = None
    auto_correct: bool | None = None
    cooldown_ms: int | None = None
    debounce_ms: int | None = None

    max_lines: int | None = None
    fuzzy_threshold: float | None = None
    drift_threshold: int | None = None
    fallback_prefix: str | None = None

    templates: dict[str, str] = field(default_factory=lambda: {})

    exclude_extensions: list[str] | None = None
    exclude_dirs: list[str] | None = None
    exclude_languages: list[str] | None = None
    exclude_patterns: list[str] | None = None

    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ValueError: If a numeric setting is out of range.
        """
        cooldown_ms: int = DEFAULT_COOLDOWN_MS if self.cooldown_ms is None else self.cooldown_ms
        debounce_ms: int = DEFAULT_DEBOUNCE_MS if self.debounce_ms is None else self.debounce_ms
        max_lines: int = DEFAULT_MAX_LINES if self.max_lines is None else self.max_lines
        fuzzy_threshold: float = (
            DEFAULT_FUZZY_THRESHOLD if self.fuzzy_threshold is None else self.fuzzy_threshold
        )
        drift_threshold: int = (
            DEFAULT_DRIFT_THRESHOLD if self.drift_threshold is None else self.drift_threshold
        )

        if cooldown_ms < 0 or debounce_ms < 0:
            raise ValueError("cooldown_ms and debounce_ms must not be negative")
        if max_lines <= 0:
            raise ValueError("max_lines must be positive")
        if not 0.0 <= fuzzy_threshold <= 1.0:
            raise ValueError("fuzzy_threshold must be within [0, 1]")
        if drift_threshold < 0:
            raise ValueError("drift_threshold must not be negative")

        return Config(
            default_license=self.default_license or None,
            author_name=self.author_name or "",
            author_email=self.author_email or "",
            year=self.year or None,
            auto_save=bool(self.auto_save),
            auto_correct=bool(self.auto_correct),
            cooldown_ms=cooldown_ms,
            debounce_ms=debounce_ms,
            max_lines=max_lines,
            fuzzy_threshold=fuzzy_threshold,
            drift_threshold=drift_threshold,
            fallback_prefix=(
                DEFAULT_FALLBACK_PREFIX if self.fallback_prefix is None else self.fallback_prefix
            ),
            templates=MappingProxyType(dict(self.templates)),
            exclude_extensions=tuple(_normalize_extensions(self.exclude_extensions or [])),
            exclude_dirs=tuple(self.exclude_dirs or []),
            exclude_languages=tuple(self.exclude_languages or []),
            exclude_patterns=tuple(self.exclude_patterns or []),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a layer from a parsed Licenser table.

        Unknown sections and keys are ignored (and logged at debug level).
        """
        license_table: TomlTable = get_table_value(data, Toml.SECTION_LICENSE)
        auto_table: TomlTable = get_table_value(data, Toml.SECTION_AUTO)
        detection_table: TomlTable = get_table_value(data, Toml.SECTION_DETECTION)
        files_table: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        templates_table: TomlTable = get_table_value(data, Toml.SECTION_TEMPLATES)

        templates: dict[str, str] = {}
        for name, content in templates_table.items():
            if isinstance(content, str):
                templates[name] = content
            else:
                logger.warning("Ignoring template '%s': content must be a string", name)

        def _list_or_none(key: str) -> list[str] | None:
            return get_list_value(files_table, key) if key in files_table else None

        return cls(
            default_license=get_string_value_or_none(license_table, Toml.KEY_DEFAULT),
            author_name=get_string_value_or_none(license_table, Toml.KEY_AUTHOR_NAME),
            author_email=get_string_value_or_none(license_table, Toml.KEY_AUTHOR_EMAIL),
            year=get_string_value_or_none(license_table, Toml.KEY_YEAR),
            auto_save=get_bool_value_or_none(auto_table, Toml.KEY_SAVE),
            auto_correct=get_bool_value_or_none(auto_table, Toml.KEY_CORRECT),
            cooldown_ms=get_int_value_or_none(auto_table, Toml.KEY_COOLDOWN_MS),
            debounce_ms=get_int_value_or_none(auto_table, Toml.KEY_DEBOUNCE_MS),
            max_lines=get_int_value_or_none(detection_table, Toml.KEY_MAX_LINES),
            fuzzy_threshold=get_float_value_or_none(detection_table, Toml.KEY_FUZZY_THRESHOLD),
            drift_threshold=get_int_value_or_none(detection_table, Toml.KEY_DRIFT_THRESHOLD),
            fallback_prefix=get_string_value_or_none(detection_table, Toml.KEY_FALLBACK_PREFIX),
            templates=templates,
            exclude_extensions=_list_or_none(Toml.KEY_EXCLUDE_EXTENSIONS),
            exclude_dirs=_list_or_none(Toml.KEY_EXCLUDE_DIRS),
            exclude_languages=_list_or_none(Toml.KEY_EXCLUDE_LANGUAGES),
            exclude_patterns=_list_or_none(Toml.KEY_EXCLUDE_PATTERNS),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load one configuration layer from ``licenser.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or None if a pyproject has no
                ``[tool.licenser]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_licenser_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Walk upward from ``start`` and return the nearest config file.

        In each directory ``licenser.toml`` wins over a ``pyproject.toml``; a
        pyproject only counts when it carries a ``[tool.licenser]`` section.
        """
        current: Path = start if start.is_dir() else start.parent
        for directory in (current, *current.parents):
            candidate: Path = directory / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
            pyproject: Path = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file() and extract_licenser_table(
                pyproject, load_toml_dict(pyproject)
            ):
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
    ) -> MutableConfig:
        """Return defaults merged with the discovered config and extra files.

        Precedence (lowest to highest): runtime defaults, the nearest config
        file found from ``start``, then each of ``extra_files`` in order.
        """
        merged: MutableConfig = cls.from_defaults()
        sources: list[Path] = []
        if start is not None:
            discovered: Path | None = cls.discover_config_file(start)
            if discovered is not None:
                sources.append(discovered)
        sources.extend(extra_files)

        for path in sources:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is None:
                continue
            merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where ``other``'s set values override ``self``'s."""

        def pick(mine: object, theirs: object) -> object:
            return mine if theirs is None else theirs

        templates: dict[str, str] = dict(self.templates)
        templates.update(other.templates)

        return MutableConfig(
            default_license=pick(self.default_license, other.default_license),  # type: ignore[arg-type]
            author_name=pick(self.author_name, other.author_name),  # type: ignore[arg-type]
            author_email=pick(self.author_email, other.author_email),  # type: ignore[arg-type]
            year=pick(self.year, other.year),  # type: ignore[arg-type]
            auto_save=pick(self.auto_save, other.auto_save),  # type: ignore[arg-type]
            auto_correct=pick(self.auto_correct, other.auto_correct),  # type: ignore[arg-type]
            cooldown_ms=pick(self.cooldown_ms, other.cooldown_ms),  # type: ignore[arg-type]
            debounce_ms=pick(self.debounce_ms, other.debounce_ms),  # type: ignore[arg-type]
            max_lines=pick(self.max_lines, other.max_lines),  # type: ignore[arg-type]
            fuzzy_threshold=pick(self.fuzzy_threshold, other.fuzzy_threshold),  # type: ignore[arg-type]
            drift_threshold=pick(self.drift_threshold, other.drift_threshold),  # type: ignore[arg-type]
            fallback_prefix=pick(self.fallback_prefix, other.fallback_prefix),  # type: ignore[arg-type]
            templates=templates,
            exclude_extensions=pick(self.exclude_extensions, other.exclude_extensions),  # type: ignore[arg-type]
            exclude_dirs=pick(self.exclude_dirs, other.exclude_dirs),  # type: ignore[arg-type]
            exclude_languages=pick(self.exclude_languages, other.exclude_languages),  # type: ignore[arg-type]
            exclude_patterns=pick(self.exclude_patterns, other.exclude_patterns),  # type: ignore[arg-type]
            config_files=[*self.config_files, *other.config_files],
        )


def _normalize_extensions(values: Iterable[str]) -> list[str]:
    """Lower-case extensions and make sure each carries its leading dot."""
    out: list[str] = []
    for value in values:
        ext: str = value.strip().lower()
        if not ext:
            continue
        out.append(ext if ext.startswith(".") else f".{ext}")
    return out
