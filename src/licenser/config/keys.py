# licenser:header:start
#
#   project      : Licenser
#   file         : keys.py
#   file_relpath : src/licenser/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Canonical TOML section and key names for Licenser configuration.

These constants define the external configuration schema as it appears in
``licenser.toml`` and in ``[tool.licenser]`` inside ``pyproject.toml``. The
same key names are used by `licenser.engine.settings.ConfigSettings` to answer
``get_config(key)`` requests from the controller.

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Licenser configuration."""

    # [license]
    SECTION_LICENSE: Final[str] = "license"

    KEY_DEFAULT: Final[str] = "default"
    KEY_AUTHOR_NAME: Final[str] = "author_name"
    KEY_AUTHOR_EMAIL: Final[str] = "author_email"
    KEY_YEAR: Final[str] = "year"

    # [auto]
    SECTION_AUTO: Final[str] = "auto"

    KEY_SAVE: Final[str] = "save"
    KEY_CORRECT: Final[str] = "correct"
    KEY_COOLDOWN_MS: Final[str] = "cooldown_ms"
    KEY_DEBOUNCE_MS: Final[str] = "debounce_ms"

    # [detection]
    SECTION_DETECTION: Final[str] = "detection"

    KEY_MAX_LINES: Final[str] = "max_lines"
    KEY_FUZZY_THRESHOLD: Final[str] = "fuzzy_threshold"
    KEY_DRIFT_THRESHOLD: Final[str] = "drift_threshold"
    KEY_FALLBACK_PREFIX: Final[str] = "fallback_prefix"

    # [templates] (name -> raw template text)
    SECTION_TEMPLATES: Final[str] = "templates"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_EXCLUDE_EXTENSIONS: Final[str] = "exclude_extensions"
    KEY_EXCLUDE_DIRS: Final[str] = "exclude_dirs"
    KEY_EXCLUDE_LANGUAGES: Final[str] = "exclude_languages"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"


class ConfigKey:
    """Flat keys answered by ``SettingsSource.get_config``.

    The controller reads these on every save event, so a host can flip
    auto-save or auto-correct without rebuilding the controller.
    """

    AUTHOR_NAME: Final[str] = "author_name"
    AUTHOR_EMAIL: Final[str] = "author_email"
    YEAR: Final[str] = "year"
    DEFAULT_LICENSE: Final[str] = "default_license"
    AUTO_SAVE: Final[str] = "auto_save"
    AUTO_CORRECT: Final[str] = "auto_correct"
    COOLDOWN_MS: Final[str] = "cooldown_ms"
    DEBOUNCE_MS: Final[str] = "debounce_ms"
    MAX_LINES: Final[str] = "max_lines"
    FUZZY_THRESHOLD: Final[str] = "fuzzy_threshold"
    DRIFT_THRESHOLD: Final[str] = "drift_threshold"
    FALLBACK_PREFIX: Final[str] = "fallback_prefix"
