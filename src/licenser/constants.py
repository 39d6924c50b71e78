# licenser:header:start
#
#   project      : Licenser
#   file         : constants.py
#   file_relpath : src/licenser/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    LICENSER_VERSION: str = get_version("licenser")
except PackageNotFoundError:  # running from a source checkout
    LICENSER_VERSION = "0.0.0"

# Package holding the bundled license templates (``<name>.txt``):
BUILTIN_TEMPLATE_PACKAGE: Final[str] = "licenser.templates.builtin"

# Config file names, in discovery order
CONFIG_FILE_NAME: Final[str] = "licenser.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "licenser")

LOG_LEVEL_ENV_VAR: Final[str] = "LICENSER_LOG_LEVEL"

# Template variable fallbacks; attribution is never rendered empty.
DEFAULT_AUTHOR_NAME: Final[str] = "Your Name"
DEFAULT_AUTHOR_EMAIL: Final[str] = "your.email@example.com"
DEFAULT_LICENSE_NAME: Final[str] = "mit"

# Controller timing (milliseconds)
DEFAULT_DEBOUNCE_MS: Final[int] = 500
DEFAULT_COOLDOWN_MS: Final[int] = 5000

# Detection tuning
DEFAULT_MAX_LINES: Final[int] = 20
DEFAULT_FUZZY_THRESHOLD: Final[float] = 0.4
DEFAULT_DRIFT_THRESHOLD: Final[int] = 0
DEFAULT_MIN_FUZZY_LENGTH: Final[int] = 5
DEFAULT_FALLBACK_PREFIX: Final[str] = "// "

VALUE_NOT_SET: Final[str] = "<not set>"
