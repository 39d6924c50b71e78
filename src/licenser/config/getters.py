# licenser:header:start
#
#   project      : Licenser
#   file         : getters.py
#   file_relpath : src/licenser/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Typed accessors for values in parsed TOML tables.

TOML documents are unwrapped to plain ``dict`` structures by
`licenser.config.loaders`. These helpers pull values out of those tables,
coercing where it is unambiguous and falling back to a default (with a debug
log line) otherwise.
"""

from __future__ import annotations

from typing import Any

from licenser.config.logging import LicenserLogger, get_logger

TomlTable = dict[str, Any]

logger: LicenserLogger = get_logger(__name__)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict if absent or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return value
    if value is not None:
        logger.warning("Expected a table for key '%s', got %s", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    ``int``, ``float`` and ``bool`` values are coerced with ``str(...)``; a year
    written as ``year = 2024`` thus reads back as ``"2024"``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or None when missing or not coercible.
    """
    value: Any = table.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    if value is not None:
        logger.debug("Cannot coerce %r to string for key '%s'", value, key)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any = table.get(key)
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to bool for key '%s'", value, key)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table (bools are rejected)."""
    value: Any = table.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to int for key '%s'", value, key)
    return None


def get_float_value_or_none(table: TomlTable, key: str) -> float | None:
    """Extract an optional float value; integers are widened."""
    value: Any = table.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if value is not None:
        logger.debug("Cannot coerce %r to float for key '%s'", value, key)
    return None


def get_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings, dropping (and logging) non-string entries."""
    value: Any = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected a list for key '%s', got %s", key, type(value).__name__)
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in '%s'", item, key)
    return out
