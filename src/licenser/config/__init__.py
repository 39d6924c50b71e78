# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser configuration: model, TOML loading, exclusion policy and logging.

Build configs with `MutableConfig` (defaults, files, overrides), then
`freeze()` into an immutable `Config` for the engine.
"""

from __future__ import annotations

from licenser.config.model import Config, MutableConfig
from licenser.config.policy import FilePolicy

__all__ = [
    "Config",
    "FilePolicy",
    "MutableConfig",
]
