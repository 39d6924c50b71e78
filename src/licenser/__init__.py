# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser package.

Licenser keeps license/copyright headers at the top of source files in shape.
It extracts existing header comments per language, classifies them, detects
drift against a configured template and, when enabled, corrects the drift on
save without triggering re-entrant save storms. An editor host drives the
engine through small protocols; a Click CLI drives it against files on disk.
"""

from __future__ import annotations
