# licenser:header:start
#
#   project      : Licenser
#   file         : model.py
#   file_relpath : src/licenser/templates/model.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""License template value types."""

from __future__ import annotations

from dataclasses import dataclass

# Template content after ``{{token}}`` substitution (comment-style agnostic).
RenderedLicense = str

# Rendered text wrapped in a comment style, ending with one blank line.
FormattedLicense = str


@dataclass(frozen=True)
class LicenseTemplate:
    """A raw license template.

    Attributes:
        name (str): License identifier (``"mit"``, ``"apache"`` or a custom name).
        content (str): Unexpanded text with ``{{year}}``/``{{name}}``/``{{email}}``.
        builtin (bool): True for templates bundled with Licenser.
    """

    name: str
    content: str
    builtin: bool = False
