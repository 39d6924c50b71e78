# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/templates/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""License templates: storage, rendering and comment formatting."""

from __future__ import annotations

from licenser.templates.model import LicenseTemplate
from licenser.templates.renderer import build_license, format_license, render
from licenser.templates.store import TemplateStore

__all__ = [
    "LicenseTemplate",
    "TemplateStore",
    "build_license",
    "format_license",
    "render",
]
