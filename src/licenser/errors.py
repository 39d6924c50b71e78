# licenser:header:start
#
#   project      : Licenser
#   file         : errors.py
#   file_relpath : src/licenser/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Core exception taxonomy.

A missing header or template is *not* an error: lookups return ``None``.
The exceptions below cover the remaining failure classes:

- `LicenserIOError`: the host rejected an edit or a save.
- `ConfigMissingError`: no default license configured, or no template for a name.
- `RenderError`: a template has no content to render.

The auto-save controller logs and swallows all of them; user-invoked actions
in `licenser.engine.service` let `LicenserIOError` propagate so the caller can
surface it. CLI-facing wrappers live in `licenser.cli.errors`.
"""

from __future__ import annotations


class LicenserError(Exception):
    """Base class for all Licenser core errors."""


class LicenserIOError(LicenserError):
    """The document host failed to read, edit or save a document."""


class ConfigMissingError(LicenserError):
    """Required configuration (default license, template) is missing."""


class RenderError(LicenserError):
    """A license template could not be rendered (empty or undefined content)."""
