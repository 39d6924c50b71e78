# licenser:header:start
#
#   project      : Licenser
#   file         : host.py
#   file_relpath : src/licenser/engine/host.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Interfaces the engine consumes from its host (editor or filesystem).

The engine never touches files or settings directly. A host supplies:

- `DocumentHost`: one open document (text, language, edits, save).
- `Workspace`: resolves a document id from a save event to a `DocumentHost`.
- `SettingsSource`: templates and configuration values.

Edit and save operations return ``False`` on failure; hosts may also raise
`licenser.errors.LicenserIOError`. The engine treats both the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from licenser.templates.model import LicenseTemplate


@dataclass(frozen=True)
class SaveEvent:
    """Notification that a document was saved.

    Attributes:
        document_id (str): Host identifier of the document.
        timestamp (float): Host clock time of the save, in milliseconds.
    """

    document_id: str
    timestamp: float


@runtime_checkable
class DocumentHost(Protocol):
    """One document, as exposed by the host."""

    def current_file_text(self) -> str:
        """Return the full current text of the document."""
        ...

    def current_language_id(self) -> str:
        """Return the editor language id (``"python"``, ``"typescript"``...)."""
        ...

    def current_path(self) -> Path | None:
        """Return the document path, or None for untitled documents."""
        ...

    def replace_span(self, start_line: int, end_line: int, new_text: str) -> bool:
        """Replace lines ``start_line..end_line`` (inclusive, with their line breaks)."""
        ...

    def insert_at(self, line: int, col: int, text: str) -> bool:
        """Insert ``text`` at (``line``, ``col``)."""
        ...

    def save_document(self) -> bool:
        """Persist the document. Hosts notify save listeners afterwards."""
        ...


class Workspace(Protocol):
    """Resolves document ids to documents."""

    def get_document(self, document_id: str) -> DocumentHost | None:
        """Return the open document ``document_id``, or None if it is gone."""
        ...


class SettingsSource(Protocol):
    """Read access to templates and configuration values."""

    def get_template(self, name: str) -> LicenseTemplate | None:
        """Return the template called ``name``, or None."""
        ...

    def get_config(self, key: str) -> Any:
        """Return the value for a `licenser.config.keys.ConfigKey`, or None."""
        ...
