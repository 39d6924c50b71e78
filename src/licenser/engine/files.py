# licenser:header:start
#
#   project      : Licenser
#   file         : files.py
#   file_relpath : src/licenser/engine/files.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Filesystem-backed document host.

`FileDocument` loads a file into memory, applies edits to the buffer and writes
it back on `FileDocument.save_document`. Internally the buffer uses ``\\n``;
the file's original newline style (LF, CRLF or CR) is restored on save.
`FileWorkspace` maps document ids (resolved paths) to loaded documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from licenser.comments.languages import language_for_path
from licenser.config.logging import get_logger
from licenser.errors import LicenserIOError

if TYPE_CHECKING:
    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)


def detect_newline(text: str) -> str:
    """Return the first newline sequence used in ``text`` (``"\\n"`` if none)."""
    for i, ch in enumerate(text):
        if ch == "\r":
            return "\r\n" if text[i + 1 : i + 2] == "\n" else "\r"
        if ch == "\n":
            return "\n"
    return "\n"


def _to_lf(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class FileDocument:
    """A file opened for license editing.

    Args:
        path (Path): File to edit.
        text (str): Current content (any newline style).
        language_id (str | None): Language override; derived from the path if None.
        encoding (str): Encoding used when saving.
    """

    def __init__(
        self,
        path: Path,
        text: str,
        *,
        language_id: str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.path: Path = path
        self.newline: str = detect_newline(text)
        self.encoding: str = encoding
        self.dirty: bool = False
        self._text: str = _to_lf(text)
        self._language_id: str = language_id or language_for_path(path)

    def __repr__(self) -> str:
        return f"FileDocument({str(self.path)!r}, language_id={self._language_id!r})"

    @classmethod
    def load(
        cls,
        path: Path,
        *,
        language_id: str | None = None,
        encoding: str = "utf-8",
    ) -> FileDocument:
        """Read ``path`` from disk.

        Raises:
            LicenserIOError: If the file cannot be read or decoded.
        """
        try:
            with path.open("r", encoding=encoding, newline="") as fh:
                text: str = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LicenserIOError(f"Cannot read {path}: {e}") from e
        logger.trace("Loaded %s (%d chars)", path, len(text))
        return cls(path, text, language_id=language_id, encoding=encoding)

    # --------------------------- DocumentHost API ---------------------------

    def current_file_text(self) -> str:
        return self._text

    def current_language_id(self) -> str:
        return self._language_id

    def current_path(self) -> Path | None:
        return self.path

    def insert_at(self, line: int, col: int, text: str) -> bool:
        if line < 0 or col < 0:
            return False
        offset: int = self._line_offset(line)
        if offset == len(self._text) and self._text and not self._text.endswith("\n"):
            # inserting below a last line without terminator
            text = "\n" + text
        else:
            line_end: int = self._text.find("\n", offset)
            if line_end == -1:
                line_end = len(self._text)
            offset = min(offset + col, line_end)
        self._text = self._text[:offset] + _to_lf(text) + self._text[offset:]
        self.dirty = True
        return True

    def replace_span(self, start_line: int, end_line: int, new_text: str) -> bool:
        if start_line < 0 or end_line < start_line:
            return False
        start: int = self._line_offset(start_line)
        end: int = self._line_offset(end_line + 1)
        self._text = self._text[:start] + _to_lf(new_text) + self._text[end:]
        self.dirty = True
        return True

    def save_document(self) -> bool:
        try:
            with self.path.open("w", encoding=self.encoding, newline="") as fh:
                fh.write(self._text.replace("\n", self.newline))
        except OSError as e:
            logger.error("Cannot write %s: %s", self.path, e)
            return False
        self.dirty = False
        logger.debug("Saved %s", self.path)
        return True

    # ------------------------------ Helpers ------------------------------

    def _line_offset(self, line: int) -> int:
        """Character offset of the start of ``line`` (end of buffer if past the last line)."""
        pos: int = 0
        for _ in range(line):
            nl: int = self._text.find("\n", pos)
            if nl == -1:
                return len(self._text)
            pos = nl + 1
        return pos


class FileWorkspace:
    """Documents opened from the filesystem, keyed by resolved path."""

    def __init__(self) -> None:
        self._documents: dict[str, FileDocument] = {}

    @staticmethod
    def document_id(path: Path) -> str:
        """Identifier used for ``path`` in save events."""
        return str(path.resolve())

    def open(self, path: Path, *, language_id: str | None = None) -> str:
        """Load ``path`` (if not already open) and return its document id.

        Raises:
            LicenserIOError: If the file cannot be read.
        """
        document_id: str = self.document_id(path)
        if document_id not in self._documents:
            self._documents[document_id] = FileDocument.load(path, language_id=language_id)
        return document_id

    def close(self, document_id: str) -> None:
        """Drop a document from the workspace (unsaved edits are lost)."""
        self._documents.pop(document_id, None)

    def get_document(self, document_id: str) -> FileDocument | None:
        document: FileDocument | None = self._documents.get(document_id)
        if document is None:
            path = Path(document_id)
            if not path.is_file():
                return None
            try:
                self.open(path)
            except LicenserIOError as e:
                logger.warning("%s", e)
                return None
            document = self._documents.get(self.document_id(path))
        return document
