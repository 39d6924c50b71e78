# licenser:header:start
#
#   project      : Licenser
#   file         : languages.py
#   file_relpath : src/licenser/comments/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""File name → language id resolution for hosts without a language service.

Editors hand the engine a language id directly. The filesystem host and the
CLI only have a path, so they resolve the id from the file name here, using
the same identifiers an editor would report.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import PurePath

PLAINTEXT: Final[str] = "plaintext"

EXTENSION_LANGUAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        ".py": "python",
        ".pyi": "python",
        ".rb": "ruby",
        ".sh": "shellscript",
        ".bash": "shellscript",
        ".zsh": "shellscript",
        ".pl": "perl",
        ".r": "r",
        ".jl": "julia",
        ".toml": "toml",
        ".yml": "yaml",
        ".yaml": "yaml",
        ".js": "javascript",
        ".mjs": "javascript",
        ".cjs": "javascript",
        ".jsx": "javascriptreact",
        ".ts": "typescript",
        ".mts": "typescript",
        ".tsx": "typescriptreact",
        ".c": "c",
        ".h": "c",
        ".cc": "cpp",
        ".cpp": "cpp",
        ".cxx": "cpp",
        ".hh": "cpp",
        ".hpp": "cpp",
        ".hxx": "cpp",
        ".cs": "csharp",
        ".java": "java",
        ".php": "php",
        ".go": "go",
        ".rs": "rust",
        ".swift": "swift",
        ".kt": "kotlin",
        ".kts": "kotlin",
        ".scala": "scala",
        ".dart": "dart",
        ".css": "css",
        ".scss": "scss",
        ".less": "less",
        ".html": "html",
        ".htm": "html",
        ".xml": "xml",
        ".vue": "vue",
        ".json": "json",
        ".md": "markdown",
        ".txt": PLAINTEXT,
    }
)

FILENAME_LANGUAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Dockerfile": "dockerfile",
        "Makefile": "makefile",
        "GNUmakefile": "makefile",
    }
)


def language_for_path(path: PurePath) -> str:
    """Return the language id for ``path``, or ``"plaintext"`` when unknown."""
    by_name: str | None = FILENAME_LANGUAGES.get(path.name)
    if by_name is not None:
        return by_name
    return EXTENSION_LANGUAGES.get(path.suffix.lower(), PLAINTEXT)
