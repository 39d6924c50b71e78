# licenser:header:start
#
#   project      : Licenser
#   file         : styles.py
#   file_relpath : src/licenser/comments/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Comment styles and the language → style lookup table.

A comment style is a closed tagged union of two frozen dataclasses:

- `LineStyle`: every header line carries ``prefix`` (``# `` or ``// ``).
- `BlockStyle`: the header is wrapped in ``start`` / ``end`` delimiters
  (``/*`` … ``*/``, ``<!--`` … ``-->``).

Consumers dispatch with ``match`` or ``isinstance``; the set of styles is small
and fixed, so there is no per-language subclassing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from licenser.config.logging import get_logger
from licenser.constants import DEFAULT_FALLBACK_PREFIX

if TYPE_CHECKING:
    from collections.abc import Mapping

    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)


@dataclass(frozen=True)
class LineStyle:
    """Line comments: each header line starts with ``prefix``.

    Attributes:
        prefix (str): Text prepended verbatim to every rendered line, usually
            the comment token followed by a space (``"# "``).
    """

    prefix: str

    @property
    def token(self) -> str:
        """Comment token without trailing whitespace (``"#"`` for ``"# "``).

        Used for detection: an empty template line renders as ``"# "`` and is
        saved by most editors as a bare ``"#"``.
        """
        return self.prefix.strip() or self.prefix


@dataclass(frozen=True)
class BlockStyle:
    """Block comments delimited by ``start`` and ``end``.

    Attributes:
        start (str): Opening delimiter (``"/*"``).
        end (str): Closing delimiter (``"*/"``).
    """

    start: str
    end: str


CommentStyle = LineStyle | BlockStyle

_C_BLOCK: Final[BlockStyle] = BlockStyle(start="/*", end="*/")
_MARKUP_BLOCK: Final[BlockStyle] = BlockStyle(start="<!--", end="-->")
_POUND: Final[LineStyle] = LineStyle(prefix="# ")

COMMENT_STYLES: Final[Mapping[str, CommentStyle]] = MappingProxyType(
    {
        "python": _POUND,
        "ruby": _POUND,
        "shellscript": _POUND,
        "shell": _POUND,
        "perl": _POUND,
        "r": _POUND,
        "julia": _POUND,
        "toml": _POUND,
        "yaml": _POUND,
        "dockerfile": _POUND,
        "makefile": _POUND,
        "javascript": _C_BLOCK,
        "javascriptreact": _C_BLOCK,
        "typescript": _C_BLOCK,
        "typescriptreact": _C_BLOCK,
        "c": _C_BLOCK,
        "cpp": _C_BLOCK,
        "csharp": _C_BLOCK,
        "java": _C_BLOCK,
        "php": _C_BLOCK,
        "go": _C_BLOCK,
        "rust": _C_BLOCK,
        "swift": _C_BLOCK,
        "kotlin": _C_BLOCK,
        "scala": _C_BLOCK,
        "dart": _C_BLOCK,
        "css": _C_BLOCK,
        "scss": _C_BLOCK,
        "less": _C_BLOCK,
        "html": _MARKUP_BLOCK,
        "xml": _MARKUP_BLOCK,
        "vue": _MARKUP_BLOCK,
    }
)


def supported_languages() -> list[str]:
    """Return the sorted language ids that have a known comment style."""
    return sorted(COMMENT_STYLES)


def style_for_language(
    language_id: str,
    *,
    fallback: CommentStyle | None = None,
) -> CommentStyle:
    """Look up the comment style for ``language_id``.

    Args:
        language_id (str): Editor language identifier (case-insensitive).
        fallback (CommentStyle | None): Style for unknown languages; defaults
            to ``LineStyle("// ")``.

    Returns:
        CommentStyle: The known style, or the fallback.
    """
    style: CommentStyle | None = COMMENT_STYLES.get(language_id.lower())
    if style is not None:
        return style
    logger.debug("No comment style for language '%s'; using fallback", language_id)
    return fallback if fallback is not None else LineStyle(prefix=DEFAULT_FALLBACK_PREFIX)


def describe_style(style: CommentStyle) -> str:
    """Return a short human-readable description, e.g. ``line '# '``."""
    match style:
        case LineStyle(prefix=prefix):
            return f"line {prefix!r}"
        case BlockStyle(start=start, end=end):
            return f"block {start!r}…{end!r}"
    raise TypeError(f"Unsupported comment style: {style!r}")
