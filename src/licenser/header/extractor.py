# licenser:header:start
#
#   project      : Licenser
#   file         : extractor.py
#   file_relpath : src/licenser/header/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Header extraction: locate the header comment of a file.

Given the lines of a file and its `CommentStyle`, `extract` returns the comment
block (block styles) or the contiguous run of comment lines (line styles) that
opens the file as an `ExtractedHeader`, or ``None`` when there is none.

Preamble:
    A ``#!`` shebang on the first line and a PEP 263 encoding declaration
    (``# -*- coding: utf-8 -*-``) on the first line or directly after the
    shebang stay where they are: they never belong to a header, and new
    headers go below them. Blank lines after the preamble are skipped.

Block styles:
    The first remaining line must open a comment with ``style.start``; lines
    are accumulated until one contains ``style.end`` (inclusive). On the
    opening line only the text after the start token is searched for the end
    token, so ``/* x */`` is a one-line header. An unterminated block is not a
    header.

Line styles:
    The first remaining line must start with the comment token. Following
    lines are included while they carry the token; a single blank line is
    tolerated only when the next line carries the token again. Use
    `paragraphs` to split such a run at its blank lines.

A comment that only appears after code is never a header. The header content
is opaque at this stage: nested or mixed markers inside it are not
interpreted. Use `strip_comment_markers` to recover its plain text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from licenser.comments.styles import BlockStyle, CommentStyle, LineStyle
from licenser.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)

SHEBANG: str = "#!"

# PEP 263 encoding declaration
ENCODING_LINE_RE: Final[re.Pattern[str]] = re.compile(r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")


@dataclass(frozen=True)
class ExtractedHeader:
    """Contiguous header comment region of a file.

    Attributes:
        content (str): The header lines joined with ``"\\n"``, comment markers included.
        start_line (int): 0-based index of the first header line.
        end_line (int): 0-based index of the last header line (inclusive).
    """

    content: str
    start_line: int
    end_line: int

    @property
    def line_count(self) -> int:
        """Number of lines spanned by the header."""
        return self.end_line - self.start_line + 1


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines without line terminators.

    Accepts ``\\n``, ``\\r\\n`` and ``\\r``. An empty text has no lines.
    """
    return text.splitlines()


def has_shebang(lines: Sequence[str]) -> bool:
    """Return True if the first line is a ``#!`` interpreter line."""
    return bool(lines) and lines[0].startswith(SHEBANG)


def preamble_length(lines: Sequence[str]) -> int:
    """Number of leading lines that must stay on top: shebang, then encoding line."""
    index: int = 1 if has_shebang(lines) else 0
    if index < len(lines) and ENCODING_LINE_RE.match(lines[index]):
        index += 1
    return index


def extract(lines: Sequence[str], style: CommentStyle) -> ExtractedHeader | None:
    """Locate the header comment in ``lines``.

    Args:
        lines (Sequence[str]): File lines without terminators.
        style (CommentStyle): Comment style of the file's language.

    Returns:
        ExtractedHeader | None: The header region, or None if the file does
            not open with a comment.
    """
    first: int = preamble_length(lines)
    while first < len(lines) and not lines[first].strip():
        first += 1
    if first >= len(lines):
        return None

    match style:
        case BlockStyle():
            header = _extract_block(lines, style, first)
        case LineStyle():
            header = _extract_line_run(lines, style, first)
        case _:
            raise TypeError(f"Unsupported comment style: {style!r}")

    if header is None:
        logger.trace("No header found (%d lines, style=%r)", len(lines), style)
    else:
        logger.trace(
            "Header found at lines %d..%d (style=%r)",
            header.start_line,
            header.end_line,
            style,
        )
    return header


def extract_from_text(text: str, style: CommentStyle) -> ExtractedHeader | None:
    """Convenience wrapper: `split_lines` then `extract`."""
    return extract(split_lines(text), style)


def _extract_block(
    lines: Sequence[str],
    style: BlockStyle,
    start_idx: int,
) -> ExtractedHeader | None:
    line: str = lines[start_idx]
    if not line.lstrip().startswith(style.start):
        return None
    pos: int = line.find(style.start)
    if line.find(style.end, pos + len(style.start)) != -1:
        return header_span(lines, start_idx, start_idx)
    for end_idx in range(start_idx + 1, len(lines)):
        if style.end in lines[end_idx]:
            return header_span(lines, start_idx, end_idx)
    logger.debug("Unterminated block comment starting at line %d", start_idx)
    return None


def _extract_line_run(
    lines: Sequence[str],
    style: LineStyle,
    start_idx: int,
) -> ExtractedHeader | None:
    token: str = style.token

    def is_comment(line: str) -> bool:
        return line.strip().startswith(token)

    if not is_comment(lines[start_idx]):
        return None

    end_idx: int = start_idx
    idx = start_idx + 1
    while idx < len(lines):
        if is_comment(lines[idx]):
            end_idx = idx
            idx += 1
        elif not lines[idx].strip() and idx + 1 < len(lines) and is_comment(lines[idx + 1]):
            # single blank line inside the run
            end_idx = idx + 1
            idx += 2
        else:
            break
    return header_span(lines, start_idx, end_idx)


def header_span(lines: Sequence[str], start_idx: int, end_idx: int) -> ExtractedHeader:
    """Build the `ExtractedHeader` covering ``lines[start_idx:end_idx + 1]``."""
    return ExtractedHeader(
        content="\n".join(lines[start_idx : end_idx + 1]),
        start_line=start_idx,
        end_line=end_idx,
    )


def paragraphs(lines: Sequence[str], header: ExtractedHeader) -> list[ExtractedHeader]:
    """Split ``header`` at its blank lines.

    A line-comment run may hold several comments separated by single blank
    lines (a license followed by a module note, say). Block headers and runs
    without blank lines come back as a single paragraph.
    """
    out: list[ExtractedHeader] = []
    start: int | None = None
    for idx in range(header.start_line, header.end_line + 1):
        if lines[idx].strip():
            if start is None:
                start = idx
            continue
        if start is not None:
            out.append(header_span(lines, start, idx - 1))
            start = None
    if start is not None:
        out.append(header_span(lines, start, header.end_line))
    return out


def strip_comment_markers(content: str, style: CommentStyle) -> str:
    """Return the plain text of a header, without comment markers.

    Line styles drop the comment token (and one following space) from every
    line. Block styles drop the delimiters and a single leading ``*`` per
    line. Leading and trailing blank lines are removed; inner ones are kept.
    """
    out: list[str] = []
    match style:
        case LineStyle():
            token: str = style.token
            for line in content.split("\n"):
                text: str = line.strip()
                if text.startswith(token):
                    text = text[len(token) :]
                    if text.startswith(" "):
                        text = text[1:]
                out.append(text.rstrip())
        case BlockStyle():
            raw: list[str] = content.split("\n")
            if raw:
                first_pos: int = raw[0].find(style.start)
                if first_pos != -1:
                    raw[0] = raw[0][first_pos + len(style.start) :]
                last_pos: int = raw[-1].rfind(style.end)
                if last_pos != -1:
                    raw[-1] = raw[-1][:last_pos]
            for line in raw:
                text = line.strip()
                if text.startswith("*"):
                    text = text[1:].strip()
                out.append(text)
        case _:
            raise TypeError(f"Unsupported comment style: {style!r}")

    while out and not out[0]:
        out.pop(0)
    while out and not out[-1]:
        out.pop()
    return "\n".join(out)
