# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/comments/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Comment delimiters per language."""

from __future__ import annotations

from licenser.comments.languages import language_for_path
from licenser.comments.styles import (
    BlockStyle,
    CommentStyle,
    LineStyle,
    style_for_language,
)

__all__ = [
    "BlockStyle",
    "CommentStyle",
    "LineStyle",
    "language_for_path",
    "style_for_language",
]
