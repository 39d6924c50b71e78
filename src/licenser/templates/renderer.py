# licenser:header:start
#
#   project      : Licenser
#   file         : renderer.py
#   file_relpath : src/licenser/templates/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Render license templates and wrap them in a comment style.

Rendering replaces ``{{year}}``, ``{{name}}`` and ``{{email}}`` (token names are
case-insensitive). Unknown tokens are left untouched. A variable that is
missing or empty falls back to the caller's defaults, then to the built-in
fallbacks, so a header is never rendered with blank attribution.

Formatting wraps the rendered text:

- line styles prefix every line with ``style.prefix`` verbatim;
- block styles open with ``start``, align the body on `` * `` and close with
  `` end`` on its own line (single-line texts collapse to one line).

The formatted text always ends with ``"\\n\\n"`` so that exactly one blank line
separates the header from the code that follows.
"""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING, Final

from licenser.comments.styles import BlockStyle, LineStyle
from licenser.config.logging import get_logger
from licenser.constants import DEFAULT_AUTHOR_EMAIL, DEFAULT_AUTHOR_NAME
from licenser.errors import RenderError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from licenser.comments.styles import CommentStyle
    from licenser.config.logging import LicenserLogger
    from licenser.templates.model import FormattedLicense, LicenseTemplate, RenderedLicense

logger: LicenserLogger = get_logger(__name__)

VAR_YEAR: Final[str] = "year"
VAR_NAME: Final[str] = "name"
VAR_EMAIL: Final[str] = "email"

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"\{\{(" + "|".join((VAR_YEAR, VAR_NAME, VAR_EMAIL)) + r")\}\}",
    re.IGNORECASE,
)

LICENSE_SUFFIX: Final[str] = "\n\n"


def default_variables() -> dict[str, str]:
    """Return the built-in fallbacks: current year and placeholder attribution."""
    return {
        VAR_YEAR: str(datetime.date.today().year),
        VAR_NAME: DEFAULT_AUTHOR_NAME,
        VAR_EMAIL: DEFAULT_AUTHOR_EMAIL,
    }


def render(
    template: LicenseTemplate,
    variables: Mapping[str, str | None] | None = None,
    *,
    defaults: Mapping[str, str] | None = None,
) -> RenderedLicense:
    """Substitute template variables.

    Args:
        template (LicenseTemplate): The template to expand.
        variables (Mapping[str, str | None] | None): Values for ``year``,
            ``name`` and ``email``; None or empty values are treated as missing.
        defaults (Mapping[str, str] | None): Caller fallbacks for missing values.

    Returns:
        RenderedLicense: The expanded text.

    Raises:
        RenderError: If the template content is empty.
    """
    if not template.content or not template.content.strip():
        raise RenderError(f"Template '{template.name}' has no content")

    resolved: dict[str, str] = default_variables()
    for source in (defaults or {}, variables or {}):
        for key, value in source.items():
            if value:
                resolved[key.lower()] = str(value)

    def _substitute(match: re.Match[str]) -> str:
        return resolved[match.group(1).lower()]

    rendered: str = _TOKEN_RE.sub(_substitute, template.content)
    logger.trace("Rendered template '%s' (%d chars)", template.name, len(rendered))
    return rendered


def _template_lines(rendered: str) -> list[str]:
    text: str = rendered.replace("\r\n", "\n").replace("\r", "\n").strip("\n")
    return text.split("\n")


def format_license(rendered: RenderedLicense, style: CommentStyle) -> FormattedLicense:
    """Wrap ``rendered`` in ``style``.

    Leading and trailing newlines of the rendered text are dropped; its inner
    lines are kept as they are.

    Returns:
        FormattedLicense: The text to insert, ending with ``"\\n\\n"``.
    """
    lines: list[str] = _template_lines(rendered)
    body: str
    match style:
        case LineStyle(prefix=prefix):
            body = "\n".join(f"{prefix}{line}" for line in lines)
        case BlockStyle(start=start, end=end):
            if len(lines) == 1:
                body = f"{start} {lines[0]} {end}"
            else:
                out: list[str] = [f"{start} {lines[0]}"]
                out.extend(f" * {line.strip()}" for line in lines[1:-1])
                out.append(f" * {lines[-1].strip()}\n {end}")
                body = "\n".join(out)
        case _:
            raise TypeError(f"Unsupported comment style: {style!r}")
    return body + LICENSE_SUFFIX


def build_license(
    template: LicenseTemplate,
    style: CommentStyle,
    variables: Mapping[str, str | None] | None = None,
    *,
    defaults: Mapping[str, str] | None = None,
) -> FormattedLicense:
    """`render` then `format_license`."""
    return format_license(render(template, variables, defaults=defaults), style)
