# licenser:header:start
#
#   project      : Licenser
#   file         : test_renderer.py
#   file_relpath : tests/templates/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Template rendering and comment formatting."""

from __future__ import annotations

import datetime

import pytest

from licenser.comments.styles import BlockStyle, LineStyle
from licenser.constants import DEFAULT_AUTHOR_EMAIL, DEFAULT_AUTHOR_NAME
from licenser.errors import RenderError
from licenser.templates.model import LicenseTemplate
from licenser.templates.renderer import (
    LICENSE_SUFFIX,
    build_license,
    default_variables,
    format_license,
    render,
)
from tests.conftest import parametrize

TEMPLATE = LicenseTemplate(name="t", content="Copyright {{year}} {{name}} <{{email}}>")


def test_render_substitutes_variables() -> None:
    out = render(TEMPLATE, {"year": "2024", "name": "Ada", "email": "ada@example.com"})
    assert out == "Copyright 2024 Ada <ada@example.com>"


def test_render_tokens_are_case_insensitive() -> None:
    template = LicenseTemplate(name="t", content="{{YEAR}} {{Name}} {{eMail}}")
    assert render(template, {"year": "1999", "name": "N", "email": "E"}) == "1999 N E"


def test_render_falls_back_for_missing_values() -> None:
    out = render(TEMPLATE, {"year": None, "name": "", "email": None})
    year = str(datetime.date.today().year)
    assert out == f"Copyright {year} {DEFAULT_AUTHOR_NAME} <{DEFAULT_AUTHOR_EMAIL}>"


def test_render_caller_defaults_win_over_builtin_fallbacks() -> None:
    out = render(TEMPLATE, {"name": None}, defaults={"name": "ACME", "year": "2000"})
    assert out.startswith("Copyright 2000 ACME <")


def test_render_leaves_unknown_tokens() -> None:
    template = LicenseTemplate(name="t", content="{{project}} by {{name}}")
    assert render(template, {"name": "Ada"}) == "{{project}} by Ada"


@parametrize("content", ["", "   \n\t"])
def test_render_rejects_empty_templates(content: str) -> None:
    with pytest.raises(RenderError):
        render(LicenseTemplate(name="empty", content=content))


def test_default_variables() -> None:
    values = default_variables()
    assert values["year"] == str(datetime.date.today().year)
    assert values["name"] == DEFAULT_AUTHOR_NAME
    assert values["email"] == DEFAULT_AUTHOR_EMAIL


def test_format_line_style() -> None:
    out = format_license("Copyright 2024 Ada\n\nMIT", LineStyle(prefix="# "))
    assert out == "# Copyright 2024 Ada\n# \n# MIT\n\n"


def test_format_block_style_multiline() -> None:
    out = format_license("Copyright 2024 Ada\n  MIT\nEnd", BlockStyle(start="/*", end="*/"))
    assert out == "/* Copyright 2024 Ada\n * MIT\n * End\n */\n\n"


def test_format_block_style_two_lines() -> None:
    out = format_license("one\ntwo", BlockStyle(start="<!--", end="-->"))
    assert out == "<!-- one\n * two\n -->\n\n"


def test_format_block_style_single_line() -> None:
    out = format_license("Copyright 2024 Ada", BlockStyle(start="/*", end="*/"))
    assert out == "/* Copyright 2024 Ada */\n\n"


def test_format_drops_surrounding_newlines() -> None:
    out = format_license("\n\nMIT\n", LineStyle(prefix="// "))
    assert out == "// MIT\n\n"


@parametrize(
    "style",
    [LineStyle(prefix="# "), LineStyle(prefix="// "), BlockStyle(start="/*", end="*/")],
)
def test_formatted_license_always_ends_with_blank_line(style: LineStyle | BlockStyle) -> None:
    out = build_license(TEMPLATE, style, {"year": "2024"})
    assert out.endswith(LICENSE_SUFFIX)
    assert not out.endswith("\n\n\n")
