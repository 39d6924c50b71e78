# licenser:header:start
#
#   project      : Licenser
#   file         : test_classifier.py
#   file_relpath : tests/header/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""License classification: simple (regex) and fuzzy (partial ratio) modes."""

from __future__ import annotations

from licenser.header.classifier import (
    LICENSE_PHRASES,
    NO_LICENSE,
    Classification,
    LicenseClassifier,
)
from tests.conftest import parametrize


def test_default_phrases_are_lower_case() -> None:
    classifier = LicenseClassifier()
    assert classifier.phrases == tuple(p.lower() for p in LICENSE_PHRASES)


@parametrize(
    "text",
    [
        "# Copyright 2024 Ada Lovelace",
        "// SPDX-License-Identifier: Apache-2.0",
        "/* Licensed under the MIT License */",
        "<!-- All Rights Reserved -->",
    ],
)
def test_simple_mode_finds_phrases(text: str) -> None:
    assert LicenseClassifier().has_license(text)


@parametrize(
    "text",
    [
        "import os\n\nprint('hello')\n",
        "# commit the changes and limit retries\n",
        "// helper for the permit parser\n",
        "",
    ],
)
def test_simple_mode_ignores_plain_code(text: str) -> None:
    assert not LicenseClassifier().has_license(text)


def test_simple_mode_respects_max_lines() -> None:
    text = "\n".join(["x = 1"] * 5 + ["# Copyright 2024 Ada"])
    classifier = LicenseClassifier()
    assert not classifier.has_license(text, max_lines=5)
    assert classifier.has_license(text, max_lines=6)


def test_find_phrase_returns_longest_alternative() -> None:
    assert LicenseClassifier().find_phrase("# Licensed under terms") == "licensed under"


def test_fuzzy_exact_match_scores_zero() -> None:
    result = LicenseClassifier().classify_header("# Copyright 2024 Ada")
    assert result.has_license
    assert result.score == 0.0
    assert result.matched_phrase == "copyright"


def test_fuzzy_tolerates_typos() -> None:
    result = LicenseClassifier(threshold=0.2).classify_header("# Copyrght 2024 Ada")
    assert result.has_license
    assert result.matched_phrase == "copyright"
    assert result.score is not None
    assert 0.0 < result.score <= 0.2


def test_fuzzy_threshold_zero_requires_exact_phrase() -> None:
    classifier = LicenseClassifier(threshold=0.0)
    assert not classifier.has_license_fuzzy("# Copyrght 2024 Ada")
    assert classifier.has_license_fuzzy("# copyright 2024 Ada")


def test_fuzzy_short_phrases_match_whole_words_only() -> None:
    classifier = LicenseClassifier()
    assert classifier.has_license_fuzzy("// MIT")
    assert not classifier.has_license_fuzzy("// submit form handler")


def test_fuzzy_ignores_unrelated_comments() -> None:
    assert LicenseClassifier().classify_header("# parse the input") == NO_LICENSE


def test_empty_header_has_no_license() -> None:
    assert LicenseClassifier().classify_header("   \n  ") == NO_LICENSE


def test_custom_phrase_set() -> None:
    classifier = LicenseClassifier(["proprietary notice"], threshold=0.1)
    assert classifier.has_license_fuzzy("# Proprietary Notice: ACME")
    assert not classifier.has_license_fuzzy("# Copyright 2024 Ada")


def test_classification_is_deterministic() -> None:
    classifier = LicenseClassifier()
    content = "/*\n * Permission is hereby granted, free of charge\n */"
    first: Classification = classifier.classify_header(content)
    assert classifier.classify_header(content) == first
    assert first.has_license


def test_fuzzy_mode_handles_long_headers() -> None:
    filler = "\n".join(f"# step {i}: fetch the next batch" for i in range(500))
    classifier = LicenseClassifier()
    assert not classifier.classify_header(filler).has_license

    found = classifier.classify_header(filler + "\n# Copyright 2024 Ada Lovelace")
    assert found == Classification(has_license=True, matched_phrase="copyright", score=0.0)
