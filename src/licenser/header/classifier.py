# licenser:header:start
#
#   project      : Licenser
#   file         : classifier.py
#   file_relpath : src/licenser/header/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""License classifier: does a text plausibly carry a license header?

Two modes share one phrase set:

- **Simple** (`LicenseClassifier.has_license`): a case-insensitive regular
  expression over the first ``max_lines`` lines of a file. Phrases are matched
  on word boundaries, so ``commit`` or ``limit`` never count as ``mit``.
- **Fuzzy** (`LicenseClassifier.classify_header`): approximate substring
  search of every phrase in the lower-cased header content with
  **rapidfuzz** (`fuzz.partial_ratio`, the similarity of the best matching
  window). The score of a phrase is ``1 - similarity``; any score at or below
  ``threshold`` is a hit. Phrases shorter than ``min_fuzzy_length`` are
  matched exactly as words, because a single typo in a three-letter token
  matches almost anything.

Classification errs toward "has license": inserting a second header over
ambiguous text is worse than leaving a file alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from rapidfuzz import fuzz

from licenser.config.logging import get_logger
from licenser.constants import (
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_LINES,
    DEFAULT_MIN_FUZZY_LENGTH,
)
from licenser.header.extractor import split_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)

LICENSE_PHRASES: Final[tuple[str, ...]] = (
    "license",
    "licence",
    "licensed under",
    "copyright",
    "all rights reserved",
    "permission is hereby granted",
    "licensor",
    "spdx-license-identifier",
    "mit",
    "apache",
    "gpl",
    "lgpl",
    "bsd",
    "isc",
    "mozilla public",
    "free software foundation",
    "without warranty",
)


@dataclass(frozen=True)
class Classification:
    """Result of a license classification.

    Attributes:
        has_license (bool): True if a license phrase was found.
        matched_phrase (str | None): Best matching phrase, if any.
        score (float | None): ``1 - similarity`` of the best match
            (0.0 is exact); None when nothing matched.
    """

    has_license: bool
    matched_phrase: str | None = None
    score: float | None = None


NO_LICENSE: Final[Classification] = Classification(has_license=False)


class LicenseClassifier:
    """Phrase-based license detection.

    Args:
        phrases (Iterable[str]): Phrases that indicate a license header.
        threshold (float): Fuzzy acceptance threshold, in [0, 1].
        min_fuzzy_length (int): Phrases shorter than this are matched exactly.
    """

    def __init__(
        self,
        phrases: Iterable[str] = LICENSE_PHRASES,
        *,
        threshold: float = DEFAULT_FUZZY_THRESHOLD,
        min_fuzzy_length: int = DEFAULT_MIN_FUZZY_LENGTH,
    ) -> None:
        self.phrases: tuple[str, ...] = tuple(p.lower() for p in phrases)
        self.threshold: float = threshold
        self.min_fuzzy_length: int = min_fuzzy_length
        self._pattern: re.Pattern[str] = re.compile(
            r"\b(?:"
            + "|".join(re.escape(p) for p in sorted(self.phrases, key=len, reverse=True))
            + r")\b",
            re.IGNORECASE,
        )

    def __repr__(self) -> str:
        return (
            f"LicenseClassifier(phrases={len(self.phrases)}, "
            f"threshold={self.threshold}, min_fuzzy_length={self.min_fuzzy_length})"
        )

    def find_phrase(self, text: str, max_lines: int = DEFAULT_MAX_LINES) -> str | None:
        """Return the first phrase found in the first ``max_lines`` lines, or None."""
        for line in split_lines(text)[:max_lines]:
            match = self._pattern.search(line)
            if match is not None:
                return match.group(0).lower()
        return None

    def has_license(self, text: str, max_lines: int = DEFAULT_MAX_LINES) -> bool:
        """Simple mode: regex search over the first ``max_lines`` lines of ``text``."""
        return self.find_phrase(text, max_lines) is not None

    def classify_header(self, content: str) -> Classification:
        """Fuzzy mode: classify extracted header content.

        Args:
            content (str): Header text (comment markers may be included).

        Returns:
            Classification: The best match, or `NO_LICENSE`.
        """
        haystack: str = " ".join(content.lower().split())
        if not haystack:
            return NO_LICENSE

        cutoff: float = (1.0 - self.threshold) * 100.0
        best_phrase: str | None = None
        best_score: float | None = None
        for phrase in self.phrases:
            if len(phrase) < self.min_fuzzy_length:
                if re.search(rf"\b{re.escape(phrase)}\b", haystack):
                    score: float = 0.0
                else:
                    continue
            else:
                # a header shorter than the phrase cannot contain it
                if len(haystack) < len(phrase) * (1.0 - self.threshold):
                    continue
                similarity: float = fuzz.partial_ratio(phrase, haystack, score_cutoff=cutoff)
                if not similarity:
                    continue
                score = 1.0 - similarity / 100.0
            if best_score is None or score < best_score:
                best_phrase, best_score = phrase, score
                if score == 0.0:
                    break

        if best_phrase is None:
            logger.trace("No license phrase in header (%d chars)", len(haystack))
            return NO_LICENSE
        logger.trace("License phrase '%s' matched (score %.3f)", best_phrase, best_score)
        return Classification(has_license=True, matched_phrase=best_phrase, score=best_score)

    def has_license_fuzzy(self, content: str) -> bool:
        """Fuzzy mode as a boolean."""
        return self.classify_header(content).has_license
