# licenser:header:start
#
#   project      : Licenser
#   file         : drift.py
#   file_relpath : src/licenser/header/drift.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Drift detection between an existing header and the expected one.

Both sides are normalized identically (line endings, empty comment shells,
whitespace runs, case) and compared with a character-level Levenshtein
distance from **rapidfuzz**. A header drifts when the distance exceeds the
threshold, which is 0 by default: once formatting noise is normalized away,
any remaining difference is a real content change (year, holder, wording).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from rapidfuzz.distance import Levenshtein

from licenser.config.logging import get_logger
from licenser.constants import DEFAULT_DRIFT_THRESHOLD

if TYPE_CHECKING:
    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)

_EMPTY_SHELL_RE: Final[re.Pattern[str]] = re.compile(r"/\*+\s*\*/|<!--\s*-->")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Normalize header text for comparison.

    Steps, in order: unify line endings, drop empty comment shells
    (``/* */``, ``<!-- -->``), collapse whitespace runs to one space, trim,
    lower-case.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _EMPTY_SHELL_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip().lower()


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between ``a`` and ``b`` (unit costs)."""
    return Levenshtein.distance(a, b)


def drift_distance(extracted: str, expected: str) -> int:
    """Edit distance between the normalized forms of both headers."""
    return edit_distance(normalize(extracted), normalize(expected))


def has_drift(extracted: str, expected: str, threshold: int = DEFAULT_DRIFT_THRESHOLD) -> bool:
    """Return True if ``extracted`` diverges from ``expected``.

    Args:
        extracted (str): Text of the header found in the file.
        expected (str): Text the header should have (rendered template).
        threshold (int): Largest normalized edit distance still considered equal.

    Returns:
        bool: ``distance > threshold``.
    """
    # distances above the cutoff come back as cutoff + 1
    distance: int = Levenshtein.distance(
        normalize(extracted),
        normalize(expected),
        score_cutoff=threshold + 1,
    )
    logger.trace("Drift distance %d (threshold %d)", distance, threshold)
    return distance > threshold
