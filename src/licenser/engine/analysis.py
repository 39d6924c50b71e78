# licenser:header:start
#
#   project      : Licenser
#   file         : analysis.py
#   file_relpath : src/licenser/engine/analysis.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Document analysis shared by the auto-save controller and the license service.

`analyze_text` runs extraction, classification and (when the expected header is
known) drift detection on one document and returns a `LicenseReport`. A
line-comment run that also holds an unrelated comment is narrowed to its
license paragraphs by `license_span`, so edits never touch the other comment.
The remaining helpers resolve the expected header from a `SettingsSource` and
compute edit positions (insertion point below the shebang and encoding line,
replacement span including the blank lines that follow a header).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from licenser.comments.styles import LineStyle, style_for_language
from licenser.config.keys import ConfigKey
from licenser.config.logging import get_logger
from licenser.constants import (
    DEFAULT_DRIFT_THRESHOLD,
    DEFAULT_FALLBACK_PREFIX,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_LINES,
)
from licenser.engine.state import HeaderStatus
from licenser.errors import ConfigMissingError, RenderError
from licenser.header.classifier import Classification, LicenseClassifier
from licenser.header.drift import has_drift
from licenser.header.extractor import (
    extract,
    header_span,
    paragraphs,
    preamble_length,
    split_lines,
    strip_comment_markers,
)
from licenser.templates.renderer import VAR_EMAIL, VAR_NAME, VAR_YEAR, build_license

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from licenser.comments.styles import CommentStyle
    from licenser.config.logging import LicenserLogger
    from licenser.engine.host import DocumentHost, SettingsSource
    from licenser.header.extractor import ExtractedHeader
    from licenser.templates.model import FormattedLicense

logger: LicenserLogger = get_logger(__name__)


@dataclass(frozen=True)
class LicenseReport:
    """What Licenser knows about one document.

    Attributes:
        path (Path | None): Document path, if any.
        language_id (str): Language id used to pick the comment style.
        style (CommentStyle): Comment style of the document.
        header (ExtractedHeader | None): The header comment, if one was found.
        classification (Classification): License classification. Without a
            header the first lines of the text are searched instead.
        expected (FormattedLicense | None): Header the document should carry,
            when it could be rendered.
        drift (bool | None): True if ``header`` differs from ``expected``;
            None when there is nothing to compare.
    """

    path: Path | None
    language_id: str
    style: CommentStyle
    header: ExtractedHeader | None
    classification: Classification
    expected: FormattedLicense | None = None
    drift: bool | None = None

    @property
    def has_license(self) -> bool:
        """True if the document appears to carry a license."""
        return self.classification.has_license

    @property
    def has_license_header(self) -> bool:
        """True if a license header was located precisely (and can be edited)."""
        return self.header is not None and self.classification.has_license

    @property
    def status(self) -> HeaderStatus:
        """Summary status: missing, drifting, ok, or not compared."""
        if not self.has_license:
            return HeaderStatus.MISSING
        if self.drift is None:
            return HeaderStatus.UNVERIFIED
        return HeaderStatus.DRIFT if self.drift else HeaderStatus.OK


def _setting(settings: SettingsSource, key: str, default: Any) -> Any:
    value: Any = settings.get_config(key)
    return default if value is None else value


def style_for(settings: SettingsSource, language_id: str) -> CommentStyle:
    """Comment style for ``language_id``, honoring the configured fallback prefix."""
    prefix: str = _setting(settings, ConfigKey.FALLBACK_PREFIX, DEFAULT_FALLBACK_PREFIX)
    return style_for_language(language_id, fallback=LineStyle(prefix=prefix))


def classifier_for(settings: SettingsSource) -> LicenseClassifier:
    """Return a classifier using the configured fuzzy threshold."""
    threshold: float = float(
        _setting(settings, ConfigKey.FUZZY_THRESHOLD, DEFAULT_FUZZY_THRESHOLD)
    )
    return LicenseClassifier(threshold=threshold)


def expected_license(
    settings: SettingsSource,
    style: CommentStyle,
    license_name: str | None = None,
) -> FormattedLicense:
    """Render and format the license a document should carry.

    Args:
        settings (SettingsSource): Template and variable source.
        style (CommentStyle): Target comment style.
        license_name (str | None): Template name; defaults to the configured
            default license.

    Returns:
        FormattedLicense: The formatted header.

    Raises:
        ConfigMissingError: If no license name is configured or the template
            does not exist.
        RenderError: If the template is empty.
    """
    name: str | None = license_name or settings.get_config(ConfigKey.DEFAULT_LICENSE)
    if not name:
        raise ConfigMissingError("No default license configured")
    template = settings.get_template(name)
    if template is None:
        raise ConfigMissingError(f"No template for license '{name}'")
    variables: dict[str, str | None] = {
        VAR_YEAR: settings.get_config(ConfigKey.YEAR),
        VAR_NAME: settings.get_config(ConfigKey.AUTHOR_NAME),
        VAR_EMAIL: settings.get_config(ConfigKey.AUTHOR_EMAIL),
    }
    return build_license(template, style, variables)


def header_drifts(
    header: ExtractedHeader,
    expected: FormattedLicense,
    style: CommentStyle,
    threshold: int = DEFAULT_DRIFT_THRESHOLD,
) -> bool:
    """Compare a header against its expected form, both without comment markers."""
    return has_drift(
        strip_comment_markers(header.content, style),
        strip_comment_markers(expected.rstrip("\n"), style),
        threshold,
    )


def license_span(
    lines: Sequence[str],
    header: ExtractedHeader,
    style: CommentStyle,
    classifier: LicenseClassifier,
    *,
    expected: FormattedLicense | None = None,
    threshold: int = DEFAULT_DRIFT_THRESHOLD,
) -> ExtractedHeader:
    """Narrow a line-comment run to the paragraphs that hold the license.

    A run may join the license and an unrelated comment separated by one
    blank line. Leading paragraphs without license text are dropped; then the
    shortest prefix matching ``expected`` wins, and without a match paragraphs
    are kept while they read as license text. Block headers are returned as is.
    """
    if not isinstance(style, LineStyle):
        return header
    parts: list[ExtractedHeader] = paragraphs(lines, header)
    if len(parts) < 2:
        return header

    licensed: list[bool] = [classifier.classify_header(p.content).has_license for p in parts]
    if not any(licensed):
        return header
    first: int = licensed.index(True)
    parts, licensed = parts[first:], licensed[first:]

    if expected is not None:
        for last in parts:
            candidate: ExtractedHeader = header_span(lines, parts[0].start_line, last.end_line)
            if not header_drifts(candidate, expected, style, threshold):
                return candidate

    end: ExtractedHeader = parts[0]
    for part, is_license in zip(parts[1:], licensed[1:]):
        if not is_license:
            break
        end = part
    return header_span(lines, parts[0].start_line, end.end_line)


def analyze_text(
    text: str,
    style: CommentStyle,
    classifier: LicenseClassifier,
    *,
    language_id: str = "",
    path: Path | None = None,
    expected: FormattedLicense | None = None,
    max_lines: int = DEFAULT_MAX_LINES,
    drift_threshold: int = DEFAULT_DRIFT_THRESHOLD,
) -> LicenseReport:
    """Extract, classify and compare the header of ``text``."""
    lines: list[str] = split_lines(text)
    header: ExtractedHeader | None = extract(lines, style)
    classification: Classification
    if header is not None:
        header = license_span(
            lines, header, style, classifier, expected=expected, threshold=drift_threshold
        )
        classification = classifier.classify_header(header.content)
    else:
        phrase: str | None = classifier.find_phrase(text, max_lines)
        classification = Classification(
            has_license=phrase is not None,
            matched_phrase=phrase,
            score=None if phrase is None else 0.0,
        )

    drift: bool | None = None
    if header is not None and classification.has_license and expected is not None:
        drift = header_drifts(header, expected, style, drift_threshold)

    return LicenseReport(
        path=path,
        language_id=language_id,
        style=style,
        header=header,
        classification=classification,
        expected=expected,
        drift=drift,
    )


def analyze_document(
    document: DocumentHost,
    settings: SettingsSource,
    *,
    license_name: str | None = None,
) -> LicenseReport:
    """Analyze ``document`` with the current settings.

    The expected header is included when it can be rendered; a missing or
    empty template leaves ``expected`` and ``drift`` unset.
    """
    language_id: str = document.current_language_id()
    style: CommentStyle = style_for(settings, language_id)
    expected: FormattedLicense | None
    try:
        expected = expected_license(settings, style, license_name)
    except (ConfigMissingError, RenderError) as e:
        logger.debug("No expected header: %s", e)
        expected = None
    return analyze_text(
        document.current_file_text(),
        style,
        classifier_for(settings),
        language_id=language_id,
        path=document.current_path(),
        expected=expected,
        max_lines=int(_setting(settings, ConfigKey.MAX_LINES, DEFAULT_MAX_LINES)),
        drift_threshold=int(
            _setting(settings, ConfigKey.DRIFT_THRESHOLD, DEFAULT_DRIFT_THRESHOLD)
        ),
    )


def insertion_point(lines: Sequence[str]) -> tuple[int, int]:
    """Where a new header goes: the first line after the shebang and encoding line, if any."""
    return (preamble_length(lines), 0)


def replacement_end(lines: Sequence[str], header: ExtractedHeader) -> int:
    """Last line to replace for ``header``: its end plus directly following blank lines."""
    end: int = header.end_line
    while end + 1 < len(lines) and not lines[end + 1].strip():
        end += 1
    return end
