# licenser:header:start
#
#   project      : Licenser
#   file         : service.py
#   file_relpath : src/licenser/engine/service.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""User-invoked license operations on a single document.

Unlike the auto-save controller, these operations surface failures: a host
that rejects an edit or a save raises `LicenserIOError`, and a missing template
raises `ConfigMissingError`. They share analysis and rendering with the
controller, so "add license now" produces exactly the header auto-save would.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licenser.config.logging import get_logger
from licenser.engine.analysis import (
    analyze_document,
    expected_license,
    insertion_point,
    replacement_end,
)
from licenser.engine.controller import ensure_ok
from licenser.engine.state import SaveOutcome
from licenser.header.extractor import split_lines

if TYPE_CHECKING:
    from licenser.config.logging import LicenserLogger
    from licenser.engine.analysis import LicenseReport
    from licenser.engine.host import DocumentHost, SettingsSource
    from licenser.templates.model import FormattedLicense
    from licenser.templates.store import TemplateStore

logger: LicenserLogger = get_logger(__name__)


class LicenseService:
    """Add, correct, remove and check license headers on demand.

    Args:
        settings (SettingsSource): Templates and configuration.
        store (TemplateStore | None): Used by `available_licenses`.
    """

    def __init__(self, settings: SettingsSource, store: TemplateStore | None = None) -> None:
        self.settings: SettingsSource = settings
        self.store: TemplateStore | None = store

    def check(self, document: DocumentHost, license_name: str | None = None) -> LicenseReport:
        """Analyze ``document`` against ``license_name`` (default license if None)."""
        return analyze_document(document, self.settings, license_name=license_name)

    def add_license(
        self,
        document: DocumentHost,
        license_name: str | None = None,
        *,
        force: bool = False,
    ) -> SaveOutcome:
        """Insert a license header.

        Args:
            document (DocumentHost): Target document.
            license_name (str | None): Template to use; the default license if None.
            force (bool): Insert even if the document already has a license.

        Returns:
            SaveOutcome: ``INSERTED``, or ``SKIPPED`` if a license is present.

        Raises:
            ConfigMissingError: No license name or no template.
            RenderError: The template is empty.
            LicenserIOError: The host rejected the edit or the save.
        """
        report: LicenseReport = self.check(document, license_name)
        if report.has_license and not force:
            logger.info("%s already has a license", report.path or "document")
            return SaveOutcome.SKIPPED

        formatted: FormattedLicense = expected_license(self.settings, report.style, license_name)
        line, col = insertion_point(split_lines(document.current_file_text()))
        ensure_ok(document.insert_at(line, col, formatted), "insert")
        ensure_ok(document.save_document(), "save")
        logger.info("Inserted license into %s", report.path or "document")
        return SaveOutcome.INSERTED

    def correct_license(
        self,
        document: DocumentHost,
        license_name: str | None = None,
    ) -> SaveOutcome:
        """Replace a drifting license header; insert one if there is none.

        Returns:
            SaveOutcome: ``CORRECTED``, ``INSERTED``, ``UNCHANGED`` (no drift) or
                ``SKIPPED`` (license text outside a header comment).

        Raises:
            ConfigMissingError: No license name or no template.
            RenderError: The template is empty.
            LicenserIOError: The host rejected the edit or the save.
        """
        report: LicenseReport = self.check(document, license_name)
        if not report.has_license:
            return self.add_license(document, license_name)
        expected: FormattedLicense = report.expected or expected_license(
            self.settings, report.style, license_name
        )
        if report.header is None:
            return SaveOutcome.SKIPPED
        if not report.drift:
            return SaveOutcome.UNCHANGED

        lines: list[str] = split_lines(document.current_file_text())
        end_line: int = replacement_end(lines, report.header)
        ensure_ok(document.replace_span(report.header.start_line, end_line, expected), "replace")
        ensure_ok(document.save_document(), "save")
        logger.info("Corrected license of %s", report.path or "document")
        return SaveOutcome.CORRECTED

    def remove_license(self, document: DocumentHost) -> SaveOutcome:
        """Remove the license header and the blank lines that follow it.

        Returns:
            SaveOutcome: ``REMOVED``, or ``SKIPPED`` if there is no license header.
        """
        report: LicenseReport = self.check(document)
        if not report.has_license_header or report.header is None:
            return SaveOutcome.SKIPPED

        lines: list[str] = split_lines(document.current_file_text())
        end_line: int = replacement_end(lines, report.header)
        ensure_ok(document.replace_span(report.header.start_line, end_line, ""), "replace")
        ensure_ok(document.save_document(), "save")
        logger.info("Removed license from %s", report.path or "document")
        return SaveOutcome.REMOVED

    def available_licenses(self) -> list[str]:
        """Names of all templates: built-ins first, then custom ones."""
        if self.store is None:
            return []
        return self.store.available_licenses()
