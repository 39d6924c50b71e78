# licenser:header:start
#
#   project      : Licenser
#   file         : test_service.py
#   file_relpath : tests/engine/test_service.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""User-invoked license operations."""

from __future__ import annotations

import pytest

from licenser.comments.styles import BlockStyle, LineStyle
from licenser.engine.analysis import expected_license
from licenser.engine.service import LicenseService
from licenser.engine.state import HeaderStatus, SaveOutcome
from licenser.errors import ConfigMissingError, LicenserIOError
from licenser.templates.store import TemplateStore
from tests.conftest import parametrize
from tests.fakes import FakeDocument, make_settings

POUND = LineStyle(prefix="# ")
BODY = "import os\n"


@pytest.fixture
def service() -> LicenseService:
    settings = make_settings(templates={"acme": "Copyright {{year}} {{name}}"})
    return LicenseService(settings, settings.store)


def test_check_missing(service: LicenseService) -> None:
    report = service.check(FakeDocument(BODY))
    assert report.status is HeaderStatus.MISSING
    assert report.header is None
    assert report.expected == expected_license(service.settings, POUND)


def test_check_ok_and_drift(service: LicenseService) -> None:
    expected = expected_license(service.settings, POUND)
    assert service.check(FakeDocument(expected + BODY)).status is HeaderStatus.OK

    drifted = FakeDocument(expected.replace("Ada Lovelace", "Someone Else") + BODY)
    report = service.check(drifted)
    assert report.status is HeaderStatus.DRIFT
    assert report.has_license_header


def test_check_against_other_license(service: LicenseService) -> None:
    mit = expected_license(service.settings, POUND)
    assert service.check(FakeDocument(mit + BODY), "apache").status is HeaderStatus.DRIFT


def test_check_unknown_template_is_unverified(service: LicenseService) -> None:
    report = service.check(FakeDocument("# Copyright 2001 Bob\n" + BODY), "ghost")
    assert report.expected is None
    assert report.status is HeaderStatus.UNVERIFIED


def test_add_license(service: LicenseService) -> None:
    doc = FakeDocument(BODY)
    assert service.add_license(doc) is SaveOutcome.INSERTED
    assert doc.text == expected_license(service.settings, POUND) + BODY
    assert doc.saves == 1


def test_add_license_skips_licensed_documents(service: LicenseService) -> None:
    doc = FakeDocument("# Copyright 2001 Bob\n" + BODY)
    assert service.add_license(doc) is SaveOutcome.SKIPPED
    assert doc.saves == 0


def test_add_license_force(service: LicenseService) -> None:
    doc = FakeDocument("# Copyright 2001 Bob\n" + BODY)
    assert service.add_license(doc, "acme", force=True) is SaveOutcome.INSERTED
    assert doc.text == "# Copyright 2024 Ada Lovelace\n\n# Copyright 2001 Bob\n" + BODY


def test_add_license_block_style(service: LicenseService) -> None:
    doc = FakeDocument("int main(void) { return 0; }\n", language_id="c")
    service.add_license(doc, "acme")
    assert doc.text.startswith("/* Copyright 2024 Ada Lovelace */\n\n")
    assert service.check(doc, "acme").status is HeaderStatus.OK


def test_add_license_unknown_template(service: LicenseService) -> None:
    with pytest.raises(ConfigMissingError):
        service.add_license(FakeDocument(BODY), "ghost")


def test_add_license_surfaces_host_failures(service: LicenseService) -> None:
    doc = FakeDocument(BODY)
    doc.fail_insert = True
    with pytest.raises(LicenserIOError):
        service.add_license(doc)


def test_correct_license(service: LicenseService) -> None:
    expected = expected_license(service.settings, POUND)
    doc = FakeDocument(expected.replace("2024", "2010") + BODY)
    assert service.correct_license(doc) is SaveOutcome.CORRECTED
    assert doc.text == expected + BODY
    assert service.correct_license(doc) is SaveOutcome.UNCHANGED


def test_correct_license_inserts_when_missing(service: LicenseService) -> None:
    doc = FakeDocument(BODY)
    assert service.correct_license(doc) is SaveOutcome.INSERTED


@parametrize("drift", [False, True])
def test_correct_license_unknown_template(service: LicenseService, drift: bool) -> None:
    expected = expected_license(service.settings, POUND)
    doc = FakeDocument((expected.replace("2024", "2010") if drift else expected) + BODY)
    with pytest.raises(ConfigMissingError):
        service.correct_license(doc, "ghost")
    assert doc.edits == []


def test_correct_license_without_default_license() -> None:
    settings = make_settings()
    doc = FakeDocument(expected_license(settings, POUND) + BODY)
    service = LicenseService(make_settings(default_license=None))
    with pytest.raises(ConfigMissingError):
        service.correct_license(doc)
    assert doc.edits == []


def test_correct_license_keeps_comment_after_header(service: LicenseService) -> None:
    expected = expected_license(service.settings, POUND)
    note = "# helpers for the build scripts\n"
    doc = FakeDocument(expected.replace("2024", "2010") + note + BODY)
    assert service.correct_license(doc) is SaveOutcome.CORRECTED
    assert doc.text == expected + note + BODY
    assert service.correct_license(doc) is SaveOutcome.UNCHANGED


def test_correct_license_leaves_license_outside_header(service: LicenseService) -> None:
    doc = FakeDocument('LICENSE = "MIT"\n')
    assert service.correct_license(doc) is SaveOutcome.SKIPPED
    assert doc.edits == []


def test_remove_license(service: LicenseService) -> None:
    doc = FakeDocument(expected_license(service.settings, POUND) + BODY)
    assert service.remove_license(doc) is SaveOutcome.REMOVED
    assert doc.text == BODY
    assert service.remove_license(doc) is SaveOutcome.SKIPPED


def test_remove_keeps_non_license_comments(service: LicenseService) -> None:
    doc = FakeDocument("# parse the input\n" + BODY)
    assert service.remove_license(doc) is SaveOutcome.SKIPPED
    assert doc.text == "# parse the input\n" + BODY


def test_remove_block_header_after_shebang() -> None:
    settings = make_settings()
    service = LicenseService(settings)
    expected = expected_license(settings, BlockStyle(start="/*", end="*/"))
    doc = FakeDocument("#!/usr/bin/env node\n" + expected + "run();\n", language_id="javascript")
    assert service.remove_license(doc) is SaveOutcome.REMOVED
    assert doc.text == "#!/usr/bin/env node\nrun();\n"


def test_available_licenses(service: LicenseService) -> None:
    assert service.available_licenses()[-1] == "acme"
    assert "mit" in service.available_licenses()
    assert LicenseService(make_settings()).available_licenses() == []
    assert LicenseService(make_settings(), TemplateStore()).available_licenses()[0] == "apache"
