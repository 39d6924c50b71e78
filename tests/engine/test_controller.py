# licenser:header:start
#
#   project      : Licenser
#   file         : test_controller.py
#   file_relpath : tests/engine/test_controller.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Auto-save controller: debouncing, insertion, correction, cooldown and guards."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from licenser.comments.styles import BlockStyle, LineStyle
from licenser.config.policy import FilePolicy
from licenser.engine.analysis import expected_license
from licenser.engine.controller import AutoSaveController
from licenser.engine.state import ControllerPhase, SaveOutcome
from licenser.errors import LicenserIOError
from tests.conftest import make_config
from tests.fakes import (
    FakeClock,
    FakeDocument,
    FakeWorkspace,
    ManualScheduler,
    make_settings,
    save,
)

DOC_ID = "file:///project/src/module.py"
BODY = "import os\n\nprint(os.getcwd())\n"


class Harness:
    """A controller wired to fakes, with one open document."""

    def __init__(self, text: str, *, language_id: str = "python", **settings: Any) -> None:
        self.document = FakeDocument(text, language_id=language_id)
        self.workspace = FakeWorkspace({DOC_ID: self.document})
        self.settings = make_settings(**settings)
        self.scheduler = ManualScheduler()
        self.clock = FakeClock()
        self.controller = AutoSaveController(
            self.workspace,
            self.settings,
            policy=FilePolicy.from_config(make_config(), root=Path("/project")),
            scheduler=self.scheduler,
            clock=self.clock,
        )

    def expected(self, style: LineStyle | BlockStyle = LineStyle(prefix="# ")) -> str:
        return expected_license(self.settings, style)

    def save_and_settle(self) -> SaveOutcome | None:
        """Deliver one save and fire the debounce timer."""
        save(self.controller, DOC_ID)
        self.scheduler.fire_all()
        return self.controller.state_for(DOC_ID).last_outcome


def _drifted(expected: str) -> str:
    return expected.replace("2024", "2019")


# ------------------------------ Insertion ------------------------------


def test_missing_license_is_inserted_after_debounce() -> None:
    h = Harness(BODY)

    assert save(h.controller, DOC_ID)
    assert h.controller.pending(DOC_ID)
    assert h.scheduler.active[0].delay_s == 0.5
    assert h.document.saves == 0

    assert h.scheduler.fire_all() == 1
    state = h.controller.state_for(DOC_ID)
    assert h.document.text == h.expected() + BODY
    assert h.document.saves == 1
    assert state.last_outcome is SaveOutcome.INSERTED
    assert state.phase is ControllerPhase.IDLE
    assert not state.busy
    assert list(state.history) == [
        ControllerPhase.DEBOUNCING,
        ControllerPhase.CHECKING,
        ControllerPhase.INSERTING,
        ControllerPhase.IDLE,
    ]
    assert not h.controller.pending(DOC_ID)


def test_insertion_goes_after_shebang() -> None:
    h = Harness("#!/usr/bin/env python\nprint(1)\n")
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.text == "#!/usr/bin/env python\n" + h.expected() + "print(1)\n"
    assert h.document.edits == [("insert", (1, 0))]


def test_inserted_block_header_is_stable() -> None:
    h = Harness("export const x = 1;\n", language_id="typescript")
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.text.startswith("/* SPDX-License-Identifier: MIT\n")

    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.saves == 1


def test_non_license_comment_gets_a_license_above_it() -> None:
    h = Harness("# parse the input\nimport sys\n")
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.text == h.expected() + "# parse the input\nimport sys\n"

    # the license and the comment now form one comment run
    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.text == h.expected() + "# parse the input\nimport sys\n"
    assert h.document.saves == 1


def test_comment_after_inserted_header_survives_repeated_saves() -> None:
    body = "# just a note about this module\nimport os\n"
    h = Harness(body)
    assert h.save_and_settle() is SaveOutcome.INSERTED
    for _ in range(3):
        assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.text == h.expected() + body
    assert h.document.edits == [("insert", (0, 0))]


def test_drift_correction_keeps_following_comment() -> None:
    body = "# just a note about this module\nimport os\n"
    h = Harness("")
    h.document.text = _drifted(h.expected()) + body
    assert h.save_and_settle() is SaveOutcome.CORRECTED
    assert h.document.text == h.expected() + body
    assert h.save_and_settle() is SaveOutcome.UNCHANGED


def test_line_style_insertion_is_stable_across_saves() -> None:
    h = Harness(BODY)
    assert h.save_and_settle() is SaveOutcome.INSERTED
    for _ in range(3):
        assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.text == h.expected() + BODY
    assert h.document.saves == 1


def test_empty_document_gets_header_and_one_blank_line() -> None:
    h = Harness("")
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.text == h.expected()
    assert h.document.text.startswith("# ")
    assert h.document.text.endswith("\n\n")
    assert not h.document.text.endswith("\n\n\n")
    assert h.save_and_settle() is SaveOutcome.UNCHANGED


def test_insertion_keeps_encoding_line_below_shebang() -> None:
    preamble = "#!/usr/bin/env python\n# -*- coding: latin-1 -*-\n"
    h = Harness(preamble + "import os\n")
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.edits == [("insert", (2, 0))]
    assert h.document.text == preamble + h.expected() + "import os\n"
    assert h.document.text.split("\n")[1] == "# -*- coding: latin-1 -*-"

    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.saves == 1


def test_comment_below_code_is_not_treated_as_header() -> None:
    text = "import os\n\nx = 1  \n# see LICENSE file for details\ny = 2\n"
    h = Harness(text)
    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.edits == []
    assert h.document.text == text


def test_license_text_outside_a_header_is_left_alone() -> None:
    h = Harness('NOTICE = "Copyright 2001 ACME"\n')
    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.edits == []


# ------------------------------ Drift ------------------------------


def test_up_to_date_header_is_unchanged() -> None:
    h = Harness("")
    h.document.text = h.expected() + BODY
    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.saves == 0
    assert h.controller.state_for(DOC_ID).phase is ControllerPhase.IDLE


def test_drifting_header_is_corrected() -> None:
    h = Harness("")
    h.document.text = _drifted(h.expected()) + BODY

    assert h.save_and_settle() is SaveOutcome.CORRECTED
    state = h.controller.state_for(DOC_ID)
    assert h.document.text == h.expected() + BODY
    assert h.document.saves == 1
    assert state.corrections == 1
    assert state.last_correction_timestamp == h.clock.now
    assert ControllerPhase.CORRECTING in state.history
    assert not state.busy


def test_correction_keeps_shebang() -> None:
    h = Harness("")
    h.document.text = "#!/bin/sh\n" + _drifted(h.expected()) + "echo hi\n"
    assert h.save_and_settle() is SaveOutcome.CORRECTED
    assert h.document.text == "#!/bin/sh\n" + h.expected() + "echo hi\n"


def test_drift_is_left_alone_when_auto_correct_is_off() -> None:
    h = Harness("", auto_correct=False)
    drifted = _drifted(h.expected()) + BODY
    h.document.text = drifted

    assert h.save_and_settle() is SaveOutcome.SUPPRESSED
    assert h.document.text == drifted
    assert h.document.edits == []


def test_cooldown_suppresses_back_to_back_corrections() -> None:
    h = Harness("", cooldown_ms=5000)
    h.document.text = _drifted(h.expected()) + BODY
    assert h.save_and_settle() is SaveOutcome.CORRECTED
    corrected_at = h.clock.now

    # the user edits the header again right away
    h.clock.advance(1000)
    h.document.text = _drifted(h.expected()) + BODY
    assert h.save_and_settle() is SaveOutcome.SUPPRESSED
    assert h.controller.state_for(DOC_ID).last_correction_timestamp == corrected_at

    h.clock.advance(4000)
    assert h.save_and_settle() is SaveOutcome.CORRECTED
    state = h.controller.state_for(DOC_ID)
    assert state.corrections == 2
    assert state.last_correction_timestamp == h.clock.now


def test_zero_cooldown_allows_immediate_correction() -> None:
    h = Harness("", cooldown_ms=0)
    h.document.text = _drifted(h.expected()) + BODY
    assert h.save_and_settle() is SaveOutcome.CORRECTED
    h.document.text = _drifted(h.expected()) + BODY
    assert h.save_and_settle() is SaveOutcome.CORRECTED


# ------------------------------ Guards ------------------------------


def test_own_save_does_not_retrigger() -> None:
    h = Harness(BODY)
    accepted: list[bool] = []
    h.document.on_saved = lambda: accepted.append(save(h.controller, DOC_ID))

    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert accepted == [False]
    assert h.scheduler.active == []

    # an asynchronous host delivers the save afterwards: nothing left to do
    h.document.on_saved = None
    assert h.save_and_settle() is SaveOutcome.UNCHANGED
    assert h.document.saves == 1


def test_process_now_skips_busy_document() -> None:
    h = Harness(BODY)
    h.controller.state_for(DOC_ID).is_auto_correcting = True
    assert not save(h.controller, DOC_ID)
    assert h.controller.process_now(DOC_ID) is SaveOutcome.SKIPPED
    assert h.document.edits == []


def test_burst_of_saves_is_processed_once() -> None:
    h = Harness(BODY)
    for _ in range(3):
        assert save(h.controller, DOC_ID)
    assert len(h.scheduler.timers) == 3
    assert len(h.scheduler.active) == 1

    h.scheduler.fire_all()
    assert h.document.saves == 1


def test_stale_timer_is_ignored() -> None:
    h = Harness(BODY)
    save(h.controller, DOC_ID)
    save(h.controller, DOC_ID)
    h.scheduler.fire_stale()
    assert h.document.saves == 1
    assert h.document.text == h.expected() + BODY


def test_disable_cancels_pending_timers() -> None:
    h = Harness(BODY)
    save(h.controller, DOC_ID)
    h.controller.disable()

    assert not h.controller.enabled
    assert not h.controller.pending(DOC_ID)
    assert all(t.cancelled for t in h.scheduler.timers)
    h.scheduler.fire_stale()
    assert h.document.text == BODY
    assert not save(h.controller, DOC_ID)

    h.controller.enable()
    assert save(h.controller, DOC_ID)


def test_close_document_cancels_timer() -> None:
    h = Harness(BODY)
    save(h.controller, DOC_ID)
    h.controller.close_document(DOC_ID)
    assert not h.controller.pending(DOC_ID)
    h.scheduler.fire_stale()
    assert h.document.saves == 0


def test_events_dropped_when_auto_save_is_off() -> None:
    h = Harness(BODY, auto_save=False)
    assert not save(h.controller, DOC_ID)
    assert h.scheduler.timers == []


def test_events_for_unknown_documents_are_dropped() -> None:
    h = Harness(BODY)
    assert not save(h.controller, "file:///elsewhere.py")


def test_excluded_language_is_dropped() -> None:
    h = Harness('{"a": 1}\n', language_id="json")
    assert not save(h.controller, DOC_ID)


def test_settings_are_read_on_every_event() -> None:
    h = Harness(BODY, auto_save=False)
    assert not save(h.controller, DOC_ID)
    h.settings.update(make_config(auto_save=True, debounce_ms=50))
    assert save(h.controller, DOC_ID)
    assert h.scheduler.active[0].delay_s == 0.05


# ------------------------------ Failures ------------------------------


def test_rejected_save_resets_flags() -> None:
    h = Harness(BODY)
    h.document.fail_save = True
    assert h.save_and_settle() is SaveOutcome.FAILED

    state = h.controller.state_for(DOC_ID)
    assert not state.busy
    assert state.phase is ControllerPhase.IDLE
    assert save(h.controller, DOC_ID)


def test_host_exceptions_are_contained() -> None:
    h = Harness(BODY)
    h.document.raise_on_save = OSError("disk full")
    assert h.save_and_settle() is SaveOutcome.FAILED

    h.document.text = BODY
    h.document.raise_on_save = LicenserIOError("read-only")
    assert h.save_and_settle() is SaveOutcome.FAILED
    assert not h.controller.state_for(DOC_ID).busy


def test_failed_correction_keeps_cooldown_clear() -> None:
    h = Harness("")
    h.document.text = _drifted(h.expected()) + BODY
    h.document.fail_replace = True

    assert h.save_and_settle() is SaveOutcome.FAILED
    state = h.controller.state_for(DOC_ID)
    assert state.last_correction_timestamp is None
    assert state.corrections == 0
    assert not state.is_auto_correcting

    h.document.fail_replace = False
    assert h.save_and_settle() is SaveOutcome.CORRECTED


def test_missing_template_is_a_noop() -> None:
    h = Harness(BODY, default_license="no-such-license")
    assert h.save_and_settle() is SaveOutcome.SKIPPED
    assert h.document.edits == []
    assert ControllerPhase.NOOP in h.controller.state_for(DOC_ID).history


def test_missing_default_license_is_a_noop() -> None:
    h = Harness(BODY, default_license=None)
    assert h.save_and_settle() is SaveOutcome.SKIPPED
    assert h.document.text == BODY


def test_custom_template_is_used() -> None:
    h = Harness(BODY, default_license="acme", templates={"acme": "(c) {{year}} ACME"})
    assert h.save_and_settle() is SaveOutcome.INSERTED
    assert h.document.text == "# (c) 2024 ACME\n\n" + BODY
