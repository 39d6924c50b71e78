# licenser:header:start
#
#   project      : Licenser
#   file         : controller.py
#   file_relpath : src/licenser/engine/controller.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Auto-save controller: insert or correct license headers when documents are saved.

Every document gets its own `CorrectionState` and moves through::

    IDLE → DEBOUNCING → CHECKING → {INSERTING | CORRECTING | NOOP} → IDLE

Entry (`AutoSaveController.on_save`):
    A save event is dropped when the controller is disabled, the document is
    already being processed (``is_processing_save`` / ``is_auto_correcting``),
    auto-save is off, or the file policy excludes the document. Otherwise the
    debounce timer of the document is (re)started; only the last save of a
    burst is processed.

Checking (`AutoSaveController.process_now`):
    - no license → INSERTING: the default license is inserted at the top
      (below a shebang and encoding line) and the document is saved;
    - license without drift → NOOP;
    - drift, auto-correct on and cooldown elapsed → CORRECTING: the header span
      and the blank lines after it are replaced and the document is saved;
    - drift otherwise → NOOP (suppressed); a second header is never inserted.

Failures:
    Host I/O failures are logged and swallowed, a missing template or default
    license is a logged NOOP. Both guard flags are reset in ``finally`` on every
    path, so a failure never leaves a document locked.

The save issued by the controller itself arrives while ``is_processing_save``
is still set (synchronous hosts) or after the header already matches
(asynchronous hosts); either way it cannot trigger another edit.
"""

from __future__ import annotations

import functools
import threading
from typing import TYPE_CHECKING, Any

from licenser.config.keys import ConfigKey
from licenser.config.logging import get_logger
from licenser.constants import DEFAULT_COOLDOWN_MS, DEFAULT_DEBOUNCE_MS
from licenser.engine.analysis import (
    analyze_document,
    expected_license,
    insertion_point,
    replacement_end,
)
from licenser.engine.scheduler import ThreadingScheduler, monotonic_ms
from licenser.engine.state import ControllerPhase, CorrectionState, SaveOutcome
from licenser.errors import ConfigMissingError, LicenserIOError, RenderError
from licenser.header.extractor import split_lines

if TYPE_CHECKING:
    from collections.abc import Callable

    from licenser.config.logging import LicenserLogger
    from licenser.config.policy import FilePolicy
    from licenser.engine.analysis import LicenseReport
    from licenser.engine.host import DocumentHost, SaveEvent, SettingsSource, Workspace
    from licenser.engine.scheduler import Scheduler, TimerHandle
    from licenser.header.extractor import ExtractedHeader
    from licenser.templates.model import FormattedLicense

logger: LicenserLogger = get_logger(__name__)


def ensure_ok(ok: bool, action: str) -> None:
    """Raise `LicenserIOError` when a host operation reports failure."""
    if not ok:
        raise LicenserIOError(f"Host rejected {action}")


class AutoSaveController:
    """Per-document state machine driven by save events.

    Args:
        workspace (Workspace): Resolves document ids to documents.
        settings (SettingsSource): Templates and configuration, read on every event.
        policy (FilePolicy | None): Exclusion rules; None processes every document.
        scheduler (Scheduler | None): Timer source; defaults to `ThreadingScheduler`.
        clock (Callable[[], float]): Current time in milliseconds.
    """

    def __init__(
        self,
        workspace: Workspace,
        settings: SettingsSource,
        *,
        policy: FilePolicy | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self.workspace: Workspace = workspace
        self.settings: SettingsSource = settings
        self.policy: FilePolicy | None = policy
        self.scheduler: Scheduler = scheduler or ThreadingScheduler()
        self.clock: Callable[[], float] = clock

        self._enabled: bool = True
        self._states: dict[str, CorrectionState] = {}
        self._timers: dict[str, TimerHandle] = {}
        self._generations: dict[str, int] = {}
        self._lock = threading.RLock()

    # ------------------------------ Lifecycle ------------------------------

    @property
    def enabled(self) -> bool:
        """False after `disable` until `enable` is called."""
        return self._enabled

    def enable(self) -> None:
        """Accept save events again."""
        self._enabled = True
        logger.info("Auto-save controller enabled")

    def disable(self) -> None:
        """Stop processing: cancel every pending timer and clear all guard flags."""
        with self._lock:
            self._enabled = False
            for document_id in list(self._timers):
                self._cancel_timer(document_id)
            for state in self._states.values():
                state.reset_flags()
                state.enter(ControllerPhase.IDLE)
        logger.info("Auto-save controller disabled")

    def close_document(self, document_id: str) -> None:
        """Forget a closed document, cancelling its pending timer."""
        with self._lock:
            self._cancel_timer(document_id)
            self._states.pop(document_id, None)
            self._generations.pop(document_id, None)
        logger.debug("Closed document %s", document_id)

    def state_for(self, document_id: str) -> CorrectionState:
        """Return the state of ``document_id``, creating it on first use."""
        with self._lock:
            state: CorrectionState | None = self._states.get(document_id)
            if state is None:
                state = CorrectionState()
                self._states[document_id] = state
            return state

    def pending(self, document_id: str) -> bool:
        """True if a debounce timer is waiting for ``document_id``."""
        return document_id in self._timers

    # ------------------------------ Settings ------------------------------

    def _config(self, key: str, default: Any) -> Any:
        value: Any = self.settings.get_config(key)
        return default if value is None else value

    def _auto_save(self) -> bool:
        return bool(self._config(ConfigKey.AUTO_SAVE, False))

    def _auto_correct(self) -> bool:
        return bool(self._config(ConfigKey.AUTO_CORRECT, False))

    # ------------------------------ Events ------------------------------

    def on_save(self, event: SaveEvent) -> bool:
        """Handle a save notification.

        Returns:
            bool: True if the event started (or restarted) the debounce timer.
        """
        state: CorrectionState = self.state_for(event.document_id)
        if not self._enabled:
            logger.trace("Dropped save of %s: controller disabled", event.document_id)
            return False
        if state.busy:
            logger.debug("Dropped save of %s: already processing", event.document_id)
            return False
        if not self._auto_save():
            logger.trace("Dropped save of %s: auto-save off", event.document_id)
            return False

        document: DocumentHost | None = self.workspace.get_document(event.document_id)
        if document is None:
            logger.debug("Dropped save of %s: unknown document", event.document_id)
            return False
        if self.policy is not None and self.policy.excludes(
            document.current_path(), document.current_language_id()
        ):
            logger.debug("Dropped save of %s: excluded by policy", event.document_id)
            return False

        debounce_s: float = float(self._config(ConfigKey.DEBOUNCE_MS, DEFAULT_DEBOUNCE_MS)) / 1000
        with self._lock:
            self._cancel_timer(event.document_id)
            generation: int = self._generations.get(event.document_id, 0) + 1
            self._generations[event.document_id] = generation
            state.enter(ControllerPhase.DEBOUNCING)
            self._timers[event.document_id] = self.scheduler.call_later(
                debounce_s,
                functools.partial(self._on_timer, event.document_id, generation),
            )
        logger.trace("Debouncing %s (%.3fs)", event.document_id, debounce_s)
        return True

    def _cancel_timer(self, document_id: str) -> None:
        timer: TimerHandle | None = self._timers.pop(document_id, None)
        if timer is not None:
            timer.cancel()

    def _on_timer(self, document_id: str, generation: int) -> None:
        with self._lock:
            if not self._enabled or self._generations.get(document_id) != generation:
                logger.trace("Stale timer for %s ignored", document_id)
                return
            self._timers.pop(document_id, None)
        self.process_now(document_id)

    # ------------------------------ Checking ------------------------------

    def process_now(self, document_id: str) -> SaveOutcome:
        """Run one CHECKING pass on ``document_id`` synchronously.

        Returns:
            SaveOutcome: What the pass did. ``SKIPPED`` if the document is busy,
                unknown, or no license could be rendered; ``FAILED`` on host I/O
                failure.
        """
        with self._lock:
            state: CorrectionState = self.state_for(document_id)
            if state.busy:
                logger.debug("Skipping %s: already processing", document_id)
                return SaveOutcome.SKIPPED
            state.is_processing_save = True

        outcome: SaveOutcome = SaveOutcome.FAILED
        try:
            state.enter(ControllerPhase.CHECKING)
            document: DocumentHost | None = self.workspace.get_document(document_id)
            if document is None:
                outcome = SaveOutcome.SKIPPED
                state.enter(ControllerPhase.NOOP)
            else:
                outcome = self._check(document_id, document, state)
        except (ConfigMissingError, RenderError) as e:
            logger.warning("No license applied to %s: %s", document_id, e)
            state.enter(ControllerPhase.NOOP)
            outcome = SaveOutcome.SKIPPED
        except (LicenserIOError, OSError) as e:
            logger.error("License update of %s failed: %s", document_id, e)
            outcome = SaveOutcome.FAILED
        finally:
            state.reset_flags()
            state.last_outcome = outcome
            state.enter(ControllerPhase.IDLE)
        logger.info("%s: %s", document_id, outcome.value)
        return outcome

    def _check(
        self,
        document_id: str,
        document: DocumentHost,
        state: CorrectionState,
    ) -> SaveOutcome:
        lines: list[str] = split_lines(document.current_file_text())
        report: LicenseReport = analyze_document(document, self.settings)

        if not report.has_license:
            state.enter(ControllerPhase.INSERTING)
            formatted: FormattedLicense = report.expected or expected_license(
                self.settings, report.style
            )
            line, col = insertion_point(lines)
            ensure_ok(document.insert_at(line, col, formatted), "insert")
            ensure_ok(document.save_document(), "save")
            return SaveOutcome.INSERTED

        if report.header is None:
            # license text outside a recognizable header comment
            state.enter(ControllerPhase.NOOP)
            return SaveOutcome.UNCHANGED

        header: ExtractedHeader = report.header
        expected: FormattedLicense = report.expected or expected_license(
            self.settings, report.style
        )
        if not report.drift:
            state.enter(ControllerPhase.NOOP)
            return SaveOutcome.UNCHANGED

        if not self._auto_correct():
            logger.debug("Header of %s drifts; auto-correct is off", document_id)
            state.enter(ControllerPhase.NOOP)
            return SaveOutcome.SUPPRESSED

        now: float = self.clock()
        cooldown: float = float(self._config(ConfigKey.COOLDOWN_MS, DEFAULT_COOLDOWN_MS))
        last: float | None = state.last_correction_timestamp
        if last is not None and now - last < cooldown:
            logger.debug(
                "Header of %s drifts; in cooldown (%.0f ms left)",
                document_id,
                cooldown - (now - last),
            )
            state.enter(ControllerPhase.NOOP)
            return SaveOutcome.SUPPRESSED

        state.enter(ControllerPhase.CORRECTING)
        state.is_auto_correcting = True
        end_line: int = replacement_end(lines, header)
        ensure_ok(document.replace_span(header.start_line, end_line, expected), "replace")
        ensure_ok(document.save_document(), "save")
        state.last_correction_timestamp = now
        state.corrections += 1
        return SaveOutcome.CORRECTED
