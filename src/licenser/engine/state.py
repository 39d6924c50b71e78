# licenser:header:start
#
#   project      : Licenser
#   file         : state.py
#   file_relpath : src/licenser/engine/state.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Controller phases, save outcomes and per-document correction state."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Final

from yachalk import chalk

from licenser.core.colored_enum import ColoredStrEnum

HISTORY_LIMIT: Final[int] = 64


class ControllerPhase(ColoredStrEnum):
    """Phase of the auto-save state machine for one document.

    ``IDLE → DEBOUNCING → CHECKING → {INSERTING | CORRECTING | NOOP} → IDLE``.
    """

    IDLE = ("idle", chalk.gray)
    DEBOUNCING = ("debouncing", chalk.blue)
    CHECKING = ("checking", chalk.blue)
    INSERTING = ("inserting", chalk.green)
    CORRECTING = ("correcting", chalk.yellow)
    NOOP = ("no-op", chalk.gray)


class SaveOutcome(ColoredStrEnum):
    """Result of one processing pass (automatic or user-invoked)."""

    INSERTED = ("license inserted", chalk.green)
    CORRECTED = ("license corrected", chalk.yellow)
    REMOVED = ("license removed", chalk.yellow)
    UNCHANGED = ("up to date", chalk.green)
    SUPPRESSED = ("drift left alone", chalk.yellow_bright)
    SKIPPED = ("skipped", chalk.gray)
    FAILED = ("failed", chalk.red_bright)


@dataclass
class CorrectionState:
    """Per-document state owned by the controller.

    Attributes:
        is_processing_save (bool): True while a save-triggered pass runs.
        is_auto_correcting (bool): True while a correction edits and saves.
        last_correction_timestamp (float | None): Clock time (ms) of the last
            successful correction; None if the document was never corrected.
        phase (ControllerPhase): Current state machine phase.
        last_outcome (SaveOutcome | None): Outcome of the most recent pass.
        corrections (int): Number of successful automatic corrections.
        history (deque[ControllerPhase]): Most recent phases entered, oldest first.
    """

    is_processing_save: bool = False
    is_auto_correcting: bool = False
    last_correction_timestamp: float | None = None
    phase: ControllerPhase = ControllerPhase.IDLE
    last_outcome: SaveOutcome | None = None
    corrections: int = 0
    history: deque[ControllerPhase] = field(
        default_factory=lambda: deque(maxlen=HISTORY_LIMIT)
    )

    @property
    def busy(self) -> bool:
        """True if either guard flag is set."""
        return self.is_processing_save or self.is_auto_correcting

    def enter(self, phase: ControllerPhase) -> None:
        """Move to ``phase`` and record it in `history`."""
        self.phase = phase
        self.history.append(phase)

    def reset_flags(self) -> None:
        """Clear both guard flags."""
        self.is_processing_save = False
        self.is_auto_correcting = False


class HeaderStatus(ColoredStrEnum):
    """License status of a document, as reported by `licenser check`."""

    OK = ("license ok", chalk.green)
    DRIFT = ("license drifts", chalk.yellow)
    MISSING = ("no license", chalk.red)
    UNVERIFIED = ("license not compared", chalk.gray)
