# licenser:header:start
#
#   project      : Licenser
#   file         : scheduler.py
#   file_relpath : src/licenser/engine/scheduler.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Cancellable single-shot timers for debouncing.

The controller asks a `Scheduler` for a timer on every accepted save and
cancels the previous one, so only the last save of a burst is processed.
`ThreadingScheduler` is the default; hosts with an event loop can supply their
own implementation, and tests drive time by hand.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Protocol

from licenser.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from licenser.config.logging import LicenserLogger

logger: LicenserLogger = get_logger(__name__)


class TimerHandle(Protocol):
    """A pending single-shot callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Idempotent."""
        ...


class Scheduler(Protocol):
    """Source of cancellable timers."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay_s`` seconds."""
        ...


def monotonic_ms() -> float:
    """Default controller clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class ThreadingScheduler:
    """Scheduler backed by daemon `threading.Timer` objects."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_s, callback)
        timer.daemon = True
        timer.start()
        logger.trace("Timer scheduled in %.3fs", delay_s)
        return timer
