"""
Module: scheduling.ticks

Purpose:
    Injectable "run on next cooperative tick" schedulers.
    A ticker accepts a single-shot callback and runs it later on the
    same thread. There is no cancellation: once handed over, a callback
    always runs.

Key Classes:
    - Ticker: Interface - call_soon(callback)
    - ManualTicker: Callbacks run when the host calls run_pending()
    - ImmediateTicker: Callbacks run synchronously
    - QtTicker: Callbacks run on the next Qt event loop turn

Dependencies:
    - PySide6: QTimer for the Qt event loop (QtTicker only)

Used By:
    - scheduling.distributor
    - session.EditingSession
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Protocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Ticker(Protocol):
    def call_soon(self, callback: Callback) -> None:
        ...


class ManualTicker:
    """
    Ticker driven explicitly by its host.

    Callbacks scheduled while run_pending() is draining wait for the next
    call, the way a callback requested during a frame runs on the
    following frame.

    Example:
        >>> ticker = ManualTicker()
        >>> ticker.call_soon(lambda: print("tick"))
        >>> ticker.pending
        1
        >>> ticker.run_pending()
        tick
        1
    """

    def __init__(self) -> None:
        self._queue: Deque[Callback] = deque()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_soon(self, callback: Callback) -> None:
        self._queue.append(callback)

    def run_pending(self) -> int:
        """Run the callbacks queued before this call. Returns how many ran."""
        batch = len(self._queue)
        for _ in range(batch):
            callback = self._queue.popleft()
            callback()
        return batch

    def run_until_idle(self, max_ticks: int = 100) -> int:
        """
        Keep ticking until nothing is pending.

        Raises:
            RuntimeError: If callbacks keep rescheduling past max_ticks
        """
        total = 0
        for _ in range(max_ticks):
            if not self._queue:
                return total
            total += self.run_pending()
        if self._queue:
            raise RuntimeError(f"Ticker still busy after {max_ticks} ticks")
        return total


class ImmediateTicker:
    """Runs callbacks synchronously. For batch use with no event loop."""

    def call_soon(self, callback: Callback) -> None:
        callback()


class QtTicker:
    """
    Defers callbacks to the next turn of the running Qt event loop.

    Requires a QCoreApplication (or QApplication) instance.
    """

    def call_soon(self, callback: Callback) -> None:
        from PySide6.QtCore import QTimer

        QTimer.singleShot(0, callback)
