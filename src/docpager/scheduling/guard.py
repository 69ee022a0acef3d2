"""
Module: scheduling.guard

Purpose:
    Idle/running state machine that keeps at most one pagination pass
    in flight. Owned by a session-scoped distributor, never global.

Key Classes:
    - GuardState: IDLE or RUNNING
    - PassGuard: try_begin_pass() / end_pass() bracketing
    - GuardStateError: Raised on end_pass() without a running pass

Dependencies:
    - enum (std)

Used By:
    - scheduling.distributor
"""

from __future__ import annotations

from enum import Enum


class GuardStateError(Exception):
    """Pass bracketing was violated."""
    pass


class GuardState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"

    def __str__(self) -> str:
        return self.value


class PassGuard:
    """
    Single-outstanding-pass flag.

    A flag, not a queue: a begin request while running is refused, not
    remembered.

    Example:
        >>> guard = PassGuard()
        >>> guard.try_begin_pass()
        True
        >>> guard.try_begin_pass()
        False
        >>> guard.end_pass()
        >>> guard.state
        <GuardState.IDLE: 'idle'>
    """

    def __init__(self) -> None:
        self._state = GuardState.IDLE

    @property
    def state(self) -> GuardState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is GuardState.RUNNING

    def try_begin_pass(self) -> bool:
        """Move idle -> running. Returns False if a pass is already running."""
        if self._state is GuardState.RUNNING:
            return False
        self._state = GuardState.RUNNING
        return True

    def end_pass(self) -> None:
        """
        Move running -> idle.

        Raises:
            GuardStateError: If no pass is running
        """
        if self._state is not GuardState.RUNNING:
            raise GuardStateError("end_pass() called while idle")
        self._state = GuardState.IDLE

    def __repr__(self) -> str:
        return f"PassGuard(state={self._state})"
