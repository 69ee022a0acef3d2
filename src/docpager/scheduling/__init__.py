"""
Module: scheduling

Purpose:
    Run pagination passes in response to document changes without
    re-measuring on every keystroke and without overlapping passes.

Key Classes:
    - PageDistributor: Document-change hook and page publisher
    - PassGuard: Idle/running state machine
    - ManualTicker / ImmediateTicker / QtTicker: Deferred execution

Dependencies:
    - docpager.pagination
    - PySide6 (QtTicker only)

Used By:
    - docpager.session
"""

from .guard import GuardState, GuardStateError, PassGuard
from .ticks import ImmediateTicker, ManualTicker, QtTicker, Ticker
from .distributor import PageDistributor

__all__ = [
    "GuardState",
    "GuardStateError",
    "PassGuard",
    "Ticker",
    "ManualTicker",
    "ImmediateTicker",
    "QtTicker",
    "PageDistributor",
]
