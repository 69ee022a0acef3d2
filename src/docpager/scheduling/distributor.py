"""
Module: scheduling.distributor

Purpose:
    Decide when to re-run pagination after document changes.
    Bursts of edits collapse into one deferred pass over the latest
    snapshot; at most one pass is in flight at a time.

Key Classes:
    - PageDistributor: Document-change hook and page publisher

State machine:
    idle    --change--> running (pass handed to the ticker)
    running --change--> running (snapshot stored, no extra pass queued)
    running --pass ends--> idle (pages swapped on success)

    With rerun_on_stale=True a pass that finishes behind the latest
    revision requests one follow-up pass.

Dependencies:
    - pagination: paginate, Measurer, PaginationConfig
    - scheduling.guard: PassGuard
    - scheduling.ticks: Ticker

Used By:
    - session.EditingSession
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from docpager.core.models import Document
from docpager.pagination import (
    MeasurementError,
    Measurer,
    Page,
    PaginationConfig,
    PaginationResult,
    paginate,
)

from .guard import PassGuard
from .ticks import Ticker

logger = logging.getLogger(__name__)

PagesListener = Callable[[PaginationResult], None]


class PageDistributor:
    """
    Coalescing scheduler for pagination passes.

    Attributes:
        rerun_on_stale: Request a follow-up pass when edits landed while
            a pass was running

    Example:
        >>> ticker = ManualTicker()
        >>> distributor = PageDistributor(TextLayoutMeasurer(), ticker)
        >>> distributor.on_document_change(doc)
        >>> distributor.on_document_change(doc2)   # coalesced
        >>> ticker.run_pending()
        1
        >>> distributor.document is doc2
        True
    """

    def __init__(
        self,
        measurer: Measurer,
        ticker: Ticker,
        config: Optional[PaginationConfig] = None,
        *,
        rerun_on_stale: bool = True,
        document: Optional[Document] = None,
    ) -> None:
        self._measurer = measurer
        self._ticker = ticker
        self._config = config or PaginationConfig()
        self.rerun_on_stale = rerun_on_stale

        self._guard = PassGuard()
        self._document = document if document is not None else Document.initial()
        self._revision = 0
        self._paginated_revision: Optional[int] = None
        self._result = PaginationResult.placeholder()
        self._last_error: Optional[MeasurementError] = None
        self._pass_count = 0
        self._listeners: List[PagesListener] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def document(self) -> Document:
        """Latest snapshot, updated synchronously on every change."""
        return self._document

    @property
    def result(self) -> PaginationResult:
        """Last successfully published pagination result."""
        return self._result

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._result.pages

    @property
    def guard(self) -> PassGuard:
        return self._guard

    @property
    def is_running(self) -> bool:
        return self._guard.is_running

    @property
    def revision(self) -> int:
        """Number of document changes received."""
        return self._revision

    @property
    def is_stale(self) -> bool:
        """True when the published pages do not reflect the latest document."""
        return self._paginated_revision != self._revision

    @property
    def last_error(self) -> Optional[MeasurementError]:
        """Error from the most recent pass, or None if it succeeded."""
        return self._last_error

    @property
    def pass_count(self) -> int:
        """Number of passes that have run (successful or not)."""
        return self._pass_count

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_document_change(self, document: Document) -> None:
        """Store the new snapshot and request a pass."""
        self._document = document
        self._revision += 1
        self.request_pass()

    def request_pass(self) -> bool:
        """
        Schedule a pass on the next tick unless one is already in flight.

        Returns:
            True if a pass was scheduled, False if the request was coalesced
        """
        if not self._guard.try_begin_pass():
            logger.debug(f"Pass already running, coalescing revision {self._revision}")
            return False
        self._ticker.call_soon(self._run_pass)
        return True

    def subscribe(self, listener: PagesListener) -> Callable[[], None]:
        """
        Register a callback for newly published results.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Pass execution
    # ------------------------------------------------------------------

    def _run_pass(self) -> None:
        snapshot = self._document
        revision = self._revision
        self._pass_count += 1
        start_time = time.perf_counter()

        try:
            result = paginate(snapshot, self._measurer, self._config)
        except MeasurementError as e:
            self._last_error = e
            logger.error(f"Pagination pass for revision {revision} failed: {e}")
            logger.warning(f"Keeping {self._result.page_count} previously published pages")
            return
        finally:
            self._guard.end_pass()

        elapsed = time.perf_counter() - start_time
        logger.debug(
            f"Pass for revision {revision}: {result.page_count} pages in {elapsed * 1000:.1f}ms"
        )

        self._last_error = None
        self._result = result
        self._paginated_revision = revision
        try:
            for listener in list(self._listeners):
                listener(result)
        finally:
            # Listener errors propagate, but the follow-up pass is still requested
            self._follow_up(revision)

    def _follow_up(self, revision: int) -> None:
        if self._revision == revision:
            return
        if self.rerun_on_stale:
            logger.debug(
                f"Document moved to revision {self._revision} during pass, re-running"
            )
            self.request_pass()
        else:
            logger.debug(
                f"Document moved to revision {self._revision} during pass; "
                "pages stay stale until the next change"
            )
