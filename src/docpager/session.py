"""
Module: session

Purpose:
    Session-scoped context tying the editing surface to pagination.
    Owns the current document, the selection and the distributor (with
    its pass guard), so nothing about pagination state is global.

Key Classes:
    - EditingSession: Document + selection + page distributor

Dependencies:
    - docpager.scheduling: PageDistributor, Ticker
    - docpager.editing: Toolbar commands

Used By:
    - Host applications embedding the editor
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from docpager.core.models import Document
from docpager.editing import (
    Selection,
    is_block_active,
    is_format_active,
    toggle_block,
    toggle_format,
)
from docpager.pagination import Measurer, Page, PaginationConfig, TextLayoutMeasurer
from docpager.scheduling import PageDistributor, Ticker


class EditingSession:
    """
    One editing session.

    Starts with a single empty paragraph. Every edit replaces the whole
    document and notifies the distributor.

    Example:
        >>> ticker = ManualTicker()
        >>> session = EditingSession(ticker)
        >>> session.start()
        >>> ticker.run_pending()
        1
        >>> len(session.pages)
        1
    """

    def __init__(
        self,
        ticker: Ticker,
        measurer: Optional[Measurer] = None,
        config: Optional[PaginationConfig] = None,
        *,
        rerun_on_stale: bool = True,
    ) -> None:
        config = config or PaginationConfig()
        self.distributor = PageDistributor(
            measurer or TextLayoutMeasurer(config),
            ticker,
            config,
            rerun_on_stale=rerun_on_stale,
            document=Document.initial(),
        )
        self.selection: Optional[Selection] = None

    @property
    def document(self) -> Document:
        return self.distributor.document

    @property
    def pages(self) -> tuple[Page, ...]:
        return self.distributor.pages

    def start(self) -> None:
        """Request the first pass for the initial document."""
        self.distributor.request_pass()

    def replace_document(self, document: Document) -> None:
        self.distributor.on_document_change(document)

    def apply_nodes(self, nodes: Iterable[dict[str, Any]]) -> None:
        """Accept a new value from the editing surface as element nodes."""
        self.replace_document(Document.from_nodes(nodes))

    def select(self, anchor: int, focus: Optional[int] = None) -> None:
        self.selection = Selection(anchor, anchor if focus is None else focus)

    # Toolbar

    def is_format_active(self, fmt: str) -> bool:
        return is_format_active(self.document, self.selection, fmt)

    def is_block_active(self, kind: str) -> bool:
        return is_block_active(self.document, self.selection, kind)

    def toggle_format(self, fmt: str) -> None:
        updated = toggle_format(self.document, self.selection, fmt)
        if updated is not self.document:
            self.replace_document(updated)

    def toggle_block(self, kind: str) -> None:
        updated = toggle_block(self.document, self.selection, kind)
        if updated is not self.document:
            self.replace_document(updated)
