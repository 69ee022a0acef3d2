"""
Module: editing.commands

Purpose:
    Toolbar commands over a block-range selection.
    Queries never raise on a bad selection; they report "not active".
    Toggles return a new Document and leave the input untouched.

Key Classes:
    - Selection: Inclusive block index range

Key Functions:
    - is_format_active(): Any selected run has the flag
    - is_block_active(): Any selected block has the kind
    - toggle_format(): Set or clear a run flag across the selection
    - toggle_block(): Switch selected blocks to a kind or back to paragraph

Dependencies:
    - docpager.core.models

Used By:
    - session.EditingSession
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from docpager.core.models import FORMAT_FLAGS, Block, BlockKind, Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """
    Inclusive range of block indices; anchor and focus in either order.

    Example:
        >>> Selection(3, 1).span
        (1, 3)
    """

    anchor: int
    focus: int

    @classmethod
    def caret(cls, index: int) -> Selection:
        return cls(index, index)

    @property
    def span(self) -> Tuple[int, int]:
        return (min(self.anchor, self.focus), max(self.anchor, self.focus))


def _selected_indices(document: Document, selection: Optional[Selection]) -> Optional[range]:
    """Resolve a selection against a document, or None if it does not fit."""
    if selection is None or not document.blocks:
        return None
    start, end = selection.span
    if start < 0 or end >= len(document.blocks):
        return None
    return range(start, end + 1)


def _check_format(fmt: str) -> None:
    if fmt not in FORMAT_FLAGS:
        raise ValueError(f"Unknown format: {fmt!r}. Expected one of {FORMAT_FLAGS}")


def is_format_active(document: Document, selection: Optional[Selection], fmt: str) -> bool:
    """True if any run in the selected blocks has the format flag."""
    _check_format(fmt)
    indices = _selected_indices(document, selection)
    if indices is None:
        return False
    return any(
        run.has_format(fmt)
        for i in indices
        for run in document.blocks[i].runs
    )


def is_block_active(document: Document, selection: Optional[Selection], kind: str) -> bool:
    """True if any selected block is of the given kind."""
    indices = _selected_indices(document, selection)
    if indices is None:
        return False
    wanted = BlockKind.parse(str(kind)) or str(kind)
    return any(
        (document.blocks[i].known_kind or str(document.blocks[i].kind)) == wanted
        for i in indices
    )


def toggle_format(document: Document, selection: Optional[Selection], fmt: str) -> Document:
    """
    Set a format flag on every run in the selection, or clear it if active.

    Returns:
        New Document; the same Document if the selection is unusable
    """
    _check_format(fmt)
    indices = _selected_indices(document, selection)
    if indices is None:
        logger.warning(f"Ignoring toggle_format({fmt!r}) for selection {selection}")
        return document

    value = not is_format_active(document, selection, fmt)
    replacements = {}
    for i in indices:
        block = document.blocks[i]
        runs = tuple(run.with_format(fmt, value) for run in block.runs)
        replacements[i] = replace(block, runs=runs)
    return document.replace_blocks(replacements)


def toggle_block(document: Document, selection: Optional[Selection], kind: str) -> Document:
    """
    Switch selected blocks to a kind, or back to paragraph if already active.

    Returns:
        New Document; the same Document if the selection is unusable
    """
    indices = _selected_indices(document, selection)
    if indices is None:
        logger.warning(f"Ignoring toggle_block({kind!r}) for selection {selection}")
        return document

    target: str = BlockKind.parse(str(kind)) or str(kind)
    if is_block_active(document, selection, kind):
        target = BlockKind.PARAGRAPH

    replacements = {
        i: Block(target, document.blocks[i].runs)
        for i in indices
    }
    return document.replace_blocks(replacements)
