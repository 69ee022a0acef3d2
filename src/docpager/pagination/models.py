"""
Module: pagination.models

Purpose:
    Data models for pagination output.
    Immutable dataclasses for pages and the result of one pass.

Key Classes:
    - Page: Ordered blocks that fit one page budget
    - PaginationResult: Final pass output with diagnostics

Dependencies:
    - dataclasses (std)

Used By:
    - pagination.paginator: Creates Pages
    - scheduling.distributor: Publishes results
    - output.renderer: Draws pages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from docpager.core.models import Block


@dataclass(frozen=True)
class Page:
    """
    One page of blocks.

    Blocks are the same objects as in the source document, not copies.

    Attributes:
        number: Page ordinal (1-based)
        blocks: Blocks on this page, in document order
        height_used: Sum of the blocks' measured heights

    Example:
        >>> page = Page(number=1, blocks=(b1, b2), height_used=600.0)
        >>> page.block_count
        2
    """

    number: int
    blocks: Tuple[Block, ...]
    height_used: float = 0.0

    @property
    def index(self) -> int:
        """0-based position."""
        return self.number - 1

    @property
    def block_count(self) -> int:
        return len(self.blocks)

    @property
    def is_empty(self) -> bool:
        return len(self.blocks) == 0


@dataclass(frozen=True)
class PaginationResult:
    """
    Output of one pagination pass.

    Attributes:
        pages: Pages in order; never empty
        warnings: Diagnostics such as oversize blocks
        synthesized: True when the page holds a placeholder block
            because the document had none

    Example:
        >>> result.page_count
        2
        >>> [b for b in result.blocks] == list(document.blocks)
        True
    """

    pages: Tuple[Page, ...]
    warnings: list[str] = field(default_factory=list)
    synthesized: bool = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def blocks(self) -> Tuple[Block, ...]:
        """All blocks across pages, in order."""
        return tuple(block for page in self.pages for block in page.blocks)

    @property
    def total_blocks(self) -> int:
        return sum(page.block_count for page in self.pages)

    @classmethod
    def placeholder(cls) -> PaginationResult:
        """Single page with one synthesized empty paragraph."""
        page = Page(number=1, blocks=(Block.empty_paragraph(),), height_used=0.0)
        return cls(pages=(page,), synthesized=True)
