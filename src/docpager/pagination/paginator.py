"""
Module: pagination.paginator

Purpose:
    Pack document blocks onto pages by measured height.
    Blocks are atomic: a block is never split across pages.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    Greedy accumulation, one left-to-right pass:
    1. Measure each block in document order
    2. If the page already holds blocks and the block would push the
       running height past capacity, close the page and start a new one
    3. Otherwise add the block to the current page
    4. A block taller than capacity lands alone on its own page
    5. An empty document yields one page with a placeholder paragraph

Dependencies:
    - pagination.measurement: Measurer, MeasurementError
    - pagination.config: PaginationConfig

Used By:
    - scheduling.distributor: Deferred pagination passes
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from docpager.core.models import Block, Document

from .config import PaginationConfig
from .measurement import MeasurementError, Measurer
from .models import Page, PaginationResult

logger = logging.getLogger(__name__)


def paginate(
    document: Document,
    measurer: Measurer,
    config: Optional[PaginationConfig] = None,
) -> PaginationResult:
    """
    Arrange a document's blocks onto pages.

    Args:
        document: Snapshot to paginate (not modified)
        measurer: Height measurement backend
        config: Page configuration (defaults to US Letter, capacity 792)

    Returns:
        PaginationResult with at least one non-empty page

    Raises:
        MeasurementError: If any block cannot be measured. No partial
            result is produced.

    Example:
        >>> result = paginate(document, TextLayoutMeasurer())
        >>> result.blocks == document.blocks
        True
    """
    config = config or PaginationConfig()
    capacity = config.page_capacity

    pages: List[Page] = []
    warnings: List[str] = []

    current_blocks: List[Block] = []
    current_height = 0.0

    for position, block in enumerate(document.blocks):
        height = _measure(measurer, block, position)

        if current_blocks and current_height + height > capacity:
            pages.append(_close_page(len(pages) + 1, current_blocks, current_height))
            current_blocks = [block]
            current_height = height
        else:
            current_blocks.append(block)
            current_height += height

        if height > capacity:
            message = (
                f"Block {position} ({block.kind}) overflows page {len(pages) + 1}: "
                f"{height:.1f} needed, {capacity:.1f} available"
            )
            logger.warning(message)
            warnings.append(message)

    if current_blocks:
        pages.append(_close_page(len(pages) + 1, current_blocks, current_height))

    if not pages or all(page.is_empty for page in pages):
        logger.info("Document has no blocks, emitting placeholder page")
        return PaginationResult.placeholder()

    logger.info(f"Paginated {len(document)} blocks onto {len(pages)} pages")

    return PaginationResult(pages=tuple(pages), warnings=warnings)


def _measure(measurer: Measurer, block: Block, position: int) -> float:
    """Measure one block, normalizing backend failures to MeasurementError."""
    try:
        height = measurer.measure(str(block.kind), block.plain_text)
    except MeasurementError:
        raise
    except Exception as e:
        raise MeasurementError(f"Failed to measure block {position}: {e}") from e

    try:
        height = float(height)
    except (TypeError, ValueError) as e:
        raise MeasurementError(f"Non-numeric height for block {position}: {height!r}") from e

    if math.isnan(height) or math.isinf(height) or height < 0:
        raise MeasurementError(f"Invalid height for block {position}: {height}")
    return height


def _close_page(number: int, blocks: List[Block], height: float) -> Page:
    return Page(number=number, blocks=tuple(blocks), height_used=height)
