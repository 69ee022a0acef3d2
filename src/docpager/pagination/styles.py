"""
Module: pagination.styles

Purpose:
    Fixed typographic style sheet keyed by block kind.
    Both the measurer and the PDF renderer read it, so measured heights
    match what gets drawn.

Key Classes:
    - BlockStyle: Immutable per-kind style rule

Key Functions:
    - style_for(): Resolve a kind to its style, falling back to paragraph

Dependencies:
    - dataclasses (std)

Used By:
    - pagination.measurement
    - output.renderer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from docpager.core.models import BlockKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockStyle:
    """
    Style rule for one block kind (immutable).

    Attributes:
        font_size: Font size in layout units
        line_height: Line height as a multiple of font_size
        bold: Bold face
        italic: Italic face
        space_before: Margin above the block
        space_after: Margin below the block
        indent: Left inset of the text (rule width + padding for quotes)
        rule_width: Width of the left rule; 0 for none
    """

    font_size: float
    line_height: float = 1.2
    bold: bool = False
    italic: bool = False
    space_before: float = 0.0
    space_after: float = 0.0
    indent: float = 0.0
    rule_width: float = 0.0

    @property
    def leading(self) -> float:
        """Baseline-to-baseline distance."""
        return self.font_size * self.line_height

    def font_name(self, *, bold: bool = False, italic: bool = False) -> str:
        """Standard Helvetica face for this style, optionally forcing bold/italic."""
        bold = bold or self.bold
        italic = italic or self.italic
        if bold and italic:
            return "Helvetica-BoldOblique"
        if bold:
            return "Helvetica-Bold"
        if italic:
            return "Helvetica-Oblique"
        return "Helvetica"


PARAGRAPH_STYLE = BlockStyle(font_size=14, line_height=1.6, space_after=12)

STYLE_SHEET: Dict[BlockKind, BlockStyle] = {
    BlockKind.PARAGRAPH: PARAGRAPH_STYLE,
    BlockKind.HEADING_1: BlockStyle(font_size=32, bold=True, space_before=20, space_after=16),
    BlockKind.HEADING_2: BlockStyle(font_size=24, bold=True, space_before=16, space_after=12),
    BlockKind.QUOTE: BlockStyle(
        font_size=16,
        italic=True,
        space_before=12,
        space_after=12,
        indent=20,  # 4 rule + 16 padding
        rule_width=4,
    ),
}


def style_for(kind: str) -> BlockStyle:
    """
    Resolve a block kind to its style rule.

    Kinds outside the closed set get paragraph styling so pagination
    always makes progress.

    Example:
        >>> style_for("quote").italic
        True
        >>> style_for("table") is PARAGRAPH_STYLE
        True
    """
    known = BlockKind.parse(str(kind))
    if known is None:
        logger.debug(f"Unknown block kind {kind!r}, using paragraph style")
        return PARAGRAPH_STYLE
    return STYLE_SHEET[known]
