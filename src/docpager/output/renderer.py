"""
Module: output.renderer

Purpose:
    Render a PaginationResult to PDF using ReportLab.
    Each Page becomes one PDF page with its blocks drawn top to bottom
    using the same style sheet and line breaking as the measurer.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - pagination.styles / pagination.measurement: Shared layout rules

Used By:
    - Host applications for read-only page previews
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from docpager.core.models import Block, Run
from docpager.pagination import (
    PaginationConfig,
    PaginationResult,
    Page,
    BlockStyle,
    style_for,
    wrap_lines,
)

logger = logging.getLogger(__name__)

PAGE_LABEL_FONT_SIZE = 9
RULE_COLOR = (0x21 / 255, 0x96 / 255, 0xF3 / 255)  # #2196f3


def render_to_pdf(
    result: PaginationResult,
    output_path: Path,
    config: Optional[PaginationConfig] = None,
    *,
    show_page_numbers: bool = True,
) -> Path:
    """
    Render pagination result to a PDF file.

    The page is tall enough for a full capacity of content between the
    top and bottom margins.

    Args:
        result: Result from paginate()
        output_path: Path to write PDF
        config: Page configuration used for pagination
        show_page_numbers: Draw "Page N" in the top margin

    Returns:
        The output path

    Raises:
        IOError: If PDF cannot be written

    Example:
        >>> render_to_pdf(result, Path("output/preview.pdf"))
    """
    config = config or PaginationConfig()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_height_pt = config.margin_top + config.page_capacity + config.margin_bottom
    c = canvas.Canvas(str(output_path), pagesize=(config.page_width, page_height_pt))

    for page in result.pages:
        _render_page(c, page, config, page_height_pt, show_page_numbers)
        c.showPage()

    c.save()

    logger.info(f"Rendered {result.page_count} pages to {output_path}")
    return output_path


def _render_page(
    c: canvas.Canvas,
    page: Page,
    config: PaginationConfig,
    page_height_pt: float,
    show_page_numbers: bool,
) -> None:
    """Draw one page's blocks and label."""
    if show_page_numbers:
        _draw_page_label(c, page.number, config, page_height_pt)

    y_top = config.margin_top
    for block in page.blocks:
        y_top = _draw_block(c, block, config, page_height_pt, y_top)

    if y_top > config.margin_top + config.page_capacity:
        logger.debug(f"Page {page.number} content runs into the bottom margin")


def _draw_page_label(
    c: canvas.Canvas,
    number: int,
    config: PaginationConfig,
    page_height_pt: float,
) -> None:
    c.saveState()
    c.setFont("Helvetica", PAGE_LABEL_FONT_SIZE)
    c.setFillColorRGB(0.4, 0.4, 0.4)
    label = f"Page {number}"
    width = c.stringWidth(label, "Helvetica", PAGE_LABEL_FONT_SIZE)
    c.drawString(config.page_width - config.margin_right - width, page_height_pt - config.margin_top / 2, label)
    c.restoreState()


def _draw_block(
    c: canvas.Canvas,
    block: Block,
    config: PaginationConfig,
    page_height_pt: float,
    y_top: float,
) -> float:
    """
    Draw one block starting at y_top (measured down from the page top).

    Text is drawn in the style's face, the one wrap_lines() measures with,
    so lines never run past the content width. Only the first run's
    underline flag carries over to the whole block.

    Returns:
        y_top for the next block
    """
    style = style_for(block.kind)
    lead = block.runs[0] if block.runs else Run()
    face = style.font_name()
    lines = wrap_lines(block.plain_text, style, config.content_width)

    y_top += style.space_before
    text_top = y_top
    x = config.margin_left + style.indent

    c.saveState()
    c.setFont(face, style.font_size)
    for line in lines:
        baseline = page_height_pt - (y_top + _baseline_offset(style))
        c.drawString(x, baseline, line)
        if lead.underline and line:
            width = c.stringWidth(line, face, style.font_size)
            c.setLineWidth(max(style.font_size / 16, 0.5))
            c.line(x, baseline - 2, x + width, baseline - 2)
        y_top += style.leading
    c.restoreState()

    if style.rule_width:
        _draw_rule(c, config.margin_left, style, page_height_pt, text_top, y_top)

    return y_top + style.space_after


def _baseline_offset(style: BlockStyle) -> float:
    """Distance from the top of a line box to its baseline."""
    half_gap = (style.leading - style.font_size) / 2
    return half_gap + style.font_size * 0.8


def _draw_rule(
    c: canvas.Canvas,
    x: float,
    style: BlockStyle,
    page_height_pt: float,
    top: float,
    bottom: float,
) -> None:
    c.saveState()
    c.setStrokeColorRGB(*RULE_COLOR)
    c.setLineWidth(style.rule_width)
    rule_x = x + style.rule_width / 2
    c.line(rule_x, page_height_pt - top, rule_x, page_height_pt - bottom)
    c.restoreState()
