"""
Module: pagination.measurement

Purpose:
    Measurement backend for block heights.
    The paginator only sees the Measurer interface; the production
    implementation wraps text with ReportLab font metrics against the
    fixed content width and style sheet.

Key Classes:
    - Measurer: Interface - measure(block_kind, plain_text) -> height
    - TextLayoutMeasurer: ReportLab-backed implementation
    - MeasurementError: Raised when a height cannot be produced

Key Functions:
    - wrap_lines(): Line breaking shared with the PDF renderer

Dependencies:
    - reportlab: Font metrics and line splitting

Used By:
    - pagination.paginator
    - output.renderer: wrap_lines()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from reportlab.lib.utils import simpleSplit

from .config import PaginationConfig
from .styles import BlockStyle, style_for

logger = logging.getLogger(__name__)


class MeasurementError(Exception):
    """A block height could not be measured."""
    pass


class Measurer(Protocol):
    """Anything that can report the rendered height of a block."""

    def measure(self, block_kind: str, plain_text: str) -> float:
        ...


def wrap_lines(text: str, style: BlockStyle, content_width: float) -> List[str]:
    """
    Break text into lines that fit the content width for a style.

    Explicit newlines are honored. Empty text still occupies one line,
    the way an empty block renders with a placeholder space.

    Args:
        text: Plain text to wrap
        style: Style rule for the block
        content_width: Page content width (before style indent)

    Returns:
        Lines of text, at least one

    Example:
        >>> wrap_lines("", style_for("paragraph"), 468)
        ['']
    """
    width = max(content_width - style.indent, style.font_size)
    lines = simpleSplit(text, style.font_name(), style.font_size, width) if text else []
    return lines or [""]


class TextLayoutMeasurer:
    """
    Measure blocks by laying out their text with ReportLab metrics.

    Height is space_before + lines * leading + space_after for the
    block's style. Nothing is kept between calls.

    Example:
        >>> measurer = TextLayoutMeasurer(PaginationConfig())
        >>> round(measurer.measure("paragraph", "Hello"), 1)
        34.4
    """

    def __init__(self, config: Optional[PaginationConfig] = None) -> None:
        self._config = config or PaginationConfig()

    @property
    def config(self) -> PaginationConfig:
        return self._config

    def measure(self, block_kind: str, plain_text: str) -> float:
        style = style_for(block_kind)
        try:
            lines = wrap_lines(plain_text, style, self._config.content_width)
        except (KeyError, ValueError) as e:
            # Unregistered font face or malformed text from the metrics layer
            raise MeasurementError(f"Cannot lay out {block_kind!r} block: {e}") from e

        return style.space_before + len(lines) * style.leading + style.space_after
