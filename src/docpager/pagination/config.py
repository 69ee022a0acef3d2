"""
Module: pagination.config

Purpose:
    Configuration for the pagination engine.
    Defines page geometry, content width and the per-page height budget.

Key Classes:
    - PaginationConfig: Immutable page configuration

Dependencies:
    - dataclasses (std)

Used By:
    - pagination.measurement: Content width for line wrapping
    - pagination.paginator: Page capacity
    - output.renderer: Page size and margins
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# US Letter at 72 layout units per inch
DEFAULT_PAGE_WIDTH = 612.0
DEFAULT_PAGE_HEIGHT = 792.0
DEFAULT_MARGIN = 72.0


@dataclass(frozen=True)
class PaginationConfig:
    """
    Configuration for pagination (immutable).

    Attributes:
        page_width: Outer page width in layout units
        page_height: Outer page height in layout units
        margin_left: Left padding
        margin_right: Right padding
        margin_top: Top padding (used by the renderer only)
        margin_bottom: Bottom padding (used by the renderer only)
        capacity: Height budget per page; defaults to page_height

    Example:
        >>> config = PaginationConfig()
        >>> config.content_width
        468.0
        >>> config.page_capacity
        792.0
    """

    page_width: float = DEFAULT_PAGE_WIDTH
    page_height: float = DEFAULT_PAGE_HEIGHT

    margin_left: float = DEFAULT_MARGIN
    margin_right: float = DEFAULT_MARGIN
    margin_top: float = DEFAULT_MARGIN
    margin_bottom: float = DEFAULT_MARGIN

    capacity: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        for name in ("margin_left", "margin_right", "margin_top", "margin_bottom"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.capacity is not None and self.capacity <= 0:
            raise ValueError(f"capacity must be positive: {self.capacity}")

    @property
    def content_width(self) -> float:
        """Width available for text (excluding left/right padding)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def page_capacity(self) -> float:
        """Accumulated block height allowed on one page."""
        return self.page_height if self.capacity is None else self.capacity
