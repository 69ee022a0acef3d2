"""
Module: pagination

Purpose:
    Measurement-driven pagination of a block document.
    Converts a Document into fixed-capacity pages of whole blocks.

Key Functions:
    - paginate(): Arrange blocks onto pages
    - style_for(): Resolve a block kind to its style rule
    - wrap_lines(): Shared line breaking

Key Classes:
    - PaginationConfig: Page geometry and capacity
    - TextLayoutMeasurer: ReportLab-backed height measurement
    - Page / PaginationResult: Pass output

Dependencies:
    - reportlab: Font metrics
    - docpager.core.models: Document, Block

Used By:
    - docpager.scheduling.distributor
    - docpager.output.renderer
"""

from .config import PaginationConfig
from .styles import BlockStyle, STYLE_SHEET, style_for
from .measurement import Measurer, MeasurementError, TextLayoutMeasurer, wrap_lines
from .models import Page, PaginationResult
from .paginator import paginate

__all__ = [
    # Config
    "PaginationConfig",
    "BlockStyle",
    "STYLE_SHEET",
    "style_for",
    # Measurement
    "Measurer",
    "MeasurementError",
    "TextLayoutMeasurer",
    "wrap_lines",
    # Models
    "Page",
    "PaginationResult",
    # Functions
    "paginate",
]
