"""
Module: output

Purpose:
    Read-only presentation of pagination results: PDF pages and
    rasterized page thumbnails.

Key Functions:
    - render_to_pdf(): Draw pages with ReportLab
    - rasterize_pdf(): PDF pages to PIL images via PyMuPDF
"""

from .renderer import render_to_pdf
from .preview import rasterize_pdf

__all__ = [
    "render_to_pdf",
    "rasterize_pdf",
]
