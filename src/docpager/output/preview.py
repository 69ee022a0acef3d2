"""
Module: output.preview

Purpose:
    Rasterize rendered PDF pages into PIL images for page thumbnails.

Key Functions:
    - rasterize_pdf(): One image per PDF page

Dependencies:
    - fitz (PyMuPDF): PDF rendering
    - PIL.Image: Image handling

Used By:
    - Host applications showing page previews
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 72


def rasterize_pdf(
    pdf_path: Path,
    dpi: int = DEFAULT_PREVIEW_DPI,
    *,
    grayscale: bool = False,
) -> List[Image.Image]:
    """
    Render every page of a PDF to an image.

    Args:
        pdf_path: PDF produced by render_to_pdf()
        dpi: Resolution; 72 gives one pixel per layout unit
        grayscale: Render in grayscale instead of RGB

    Returns:
        Images in page order

    Raises:
        ValueError: If dpi is not positive
        FileNotFoundError: If the PDF does not exist
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(pdf_path)

    matrix = fitz.Matrix(dpi / 72.0, dpi / 72.0)
    colorspace = fitz.csGRAY if grayscale else fitz.csRGB
    mode = "L" if grayscale else "RGB"

    images: List[Image.Image] = []
    with fitz.open(pdf_path) as doc:
        for page in doc:
            pix = page.get_pixmap(matrix=matrix, alpha=False, colorspace=colorspace)
            images.append(Image.frombytes(mode, (pix.width, pix.height), pix.samples))

    logger.debug(f"Rasterized {len(images)} pages from {pdf_path} at {dpi} DPI")
    return images
