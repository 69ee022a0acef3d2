"""
Core Models Package

Immutable data models for the document being paginated.

All models are frozen dataclasses. The editing surface produces a new
Document on every edit; pagination reads snapshots and never mutates them.
Blocks compare by identity so pages can be checked against the source
document block for block.
"""

from .runs import Run, FORMAT_FLAGS
from .blocks import Block, BlockKind
from .document import Document

__all__ = [
    "Run",
    "FORMAT_FLAGS",
    "Block",
    "BlockKind",
    "Document",
]
