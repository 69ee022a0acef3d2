"""Toolbar commands (inline formats and block kinds) over a block selection."""

from .commands import (
    Selection,
    is_block_active,
    is_format_active,
    toggle_block,
    toggle_format,
)

__all__ = [
    "Selection",
    "is_format_active",
    "is_block_active",
    "toggle_format",
    "toggle_block",
]
