"""
Module: runs

Purpose:
    Provides the Run dataclass - an immutable leaf of styled text inside
    a block. Runs have no identity beyond their position in the parent.

Key Functions:
    - Run.to_dict() / Run.from_dict(): Editor leaf conversion

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.blocks.Block
    - editing.commands
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


FORMAT_FLAGS = ("bold", "italic", "underline")


@dataclass(frozen=True, slots=True)
class Run:
    """
    Styled text leaf (immutable).

    Attributes:
        text: Text payload
        bold: Bold flag
        italic: Italic flag
        underline: Underline flag

    Example:
        >>> run = Run("Hello", bold=True)
        >>> run.to_dict()
        {'text': 'Hello', 'bold': True}
    """

    text: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def has_format(self, fmt: str) -> bool:
        """Check whether a named format flag is set."""
        if fmt not in FORMAT_FLAGS:
            raise ValueError(f"Unknown format: {fmt!r}")
        return getattr(self, fmt)

    def with_format(self, fmt: str, value: bool) -> Run:
        """Return a copy with one format flag changed."""
        if fmt not in FORMAT_FLAGS:
            raise ValueError(f"Unknown format: {fmt!r}")
        return replace(self, **{fmt: value})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to an editor leaf; unset flags are omitted."""
        data: dict[str, Any] = {"text": self.text}
        for flag in FORMAT_FLAGS:
            if getattr(self, flag):
                data[flag] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Run:
        """Build from an editor leaf. Null or missing flags read as False."""
        return cls(
            text=str(data.get("text") or ""),
            bold=bool(data.get("bold")),
            italic=bool(data.get("italic")),
            underline=bool(data.get("underline")),
        )
