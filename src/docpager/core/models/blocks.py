"""
Module: blocks

Purpose:
    Provides the Block dataclass - the unit of document structure and
    pagination granularity. A block holds a kind tag and an ordered tuple
    of Runs and is never split across pages.

Key Classes:
    - BlockKind: Closed set of known block kinds
    - Block: Immutable typed block of runs

Dependencies:
    - dataclasses (std)
    - .runs.Run

Used By:
    - core.models.document.Document
    - pagination.paginator
    - pagination.styles
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .runs import Run


class BlockKind(str, Enum):
    """Known block kinds."""
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading-level-1"
    HEADING_2 = "heading-level-2"
    QUOTE = "quote"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Optional[BlockKind]:
        """
        Resolve a kind string, accepting editor aliases.

        Returns None for kinds outside the closed set.

        Example:
            >>> BlockKind.parse("heading-one")
            <BlockKind.HEADING_1: 'heading-level-1'>
            >>> BlockKind.parse("table") is None
            True
        """
        value = _EDITOR_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError:
            return None


# Element type names used by the editing surface
_EDITOR_ALIASES = {
    "heading-one": "heading-level-1",
    "heading-two": "heading-level-2",
    "block-quote": "quote",
}


@dataclass(frozen=True, slots=True, eq=False)
class Block:
    """
    Document block (immutable).

    Blocks compare by identity: two empty paragraphs are different blocks,
    and pagination hands the same objects through to pages. Use
    ``same_content()`` for value comparison.

    Attributes:
        kind: Block kind; usually a BlockKind value, but any string is kept
        runs: Text runs in order

    Example:
        >>> block = Block(BlockKind.PARAGRAPH, (Run("Hello "), Run("world", bold=True)))
        >>> block.plain_text
        'Hello world'
    """

    kind: str
    runs: Tuple[Run, ...] = ()

    @property
    def plain_text(self) -> str:
        """Concatenated run text, ignoring style flags."""
        return "".join(run.text for run in self.runs)

    @property
    def known_kind(self) -> Optional[BlockKind]:
        """The kind as a BlockKind, or None when outside the closed set."""
        return BlockKind.parse(self.kind)

    @property
    def is_empty(self) -> bool:
        return not self.plain_text

    def same_content(self, other: Block) -> bool:
        """Value comparison on kind and runs."""
        return str(self.kind) == str(other.kind) and self.runs == other.runs

    @classmethod
    def empty_paragraph(cls) -> Block:
        """Synthesize a paragraph holding a single empty run."""
        return cls(BlockKind.PARAGRAPH, (Run(""),))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to an editor element node."""
        return {
            "type": str(self.kind),
            "children": [run.to_dict() for run in self.runs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Block:
        """
        Build from an editor element node.

        Editor aliases map onto BlockKind; unknown types are kept verbatim.
        A node without children gets one empty run, as the editor does.
        """
        raw_kind = str(data.get("type") or BlockKind.PARAGRAPH.value)
        kind = BlockKind.parse(raw_kind) or raw_kind
        children = data.get("children") or [{"text": ""}]
        return cls(kind, tuple(Run.from_dict(child) for child in children))
