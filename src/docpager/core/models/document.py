"""
Module: document

Purpose:
    Provides the Document dataclass - an immutable ordered sequence of
    Blocks. The editing surface replaces the whole document on every edit;
    nothing in the pagination core mutates it.

Key Functions:
    - Document.initial(): Session-start document (one empty paragraph)
    - Document.from_nodes(): Build a snapshot from editor nodes
    - Document.replace_blocks(): Copy with some blocks swapped out

Dependencies:
    - dataclasses (std)
    - .blocks.Block

Used By:
    - pagination.paginator
    - scheduling.distributor
    - editing.commands
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Tuple

from .blocks import Block


@dataclass(frozen=True, slots=True)
class Document:
    """
    Document snapshot (immutable).

    Attributes:
        blocks: Blocks in document order

    Example:
        >>> doc = Document.initial()
        >>> len(doc)
        1
        >>> doc.blocks[0].plain_text
        ''
    """

    blocks: Tuple[Block, ...] = ()

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    @property
    def plain_text(self) -> str:
        """Newline-joined plain text of every block."""
        return "\n".join(block.plain_text for block in self.blocks)

    @classmethod
    def initial(cls) -> Document:
        return cls((Block.empty_paragraph(),))

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block]) -> Document:
        return cls(tuple(blocks))

    @classmethod
    def from_nodes(cls, nodes: Iterable[dict[str, Any]]) -> Document:
        """Build a snapshot from the editing surface's element nodes."""
        return cls(tuple(Block.from_dict(node) for node in nodes))

    def to_nodes(self) -> list[dict[str, Any]]:
        return [block.to_dict() for block in self.blocks]

    def replace_blocks(self, replacements: Mapping[int, Block]) -> Document:
        """
        Return a new Document with blocks at the given indices replaced.

        Untouched blocks keep their identity.

        Raises:
            IndexError: If an index is out of range
        """
        blocks = list(self.blocks)
        for index, block in replacements.items():
            if not 0 <= index < len(blocks):
                raise IndexError(f"Block index out of range: {index}")
            blocks[index] = block
        return Document(tuple(blocks))
