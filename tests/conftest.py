import os
import pytest
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import docpager
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from docpager.core.models import Block, BlockKind, Document, Run  # noqa: E402


class LookupMeasurer:
    """Deterministic measurer: height looked up by block text."""

    def __init__(self, heights: Optional[Dict[str, float]] = None, default: float = 20.0) -> None:
        self.heights = dict(heights or {})
        self.default = default
        self.calls: List[Tuple[str, str]] = []

    def measure(self, block_kind: str, plain_text: str) -> float:
        self.calls.append((block_kind, plain_text))
        return self.heights.get(plain_text, self.default)


class FailingMeasurer:
    """Measurer whose backend is unavailable."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    def measure(self, block_kind: str, plain_text: str) -> float:
        self.calls += 1
        raise self.exc


@pytest.fixture
def lookup_measurer():
    """Factory for LookupMeasurer instances."""
    def _create(heights: Optional[Dict[str, float]] = None, default: float = 20.0):
        return LookupMeasurer(heights, default)
    return _create


@pytest.fixture
def failing_measurer():
    return FailingMeasurer


@pytest.fixture
def block_factory():
    """Factory to create single-run blocks."""
    def _create(text: str = "", kind: str = BlockKind.PARAGRAPH, **flags):
        return Block(kind, (Run(text, **flags),))
    return _create


@pytest.fixture
def make_document(block_factory):
    """Build a Document of paragraphs from texts."""
    def _create(*texts: str, kind: str = BlockKind.PARAGRAPH):
        return Document(tuple(block_factory(text, kind) for text in texts))
    return _create
