"""
Unit tests for toolbar commands.
"""

import pytest

from docpager.core.models import Block, BlockKind, Document, Run
from docpager.editing import (
    Selection,
    is_block_active,
    is_format_active,
    toggle_block,
    toggle_format,
)


@pytest.fixture
def doc():
    return Document((
        Block(BlockKind.HEADING_1, (Run("Title"),)),
        Block(BlockKind.PARAGRAPH, (Run("plain "), Run("bold", bold=True))),
        Block(BlockKind.QUOTE, (Run("cited", italic=True),)),
    ))


class TestSelection:

    def test_span_orders_anchor_and_focus(self):
        assert Selection(2, 0).span == (0, 2)
        assert Selection.caret(1).span == (1, 1)


class TestQueries:

    def test_is_format_active_when_any_run_has_flag(self, doc):
        assert is_format_active(doc, Selection.caret(1), "bold")
        assert not is_format_active(doc, Selection.caret(0), "bold")

    def test_is_format_active_across_range(self, doc):
        assert is_format_active(doc, Selection(0, 2), "italic")

    def test_is_block_active_when_kind_in_selection(self, doc):
        assert is_block_active(doc, Selection.caret(0), BlockKind.HEADING_1)
        assert is_block_active(doc, Selection(0, 2), "block-quote")
        assert not is_block_active(doc, Selection.caret(1), BlockKind.QUOTE)

    @pytest.mark.parametrize("selection", [None, Selection(5, 6), Selection(-1, 0)])
    def test_queries_when_selection_invalid_then_not_active(self, doc, selection):
        assert is_format_active(doc, selection, "bold") is False
        assert is_block_active(doc, selection, BlockKind.PARAGRAPH) is False

    def test_queries_when_document_empty_then_not_active(self):
        empty = Document(())
        assert is_format_active(empty, Selection.caret(0), "bold") is False
        assert is_block_active(empty, Selection.caret(0), "paragraph") is False

    def test_is_format_active_when_unknown_format_then_raises(self, doc):
        with pytest.raises(ValueError):
            is_format_active(doc, Selection.caret(0), "strike")


class TestToggles:

    def test_toggle_format_when_inactive_then_sets_on_all_runs(self, doc):
        updated = toggle_format(doc, Selection.caret(0), "underline")

        assert all(run.underline for run in updated.blocks[0].runs)
        assert updated.blocks[1] is doc.blocks[1]
        assert not doc.blocks[0].runs[0].underline

    def test_toggle_format_when_active_then_clears(self, doc):
        updated = toggle_format(doc, Selection.caret(1), "bold")

        assert not any(run.bold for run in updated.blocks[1].runs)
        assert updated.blocks[1].plain_text == "plain bold"

    def test_toggle_block_when_inactive_then_sets_kind(self, doc):
        updated = toggle_block(doc, Selection.caret(1), "heading-two")

        assert updated.blocks[1].kind is BlockKind.HEADING_2
        assert updated.blocks[1].runs == doc.blocks[1].runs

    def test_toggle_block_when_active_then_back_to_paragraph(self, doc):
        updated = toggle_block(doc, Selection(0, 1), BlockKind.HEADING_1)

        assert updated.blocks[0].kind is BlockKind.PARAGRAPH
        assert updated.blocks[1].kind is BlockKind.PARAGRAPH

    def test_toggles_when_selection_invalid_then_same_document(self, doc):
        assert toggle_format(doc, None, "bold") is doc
        assert toggle_block(doc, Selection(7, 9), BlockKind.QUOTE) is doc
