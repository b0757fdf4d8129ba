"""Tests for the line-oriented block parser."""

from __future__ import annotations

import pytest

from substackify.converter.blocks import LineCursor, parse_blocks, split_lines
from substackify.converter.inline import parse_inline
from substackify.models import (
    BulletList,
    Emphasis,
    Heading,
    HorizontalRule,
    ListItem,
    OrderedList,
    Paragraph,
    Strong,
    TextRun,
)


def _item(text: str) -> ListItem:
    return ListItem(Paragraph((TextRun(text),)))


class TestBlankLines:
    def test_empty_input(self):
        assert parse_blocks("") == []

    def test_whitespace_only_input(self):
        assert parse_blocks("  \n\t\n   ") == []

    def test_blank_lines_between_paragraphs_are_dropped(self):
        blocks = parse_blocks("one\n\n\ntwo")
        assert blocks == [Paragraph((TextRun("one"),)), Paragraph((TextRun("two"),))]


class TestHorizontalRule:
    @pytest.mark.parametrize("line", ["---", "----", "----------", "  ---  ", "\t---"])
    def test_dash_runs(self, line):
        assert parse_blocks(line) == [HorizontalRule()]

    def test_two_dashes_is_paragraph(self):
        assert parse_blocks("--") == [Paragraph((TextRun("--"),))]

    def test_dashes_with_text_is_not_rule(self):
        assert parse_blocks("--- x") == [Paragraph((TextRun("--- x"),))]


class TestHeadings:
    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, level):
        blocks = parse_blocks("#" * level + " Title")
        assert blocks == [Heading(level=level, content=(TextRun("Title"),))]

    def test_seven_hashes_is_paragraph(self):
        blocks = parse_blocks("####### Too deep")
        assert blocks == [Paragraph((TextRun("####### Too deep"),))]

    def test_no_space_after_hash_is_paragraph(self):
        assert parse_blocks("#tag") == [Paragraph((TextRun("#tag"),))]

    def test_heading_with_inline_marks(self):
        blocks = parse_blocks("## A **bold** move")
        assert blocks == [
            Heading(
                level=2,
                content=(TextRun("A "), TextRun("bold", (Strong(),)), TextRun(" move")),
            )
        ]

    def test_indented_hash_is_paragraph(self):
        assert parse_blocks(" # x") == [Paragraph((TextRun(" # x"),))]


class TestBulletLists:
    def test_dash_items(self):
        assert parse_blocks("- a\n- b") == [BulletList((_item("a"), _item("b")))]

    def test_star_items_merge_with_dash_items(self):
        assert parse_blocks("- a\n* b") == [BulletList((_item("a"), _item("b")))]

    def test_indented_items(self):
        assert parse_blocks("  - a\n    - b") == [BulletList((_item("a"), _item("b")))]

    def test_item_inline_marks(self):
        blocks = parse_blocks("- *it*")
        assert blocks == [
            BulletList((ListItem(Paragraph((TextRun("it", (Emphasis(),)),))),))
        ]

    def test_blank_line_splits_lists(self):
        blocks = parse_blocks("- a\n\n- b")
        assert blocks == [BulletList((_item("a"),)), BulletList((_item("b"),))]

    def test_paragraph_terminates_run(self):
        blocks = parse_blocks("- a\ntext\n- b")
        assert blocks == [
            BulletList((_item("a"),)),
            Paragraph((TextRun("text"),)),
            BulletList((_item("b"),)),
        ]

    def test_bold_line_is_not_a_bullet(self):
        blocks = parse_blocks("**x** y")
        assert blocks == [Paragraph((TextRun("x", (Strong(),)), TextRun(" y")))]


class TestOrderedLists:
    def test_items(self):
        assert parse_blocks("1. one\n2. two") == [
            OrderedList((_item("one"), _item("two")), start=1)
        ]

    def test_start_is_always_one(self):
        # Pinned behaviour: the source numbering is discarded.
        blocks = parse_blocks("5. x\n9. y")
        assert len(blocks) == 1
        assert isinstance(blocks[0], OrderedList)
        assert blocks[0].start == 1

    def test_family_switch_starts_new_list(self):
        blocks = parse_blocks("1. a\n- b\n2. c")
        assert blocks == [
            OrderedList((_item("a"),)),
            BulletList((_item("b"),)),
            OrderedList((_item("c"),)),
        ]

    def test_missing_space_after_dot_is_paragraph(self):
        assert parse_blocks("1.x") == [Paragraph((TextRun("1.x"),))]


class TestParagraphs:
    def test_each_line_is_own_paragraph(self):
        blocks = parse_blocks("line one\nline two")
        assert blocks == [Paragraph((TextRun("line one"),)), Paragraph((TextRun("line two"),))]

    def test_paragraph_keeps_leading_whitespace(self):
        assert parse_blocks("  indented") == [Paragraph(tuple(parse_inline("  indented")))]


class TestLineEndings:
    def test_crlf_and_cr(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_leading_bom_is_dropped(self):
        assert split_lines("﻿a\nb") == ["a", "b"]

    def test_bom_prefixed_rule(self):
        assert parse_blocks("﻿---") == [HorizontalRule()]

    def test_bom_prefixed_heading(self):
        assert parse_blocks("﻿# Title") == [Heading(1, parse_inline("Title"))]

    def test_crlf_heading(self):
        assert parse_blocks("# Hi\r\ntext") == [
            Heading(level=1, content=(TextRun("Hi"),)),
            Paragraph((TextRun("text"),)),
        ]


class TestLineCursor:
    def test_walks_lines(self):
        cursor = LineCursor(["a", "b"])
        assert cursor.peek() == "a"
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.at_end()


def test_mixed_document_order():
    text = "# Title\n\nIntro *text*.\n\n- one\n- two\n\n---\n\n1. first\n2. second\nOutro"
    kinds = [type(b).__name__ for b in parse_blocks(text)]
    assert kinds == [
        "Heading",
        "Paragraph",
        "BulletList",
        "HorizontalRule",
        "OrderedList",
        "Paragraph",
    ]
