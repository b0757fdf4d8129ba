"""Tests for the document tree node types."""

from __future__ import annotations

import dataclasses

import pytest

from substackify.models import (
    BulletList,
    Document,
    Emphasis,
    Heading,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strong,
    TextRun,
)


class TestTextRun:
    def test_unstyled_omits_marks(self):
        assert TextRun("x").to_dict() == {"type": "text", "text": "x"}

    def test_duplicate_marks_dropped(self):
        run = TextRun("x", (Strong(), Strong(), Emphasis()))
        assert run.marks == (Strong(), Emphasis())

    def test_list_marks_become_tuple(self):
        run = TextRun("x", [Link(href="u")])
        assert run.marks == (Link(href="u"),)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            TextRun("x").text = "y"


class TestValidation:
    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_bounds(self, level):
        with pytest.raises(ValueError, match="heading level"):
            Heading(level=level)

    def test_ordered_list_start_bound(self):
        with pytest.raises(ValueError, match="start"):
            OrderedList(start=0)


class TestSerialisation:
    def test_link_mark(self):
        assert Link(href="https://a").to_dict() == {
            "type": "link",
            "attrs": {"href": "https://a"},
        }

    def test_list_item_wraps_one_paragraph(self):
        item = ListItem(Paragraph((TextRun("a"),)))
        assert item.to_dict() == {
            "type": "list_item",
            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "a"}]}],
        }

    def test_empty_bullet_list(self):
        assert BulletList().to_dict() == {"type": "bullet_list", "content": []}

    def test_document_content_is_tuple(self):
        doc = Document([Paragraph()])
        assert isinstance(doc.content, tuple)
        assert hash(doc) == hash(Document((Paragraph(),)))
