"""Group lines of Markdown-ish text into block nodes.

Recognised line shapes, checked in this order:

- blank line                 -> skipped
- ``---`` (3+ dashes)        -> :class:`HorizontalRule`
- ``# text`` .. ``###### text`` -> :class:`Heading`
- ``- item`` / ``* item``    -> :class:`BulletList` (consecutive lines merge)
- ``1. item``                -> :class:`OrderedList` (consecutive lines merge)
- anything else              -> :class:`Paragraph`

Every block except a list covers exactly one source line.  Ordered lists
always start at 1; the digits written in the source are ignored.
"""

from __future__ import annotations

import re

from substackify.converter.inline import parse_inline
from substackify.models import (
    Block,
    BulletList,
    Heading,
    HorizontalRule,
    ListItem,
    OrderedList,
    Paragraph,
)

_RULE_RE = re.compile(r"^-{3,}$")
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_BULLET_RE = re.compile(r"^\s*[-*]\s+")
_ORDERED_RE = re.compile(r"^\s*[0-9]+\.\s+")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_BOM = "\ufeff"


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, ``\\r\\n`` or ``\\r``, keeping empty lines.

    A leading byte-order mark is dropped first.
    """
    if text.startswith(_BOM):
        text = text[1:]
    return _LINE_BREAK_RE.split(text)


class LineCursor:
    """Index-based cursor over the lines of one input."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self._lines)

    def peek(self) -> str:
        return self._lines[self.index]

    def advance(self) -> str:
        line = self._lines[self.index]
        self.index += 1
        return line


def _take_list_items(cursor: LineCursor, marker: re.Pattern[str]) -> tuple[ListItem, ...]:
    """Consume consecutive lines starting with *marker* as list items."""
    items: list[ListItem] = []
    while not cursor.at_end():
        m = marker.match(cursor.peek())
        if m is None:
            break
        line = cursor.advance()
        items.append(ListItem(Paragraph(parse_inline(line[m.end():]))))
    return tuple(items)


def parse_blocks(text: str) -> list[Block]:
    """Convert raw input text into an ordered list of blocks.

    Never raises: any line that matches no other shape becomes a
    paragraph.
    """
    cursor = LineCursor(split_lines(text))
    blocks: list[Block] = []

    while not cursor.at_end():
        line = cursor.peek()

        if not line.strip():
            cursor.advance()
            continue

        if _RULE_RE.match(line.strip()):
            blocks.append(HorizontalRule())
            cursor.advance()
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            blocks.append(
                Heading(level=len(heading.group(1)), content=parse_inline(heading.group(2)))
            )
            cursor.advance()
            continue

        if _BULLET_RE.match(line):
            blocks.append(BulletList(_take_list_items(cursor, _BULLET_RE)))
            continue

        if _ORDERED_RE.match(line):
            blocks.append(OrderedList(_take_list_items(cursor, _ORDERED_RE), start=1))
            continue

        blocks.append(Paragraph(parse_inline(line)))
        cursor.advance()

    return blocks
