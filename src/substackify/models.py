"""Public data models for the substackify SDK.

Two families of types live here:

* The **document tree** produced by the converter: a :class:`Document`
  root holding :data:`Block` nodes, whose text is made of :class:`TextRun`
  leaves carrying :data:`Mark` formatting.  Every node is a frozen
  dataclass and knows how to render itself as the Tiptap/ProseMirror JSON
  shape that Substack stores in ``draft_body`` via ``to_dict()``.
* The **result types** returned by :class:`SubstackifyClient` methods.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Audience(str, Enum):
    """Who can read a post once it is published."""

    EVERYONE = "everyone"
    ONLY_PAID = "only_paid"
    FOUNDING = "founding"
    ONLY_FREE = "only_free"


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Strong:
    """Bold text."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "strong"}


@dataclass(frozen=True)
class Emphasis:
    """Italic text."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "em"}


@dataclass(frozen=True)
class Link:
    """Hyperlink to *href*."""

    href: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "link", "attrs": {"href": self.href}}


Mark = Union[Strong, Emphasis, Link]


# ---------------------------------------------------------------------------
# Inline leaves
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextRun:
    """A run of text sharing one flat set of marks.

    Attributes
    ----------
    text:
        The literal text of the run.
    marks:
        Formatting applied to the whole run.  Duplicates are dropped on
        construction, keeping first-seen order.  Empty means unstyled.
    """

    text: str
    marks: tuple[Mark, ...] = ()

    def __post_init__(self) -> None:
        unique = tuple(dict.fromkeys(self.marks))
        object.__setattr__(self, "marks", unique)

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "text", "text": self.text}
        if self.marks:
            node["marks"] = [mark.to_dict() for mark in self.marks]
        return node


def _content(runs: tuple[TextRun, ...]) -> list[dict[str, Any]]:
    return [run.to_dict() for run in runs]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Paragraph:
    content: tuple[TextRun, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "paragraph", "content": _content(self.content)}


@dataclass(frozen=True)
class Heading:
    """Section heading; *level* is 1 through 6."""

    level: int
    content: tuple[TextRun, ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"heading level must be between 1 and 6, got {self.level}")
        object.__setattr__(self, "content", tuple(self.content))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "heading",
            "attrs": {"level": self.level},
            "content": _content(self.content),
        }


@dataclass(frozen=True)
class ListItem:
    """A list entry wrapping exactly one paragraph."""

    paragraph: Paragraph

    def to_dict(self) -> dict[str, Any]:
        return {"type": "list_item", "content": [self.paragraph.to_dict()]}


@dataclass(frozen=True)
class BulletList:
    items: tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "bullet_list",
            "content": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class OrderedList:
    items: tuple[ListItem, ...] = ()
    start: int = 1

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError(f"ordered list start must be >= 1, got {self.start}")
        object.__setattr__(self, "items", tuple(self.items))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "ordered_list",
            "attrs": {"start": self.start},
            "content": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class HorizontalRule:
    def to_dict(self) -> dict[str, Any]:
        return {"type": "horizontal_rule"}


Block = Union[Heading, Paragraph, BulletList, OrderedList, HorizontalRule]


@dataclass(frozen=True)
class Document:
    """Root of a converted document.

    Attributes
    ----------
    content:
        Top-level blocks in source order.
    """

    content: tuple[Block, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "doc", "content": [block.to_dict() for block in self.content]}

    def to_json(self) -> str:
        """Compact JSON string, the form Substack expects in ``draft_body``."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


# ---------------------------------------------------------------------------
# Public result types (returned from client methods)
# ---------------------------------------------------------------------------

@dataclass
class DraftResult:
    """Result of :meth:`SubstackifyClient.create_draft_post`.

    Attributes
    ----------
    id:
        The id of the newly created draft.
    title:
        The draft title as echoed back by Substack.
    edit_url:
        Dashboard URL for editing the draft.
    """

    id: int | str | None
    title: str | None
    edit_url: str


@dataclass
class PublishResult:
    """Result of :meth:`SubstackifyClient.publish_draft`."""

    id: int | str
    url: str
    email_sent: bool


@dataclass
class DraftSummary:
    """One entry of :meth:`SubstackifyClient.list_drafts`."""

    id: int | str | None
    title: str | None
    subtitle: str
    updated_at: str | None
    audience: str | None
    edit_url: str


@dataclass
class PostSummary:
    """One entry of :meth:`SubstackifyClient.list_posts`."""

    id: int | str | None
    title: str | None
    subtitle: str
    slug: str | None
    url: str
    publish_date: str | None
    audience: str | None
    likes: int = 0
    comments: int = 0


@dataclass
class PostDetail:
    """Result of :meth:`SubstackifyClient.get_post`.

    ``status`` is ``"draft"`` when the record carries a draft title and
    ``"published"`` otherwise.
    """

    id: int | str | None
    title: str | None
    subtitle: str
    audience: str | None
    status: str
    url: str
    created_at: str | None
    updated_at: str | None
    word_count: int | None
    likes: int = 0
    comments: int = 0
    raw: dict[str, Any] = field(default_factory=dict, repr=False)
