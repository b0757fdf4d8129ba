"""substackify: Markdown-ish text to Substack documents, plus a publishing client.

Public re-exports
-----------------

* **Client:** :class:`SubstackifyClient`
* **Conversion:** :func:`text_to_doc`, :class:`MarkdownToDocConverter`
* **Configuration:** :class:`SubstackifyConfig`
* **Errors:** :class:`SubstackifyError` and its subclasses, :class:`ErrorCode`
* **Models:** the document tree nodes and the client result dataclasses

Usage::

    from substackify import text_to_doc

    doc = text_to_doc("# Hello\\n\\n**bold** and *italic*")
    doc.to_dict()
"""

from __future__ import annotations

# ── Client ─────────────────────────────────────────────────────────────
from substackify.client import SubstackifyClient

# ── Configuration ───────────────────────────────────────────────────────
from substackify.config import SubstackifyConfig

# ── Conversion ──────────────────────────────────────────────────────────
from substackify.converter import MarkdownToDocConverter, text_to_doc

# ── Errors ──────────────────────────────────────────────────────────────
from substackify.errors import (
    ErrorCode,
    SubstackifyAPIError,
    SubstackifyError,
    SubstackifyNetworkError,
)

# ── Models ──────────────────────────────────────────────────────────────
from substackify.models import (
    Audience,
    Block,
    BulletList,
    Document,
    DraftResult,
    DraftSummary,
    Emphasis,
    Heading,
    HorizontalRule,
    Link,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    PostDetail,
    PostSummary,
    PublishResult,
    Strong,
    TextRun,
)

__version__ = "0.1.0"

__all__ = [
    "Audience",
    "Block",
    "BulletList",
    "Document",
    "DraftResult",
    "DraftSummary",
    "Emphasis",
    "ErrorCode",
    "Heading",
    "HorizontalRule",
    "Link",
    "ListItem",
    "Mark",
    "MarkdownToDocConverter",
    "OrderedList",
    "Paragraph",
    "PostDetail",
    "PostSummary",
    "PublishResult",
    "Strong",
    "SubstackifyAPIError",
    "SubstackifyClient",
    "SubstackifyConfig",
    "SubstackifyError",
    "SubstackifyNetworkError",
    "TextRun",
    "__version__",
    "text_to_doc",
]
