"""Markdown-ish text to Substack document conversion.

Public API:

- :func:`text_to_doc` -- text -> :class:`~substackify.models.Document`.
- :class:`MarkdownToDocConverter` -- configurable form of the same pipeline.
- :func:`parse_blocks` -- text -> list of block nodes.
- :func:`parse_inline` -- one line -> list of text runs.
"""

from substackify.converter.blocks import parse_blocks
from substackify.converter.inline import parse_inline
from substackify.converter.md_to_doc import MarkdownToDocConverter, text_to_doc

__all__ = [
    "MarkdownToDocConverter",
    "parse_blocks",
    "parse_inline",
    "text_to_doc",
]
