"""Markdown-ish text to Substack document conversion.

:func:`text_to_doc` is the whole pipeline as a pure function:

1. **Blocks** -- :func:`parse_blocks` groups input lines into block nodes,
   delegating each block's text to :func:`parse_inline`.
2. **Assemble** -- the blocks are wrapped in a :class:`Document` root.

:class:`MarkdownToDocConverter` runs the same pipeline with a
:class:`SubstackifyConfig`, adding debug dumps, logging and metrics.
"""

from __future__ import annotations

import json
import sys

from substackify.config import SubstackifyConfig
from substackify.converter.blocks import parse_blocks
from substackify.models import Document
from substackify.observability import get_logger, resolve_metrics
from substackify.observability.metrics import BLOCKS_CONVERTED_TOTAL

log = get_logger("substackify.converter")


def text_to_doc(text: str) -> Document:
    """Convert *text* to a :class:`Document`.

    Examples
    --------
    >>> doc = text_to_doc("# Hello")
    >>> doc.to_dict()["content"][0]["attrs"]
    {'level': 1}
    """
    return Document(tuple(parse_blocks(text)))


class MarkdownToDocConverter:
    """Convert Markdown-ish text to Substack ``draft_body`` documents.

    Parameters
    ----------
    config:
        SDK configuration; only the debug and metrics settings are used.
    """

    def __init__(self, config: SubstackifyConfig | None = None) -> None:
        self._config = config or SubstackifyConfig()
        self._metrics = resolve_metrics(self._config.metrics)

    def convert(self, text: str) -> Document:
        doc = text_to_doc(text)

        self._metrics.increment(BLOCKS_CONVERTED_TOTAL, len(doc.content))
        log.debug(
            "text converted",
            extra={
                "extra_fields": {
                    "op": "convert",
                    "chars": len(text),
                    "blocks": len(doc.content),
                }
            },
        )

        if self._config.debug_dump_doc:
            print(
                "[substackify] Document:",
                json.dumps(doc.to_dict(), indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return doc
