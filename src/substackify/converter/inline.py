"""Parse one line of Markdown-ish text into :class:`TextRun` leaves.

Three span kinds are recognised:

* ``**bold**``          -> :class:`Strong`
* ``*italic*``          -> :class:`Emphasis`
* ``[label](target)``   -> :class:`Link` with ``href=target``

Spans never nest.  The span whose opening delimiter comes first wins; on a
tie, bold beats italic beats link.  The inner text of a span is kept
literally, so ``**a *b* c**`` yields one bold run ``"a *b* c"``.

Text between spans becomes unstyled runs.  A line with no spans becomes a
single unstyled run, even when the line is empty.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from substackify.models import Emphasis, Link, Mark, Strong, TextRun


class SpanKind(IntEnum):
    """Span kinds, ordered by tie-break priority (lowest wins)."""

    BOLD = 0
    ITALIC = 1
    LINK = 2


_SPAN_PATTERNS: dict[SpanKind, re.Pattern[str]] = {
    SpanKind.BOLD: re.compile(r"\*\*(.+?)\*\*"),
    SpanKind.ITALIC: re.compile(r"\*(.+?)\*"),
    SpanKind.LINK: re.compile(r"\[(.+?)\]\((.+?)\)"),
}


@dataclass(frozen=True)
class SpanCandidate:
    """The earliest match of one span kind at or after a scan position."""

    kind: SpanKind
    start: int
    end: int
    inner: str
    href: str | None = None

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.start, self.kind)

    def mark(self) -> Mark:
        if self.kind is SpanKind.BOLD:
            return Strong()
        if self.kind is SpanKind.ITALIC:
            return Emphasis()
        return Link(href=self.href or "")


def _search(kind: SpanKind, line: str, pos: int) -> SpanCandidate | None:
    m = _SPAN_PATTERNS[kind].search(line, pos)
    if m is None:
        return None
    return SpanCandidate(
        kind=kind,
        start=m.start(),
        end=m.end(),
        inner=m.group(1),
        href=m.group(2) if kind is SpanKind.LINK else None,
    )


def next_span(line: str, pos: int = 0) -> SpanCandidate | None:
    """Return the span that governs *line* from *pos* onward, or ``None``."""
    candidates = [c for c in (_search(kind, line, pos) for kind in SpanKind) if c is not None]
    if not candidates:
        return None
    return min(candidates, key=lambda c: c.sort_key)


def iter_spans(line: str) -> Iterator[SpanCandidate]:
    """Yield the non-overlapping spans of *line* from left to right.

    A kind's earliest match stays valid until the scan position passes its
    start, so each pattern is only searched again once its cached
    candidate has been overtaken.
    """
    cached: dict[SpanKind, SpanCandidate | None] = {
        kind: _search(kind, line, 0) for kind in SpanKind
    }
    pos = 0
    while True:
        for kind, candidate in cached.items():
            if candidate is not None and candidate.start < pos:
                cached[kind] = _search(kind, line, pos)
        live = [c for c in cached.values() if c is not None]
        if not live:
            return
        span = min(live, key=lambda c: c.sort_key)
        yield span
        pos = span.end


def parse_inline(line: str) -> list[TextRun]:
    """Convert a single line into an ordered list of text runs.

    Parameters
    ----------
    line:
        One line of input, without its line terminator.

    Returns
    -------
    list[TextRun]
        Runs covering the whole line with no gaps or overlaps.  Never
        empty.
    """
    runs: list[TextRun] = []
    pos = 0

    for span in iter_spans(line):
        if span.start > pos:
            runs.append(TextRun(line[pos:span.start]))
        runs.append(TextRun(span.inner, (span.mark(),)))
        pos = span.end

    if pos < len(line):
        runs.append(TextRun(line[pos:]))

    return runs or [TextRun(line)]
