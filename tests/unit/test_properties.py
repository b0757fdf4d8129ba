"""Property-based tests for the converter using Hypothesis.

These verify invariants of :func:`parse_inline` and :func:`parse_blocks`
over a wide range of generated lines.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from substackify.converter.blocks import parse_blocks
from substackify.converter.inline import iter_spans, next_span, parse_inline
from substackify.models import (
    BulletList,
    Emphasis,
    Heading,
    HorizontalRule,
    Link,
    OrderedList,
    Paragraph,
    Strong,
    TextRun,
)

# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

# Single-line text biased towards markup characters.
_line_st = st.text(
    alphabet=st.sampled_from(list("ab *[]()#-.1 "))
    | st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r"),
    max_size=60,
)

# Without ``*`` or ``[`` no span can open.
_plain_line_st = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r*["),
    max_size=60,
)

_word_st = st.text(alphabet="abcdefghij XYZ", min_size=1, max_size=20).map(str.strip).filter(bool)


def _render(run: TextRun) -> str:
    """Write a run back as the markup that produced it."""
    if not run.marks:
        return run.text
    mark = run.marks[0]
    if isinstance(mark, Strong):
        return f"**{run.text}**"
    if isinstance(mark, Emphasis):
        return f"*{run.text}*"
    assert isinstance(mark, Link)
    return f"[{run.text}]({mark.href})"


def _count_spans(line: str) -> int:
    return sum(1 for _ in iter_spans(line))


# ---------------------------------------------------------------------------
# Inline parser
# ---------------------------------------------------------------------------

class TestInlineProperties:
    @given(line=_line_st)
    def test_rendering_runs_reproduces_line(self, line: str) -> None:
        assert "".join(_render(r) for r in parse_inline(line)) == line

    @given(line=_plain_line_st)
    def test_plain_text_is_one_unstyled_run(self, line: str) -> None:
        runs = parse_inline(line)
        assert runs == [TextRun(line)]

    @given(line=_line_st)
    def test_each_run_has_at_most_one_mark(self, line: str) -> None:
        for run in parse_inline(line):
            assert len(run.marks) <= 1

    @given(line=_line_st)
    def test_run_count_is_spans_plus_nonempty_gaps(self, line: str) -> None:
        runs = parse_inline(line)
        spans = _count_spans(line)
        gaps = sum(1 for r in runs if not r.marks)
        if spans == 0:
            assert len(runs) == 1
        else:
            assert len(runs) == spans + gaps
            assert all(r.text for r in runs if not r.marks)


# ---------------------------------------------------------------------------
# Block parser
# ---------------------------------------------------------------------------

class TestBlockProperties:
    @given(level=st.integers(min_value=1, max_value=6), text=_word_st)
    def test_heading_level_and_content(self, level: int, text: str) -> None:
        blocks = parse_blocks("#" * level + " " + text)
        assert blocks == [Heading(level=level, content=tuple(parse_inline(text)))]

    @given(items=st.lists(_word_st, min_size=1, max_size=20))
    def test_bullet_run_is_one_list(self, items: list[str]) -> None:
        blocks = parse_blocks("\n".join(f"- {t}" for t in items))
        assert len(blocks) == 1
        assert isinstance(blocks[0], BulletList)
        assert len(blocks[0].items) == len(items)
        for item, text in zip(blocks[0].items, items):
            assert isinstance(item.paragraph, Paragraph)
            assert item.paragraph.content == tuple(parse_inline(text))

    @given(numbers=st.lists(st.integers(min_value=0, max_value=999), min_size=1, max_size=10))
    def test_ordered_start_always_one(self, numbers: list[int]) -> None:
        blocks = parse_blocks("\n".join(f"{n}. item" for n in numbers))
        assert len(blocks) == 1
        assert isinstance(blocks[0], OrderedList)
        assert blocks[0].start == 1
        assert len(blocks[0].items) == len(numbers)

    @given(
        dashes=st.integers(min_value=3, max_value=40),
        left=st.sampled_from(["", " ", "\t", "   "]),
        right=st.sampled_from(["", " ", "\t", "   "]),
    )
    def test_dash_line_is_rule(self, dashes: int, left: str, right: str) -> None:
        assert parse_blocks(left + "-" * dashes + right) == [HorizontalRule()]

    @given(lines=st.lists(_line_st, max_size=15))
    def test_never_raises_and_no_blank_blocks(self, lines: list[str]) -> None:
        blocks = parse_blocks("\n".join(lines))
        non_blank = [line for line in lines if line.strip()]
        assert len(blocks) <= len(non_blank)
        for block in blocks:
            if isinstance(block, Paragraph):
                assert block.content


class TestSpanScanProperties:
    @given(line=_line_st)
    def test_cached_scan_matches_fresh_lookups(self, line: str) -> None:
        fresh = []
        pos = 0
        while (span := next_span(line, pos)) is not None:
            fresh.append(span)
            pos = span.end
        assert list(iter_spans(line)) == fresh
