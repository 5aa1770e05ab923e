import pytest
from wcwidth import wcswidth

from textarea_core.highlight import (
    DisplayTextBuilder,
    LineHighlighter,
    extract_segment_spans,
)
from textarea_core.style import Color, Span, Style

DEFAULT = Style()
CUR = Style(bg=Color.RED)
SEARCH = Style(bg=Color.GREEN)
SEL = Style(bg=Color.BLUE)
LINE = Style(bg=Color.GRAY)
LNUM = Style(bg=Color.YELLOW)


def build(text, tab, mask):
    return DisplayTextBuilder(tab, mask).build(text)


def build_with_offset(offset, text, tab):
    b = DisplayTextBuilder(tab, None)
    b.width = offset
    built = b.build(text)
    assert b.width == offset + wcswidth(built)
    return built


@pytest.mark.parametrize(
    "text,tab,mask,want",
    [
        ("", 0, None, ""),
        ("", 4, None, ""),
        ("", 8, None, ""),
        ("", 0, "x", ""),
        ("", 4, "x", ""),
        ("", 8, "x", ""),
        ("a", 0, None, "a"),
        ("a", 4, None, "a"),
        ("a", 8, None, "a"),
        ("a", 0, "x", "x"),
        ("a", 4, "x", "x"),
        ("a", 8, "x", "x"),
        ("a\t", 0, None, "a"),
        ("a\t", 4, None, "a   "),
        ("a\t", 8, None, "a       "),
        ("a\t", 0, "x", "xx"),
        ("a\t", 4, "x", "xx"),
        ("a\t", 8, "x", "xx"),
        ("\t", 0, None, "\t"),
        ("\t", 4, None, "    "),
        ("\t", 8, None, "        "),
        ("\t", 0, "x", "x"),
        ("\t", 4, "x", "x"),
        ("\t", 8, "x", "x"),
        ("a\tb", 0, None, "ab"),
        ("a\tb", 4, None, "a   b"),
        ("a\tb", 8, None, "a       b"),
        ("a\tb", 0, "x", "xxx"),
        ("a\tb", 4, "x", "xxx"),
        ("a\tb", 8, "x", "xxx"),
        ("a\t\tb", 0, None, "ab"),
        ("a\t\tb", 4, None, "a       b"),
        ("a\t\tb", 8, None, "a               b"),
        ("a\t\tb", 0, "x", "xxxx"),
        ("a\t\tb", 4, "x", "xxxx"),
        ("a\t\tb", 8, "x", "xxxx"),
        ("a\tb\tc", 0, None, "abc"),
        ("a\tb\tc", 4, None, "a   b   c"),
        ("a\tb\tc", 8, None, "a       b       c"),
        ("a\tb\tc", 0, "x", "xxxxx"),
        ("a\tb\tc", 4, "x", "xxxxx"),
        ("a\tb\tc", 8, "x", "xxxxx"),
        ("ab\t\t", 0, None, "ab"),
        ("ab\t\t", 4, None, "ab      "),
        ("ab\t\t", 8, None, "ab              "),
        ("abcd\t", 4, None, "abcd    "),
        ("あ\t", 0, None, "あ"),
        ("あ\t", 4, None, "あ  "),
        ("🐶\t", 4, None, "🐶  "),
        ("あ\t", 4, "x", "xx"),
    ],
)
def test_line_display_text(text, tab, mask, want):
    assert build(text, tab, mask) == want


@pytest.mark.parametrize(
    "offset,text,tab,want",
    [
        (1, "", 0, ""),
        (1, "a", 0, "a"),
        (1, "あ", 0, "あ"),
        (1, "\t", 4, "   "),
        (1, "a\t", 4, "a  "),
        (1, "あ\t", 4, "あ "),
        (2, "\t", 4, "  "),
        (2, "a\t", 4, "a "),
        (2, "あ\t", 4, "あ    "),
        (3, "a\t", 4, "a    "),
        (4, "\t", 4, "    "),
        (4, "a\t", 4, "a   "),
        (4, "あ\t", 4, "あ  "),
        (5, "\t", 4, "   "),
        (5, "a\t", 4, "a  "),
        (5, "あ\t", 4, "あ "),
        (2, "\t\t", 4, "      "),
        (2, "a\ta\t", 4, "a a   "),
        (1, "あ\tあ\t", 4, "あ あ  "),
        (2, "あ\tあ\t", 4, "あ    あ  "),
    ],
)
def test_line_display_text_with_offset(offset, text, tab, want):
    assert build_with_offset(offset, text, tab) == want


def spans_of(lh):
    return [(s.content, s.style) for s in lh.into_spans()]


@pytest.mark.parametrize(
    "line,want",
    [
        ("", []),
        ("abc", [("abc", DEFAULT)]),
        ("a\tb\tc", [("a   b   c", DEFAULT)]),
    ],
)
def test_into_spans_normal_line(line, want):
    lh = LineHighlighter(line, CUR, 4, None, SEL)
    assert spans_of(lh) == want


@pytest.mark.parametrize(
    "line,col,want",
    [
        ("", 0, [(" ", CUR)]),
        ("a", 0, [("a", CUR)]),
        ("a", 1, [("a", LINE), (" ", CUR)]),
        ("あいう", 0, [("あ", CUR), ("いう", LINE)]),
        ("あいう", 1, [("あ", LINE), ("い", CUR), ("う", LINE)]),
        ("あいう", 2, [("あい", LINE), ("う", CUR)]),
        ("a\tb", 1, [("a", LINE), ("   ", CUR), ("b", LINE)]),
    ],
)
def test_into_spans_cursor_line(line, col, want):
    lh = LineHighlighter(line, CUR, 4, None, SEL)
    lh.cursor_line(col, LINE)
    assert spans_of(lh) == want


@pytest.mark.parametrize(
    "row,length,want",
    [
        (0, 1, [(" 1 ", LNUM)]),
        (123, 3, [(" 124 ", LNUM)]),
        (123, 5, [("   124 ", LNUM)]),
    ],
)
def test_into_spans_line_number(row, length, want):
    lh = LineHighlighter("", CUR, 4, None, SEL)
    lh.line_number(row, length, LNUM)
    assert spans_of(lh) == want


@pytest.mark.parametrize(
    "line,matches,want",
    [
        ("abcde", [(0, 5)], [("abcde", SEARCH)]),
        (
            "abcde",
            [(0, 1), (2, 3), (4, 5)],
            [("a", SEARCH), ("b", DEFAULT), ("c", SEARCH), ("d", DEFAULT), ("e", SEARCH)],
        ),
        (
            "abcde",
            [(1, 2), (3, 4)],
            [("a", DEFAULT), ("b", SEARCH), ("c", DEFAULT), ("d", SEARCH), ("e", DEFAULT)],
        ),
        (
            "abcde",
            [(0, 2), (2, 4), (4, 5)],
            [("ab", SEARCH), ("cd", SEARCH), ("e", SEARCH)],
        ),
        ("abcde", [(1, 1)], [("abcde", DEFAULT)]),
        (
            "あいうえお",
            [(0, 1), (2, 3), (4, 5)],
            [("あ", SEARCH), ("い", DEFAULT), ("う", SEARCH), ("え", DEFAULT), ("お", SEARCH)],
        ),
        (
            "\ta\tb\t",
            [(0, 1), (2, 3), (3, 4)],
            [("    ", SEARCH), ("a", DEFAULT), ("   ", SEARCH), ("b", SEARCH), ("   ", DEFAULT)],
        ),
    ],
)
def test_into_spans_search(line, matches, want):
    lh = LineHighlighter(line, CUR, 4, None, SEL)
    lh.search(iter(matches), SEARCH)
    assert spans_of(lh) == want


@pytest.mark.parametrize(
    "line,sel,want",
    [
        ("abc", (0, 1, 0, 2, 0), [("abc", DEFAULT)]),
        ("abc", (1, 1, 0, 1, 1), [("a", SEL), ("bc", DEFAULT)]),
        ("abc", (1, 1, 2, 1, 3), [("ab", DEFAULT), ("c", SEL)]),
        ("abc", (1, 1, 0, 1, 3), [("abc", SEL)]),
        ("abc", (1, 1, 0, 2, 0), [("abc", SEL), (" ", SEL)]),
        ("abc", (1, 1, 2, 2, 0), [("ab", DEFAULT), ("c", SEL), (" ", SEL)]),
        ("abc", (1, 1, 3, 2, 0), [("abc", DEFAULT), (" ", SEL)]),
        ("abc", (2, 1, 0, 3, 0), [("abc", SEL), (" ", SEL)]),
        ("abc", (2, 1, 0, 2, 0), [("abc", DEFAULT)]),
        ("abc", (2, 1, 0, 2, 2), [("ab", SEL), ("c", DEFAULT)]),
        ("abc", (2, 1, 0, 2, 3), [("abc", SEL)]),
        ("ab\t", (1, 1, 2, 2, 0), [("ab", DEFAULT), ("  ", SEL), (" ", SEL)]),
        ("a\tb", (2, 1, 0, 3, 0), [("a   b", SEL), (" ", SEL)]),
        ("a\tb", (2, 1, 0, 2, 2), [("a   ", SEL), ("b", DEFAULT)]),
    ],
)
def test_into_spans_selection(line, sel, want):
    lh = LineHighlighter(line, CUR, 4, None, SEL)
    lh.selection(*sel)
    assert spans_of(lh) == want


def _cursor_on_selection():
    lh = LineHighlighter("abcde", CUR, 4, None, SEL)
    lh.cursor_line(2, LINE)
    lh.selection(0, 0, 1, 0, 4)
    return lh


def _cursor_selection_search():
    lh = LineHighlighter("abcdefg", CUR, 4, None, SEL)
    lh.cursor_line(3, LINE)
    lh.selection(0, 0, 2, 0, 5)
    lh.search([(1, 2), (5, 6)], SEARCH)
    return lh


def _selection_cursor_at_end():
    lh = LineHighlighter("ab", CUR, 4, None, SEL)
    lh.cursor_line(2, LINE)
    lh.selection(0, 0, 1, 2, 0)
    return lh


def _cursor_at_start_of_selection():
    lh = LineHighlighter("abcd", CUR, 4, None, SEL)
    lh.cursor_line(1, LINE)
    lh.selection(0, 0, 1, 0, 3)
    return lh


def _cursor_at_end_of_selection():
    lh = LineHighlighter("abcd", CUR, 4, None, SEL)
    lh.cursor_line(2, LINE)
    lh.selection(0, 0, 1, 0, 3)
    return lh


def _cursor_covers_selection():
    lh = LineHighlighter("abc", CUR, 4, None, SEL)
    lh.cursor_line(1, LINE)
    lh.selection(0, 0, 1, 0, 2)
    return lh


@pytest.mark.parametrize(
    "make,want",
    [
        (
            _cursor_on_selection,
            [("a", LINE), ("b", SEL), ("c", CUR), ("d", SEL), ("e", LINE)],
        ),
        (
            _cursor_selection_search,
            [
                ("a", LINE),
                ("b", SEARCH),
                ("c", SEL),
                ("d", CUR),
                ("e", SEL),
                ("f", SEARCH),
                ("g", LINE),
            ],
        ),
        (_selection_cursor_at_end, [("a", LINE), ("b", SEL), (" ", CUR)]),
        (_cursor_at_start_of_selection, [("a", LINE), ("b", CUR), ("c", SEL), ("d", LINE)]),
        (_cursor_at_end_of_selection, [("a", LINE), ("b", SEL), ("c", CUR), ("d", LINE)]),
        (_cursor_covers_selection, [("a", LINE), ("b", CUR), ("c", LINE)]),
    ],
)
def test_into_spans_mixed_highlights(make, want):
    assert spans_of(make()) == want


def test_masked_line_keeps_highlights():
    lh = LineHighlighter("abc", CUR, 4, "*", SEL)
    lh.cursor_line(1, LINE)
    assert spans_of(lh) == [("*", LINE), ("*", CUR), ("*", LINE)]


def test_extract_segment_spans_middle():
    spans = [Span("ab", SEL), Span("cde", CUR)]
    assert extract_segment_spans(spans, 1, 4) == [Span("b", SEL), Span("cd", CUR)]


def test_extract_segment_spans_full_range_is_identity():
    spans = [Span("ab", SEL), Span("cde", CUR), Span("f", LINE)]
    assert extract_segment_spans(spans, 0, 6) == spans


def test_extract_segment_spans_concatenation_matches_slice():
    spans = [Span("あい", SEL), Span("うえお", CUR)]
    text = "".join(s.content for s in spans)
    for start in range(len(text) + 1):
        for end in range(start, len(text) + 1):
            got = extract_segment_spans(spans, start, end)
            assert "".join(s.content for s in got) == text[start:end]


def test_extract_segment_spans_empty_range():
    spans = [Span("abc", SEL)]
    assert extract_segment_spans(spans, 2, 2) == []