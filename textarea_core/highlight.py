"""Splitting a line of text into styled spans for display."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from wcwidth import wcwidth

from .style import Span, Style


class _Boundary(enum.IntEnum):
    """Kinds of highlight boundaries, ranked by priority at equal offsets."""

    END = 0
    SELECT = 1
    SEARCH = 2
    CURSOR = 3


def _char_width(c: str) -> int:
    width = wcwidth(c)
    return width if width > 0 else 0


class DisplayTextBuilder:
    """Turns raw text into display text, expanding tabs or masking characters.

    ``width`` is the display column reached so far; tabs are expanded relative to it.
    """

    def __init__(self, tab_len: int, mask: str | None) -> None:
        self.tab_len = tab_len
        self.width = 0
        self.mask = mask

    def build(self, s: str) -> str:
        """Return the display form of ``s`` and advance ``width``."""
        if self.mask is not None:
            # Masked text has a fixed width per character, so width is not tracked.
            return self.mask * len(s)

        buf = ""
        for i, c in enumerate(s):
            if c == "\t":
                if not buf:
                    buf = s[:i]
                if self.tab_len > 0:
                    pad = self.tab_len - (self.width % self.tab_len)
                    buf += " " * pad
                    self.width += pad
            else:
                if buf:
                    buf += c
                self.width += _char_width(c)

        return buf if buf else s


class LineHighlighter:
    """Collects highlights for one line and renders it into styled spans."""

    def __init__(
        self,
        line: str,
        cursor_style: Style,
        tab_len: int,
        mask: str | None,
        select_style: Style,
    ) -> None:
        self._line = line
        self._spans: list[Span] = []
        self._boundaries: list[tuple[int, _Boundary, Style | None]] = []
        self._style_begin = Style()
        self._cursor_at_end = False
        self._cursor_style = cursor_style
        self._tab_len = tab_len
        self._mask = mask
        self._select_at_end = False
        self._select_style = select_style

    def line_number(self, row: int, lnum_len: int, style: Style) -> None:
        """Prefix the line with its right-aligned 1-based number."""
        number = str(row + 1)
        pad = " " * max(lnum_len - len(number) + 1, 0)
        self._spans.append(Span(f"{pad}{number} ", style))

    def cursor_line(self, cursor_col: int, style: Style) -> None:
        """Mark this line as the cursor line with the cursor at ``cursor_col``."""
        if cursor_col < len(self._line):
            self._boundaries.append((cursor_col, _Boundary.CURSOR, self._cursor_style))
            self._boundaries.append((cursor_col + 1, _Boundary.END, None))
        else:
            self._cursor_at_end = True
        self._style_begin = style

    def search(self, matches: Iterable[tuple[int, int]], style: Style) -> None:
        """Highlight the non-empty ``(start, end)`` character ranges in ``matches``."""
        for start, end in matches:
            if start != end:
                self._boundaries.append((start, _Boundary.SEARCH, style))
                self._boundaries.append((end, _Boundary.END, None))

    def selection(
        self,
        current_row: int,
        start_row: int,
        start_off: int,
        end_row: int,
        end_off: int,
    ) -> None:
        """Highlight the part of this line covered by a selection."""
        line_len = len(self._line)
        if current_row == start_row:
            if start_row == end_row:
                start, end = start_off, end_off
            else:
                self._select_at_end = True
                start, end = start_off, line_len
        elif current_row == end_row:
            start, end = 0, end_off
        elif start_row < current_row < end_row:
            self._select_at_end = True
            start, end = 0, line_len
        else:
            return
        if start != end:
            self._boundaries.append((start, _Boundary.SELECT, self._select_style))
            self._boundaries.append((end, _Boundary.END, None))

    def _tail(self) -> list[Span]:
        if self._cursor_at_end:
            return [Span(" ", self._cursor_style)]
        if self._select_at_end:
            return [Span(" ", self._select_style)]
        return []

    def into_spans(self) -> list[Span]:
        """Render the line into a list of styled spans."""
        line = self._line
        spans = list(self._spans)
        builder = DisplayTextBuilder(self._tab_len, self._mask)

        if not self._boundaries:
            built = builder.build(line)
            if built:
                spans.append(Span(built, self._style_begin))
            spans.extend(self._tail())
            return spans

        style = self._style_begin
        start = 0
        stack: list[Style] = []
        for offset, kind, boundary_style in sorted(
            self._boundaries, key=lambda b: (b[0], b[1])
        ):
            if start < offset:
                spans.append(Span(builder.build(line[start:offset]), style))
            if boundary_style is None:
                style = stack.pop() if stack else self._style_begin
            else:
                stack.append(style)
                style = boundary_style
            start = offset

        if start != len(line):
            spans.append(Span(builder.build(line[start:]), style))

        spans.extend(self._tail())
        return spans


def extract_segment_spans(
    spans: Iterable[Span], segment_start_char: int, segment_end_char: int
) -> list[Span]:
    """Return the parts of ``spans`` that fall within a character range."""
    result: list[Span] = []
    pos = 0
    for span in spans:
        span_len = len(span.content)
        span_end = pos + span_len
        if span_end <= segment_start_char:
            pos = span_end
            continue
        if pos >= segment_end_char:
            break
        lo = max(segment_start_char - pos, 0)
        hi = min(segment_end_char - pos, span_len)
        if lo < hi:
            result.append(Span(span.content[lo:hi], span.style))
        pos = span_end
    return result