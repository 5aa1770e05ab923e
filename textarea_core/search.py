"""Regular expression search over the lines of a text area."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from .style import Color, Style


class Search:
    """A search pattern with its highlight style.

    Positions are ``(row, col)`` pairs of character indices.
    """

    def __init__(self, style: Style | None = None) -> None:
        self.pat: re.Pattern[str] | None = None
        self.style = style if style is not None else Style().with_bg(Color.BLUE)

    def matches(self, line: str) -> Iterator[tuple[int, int]] | None:
        """Iterate ``(start, end)`` of matches in ``line``, or ``None`` without a pattern."""
        if self.pat is None:
            return None
        return ((m.start(), m.end()) for m in self.pat.finditer(line))

    def set_pattern(self, query: str) -> None:
        """Set the pattern; an empty query clears it. Raises ``re.error`` if invalid."""
        if self.pat is not None and self.pat.pattern == query:
            return
        if not query:
            self.pat = None
        else:
            self.pat = re.compile(query)

    def forward(
        self, lines: Sequence[str], cursor: tuple[int, int], match_cursor: bool
    ) -> tuple[int, int] | None:
        """Find the next match after the cursor, wrapping around the text."""
        pat = self.pat
        if pat is None:
            return None
        row, col = cursor
        current = lines[row]

        start_col = col if match_cursor else col + 1
        if start_col < len(current):
            m = pat.search(current, start_col)
            if m:
                return (row, m.start())

        for i, line in enumerate(lines[row + 1 :], start=row + 1):
            m = pat.search(line)
            if m:
                return (i, m.start())

        for i, line in enumerate(lines[:row]):
            m = pat.search(line)
            if m:
                return (i, m.start())

        m = pat.search(current)
        if m and m.start() <= min(col, len(current)):
            return (row, m.start())
        return None

    def back(
        self, lines: Sequence[str], cursor: tuple[int, int], match_cursor: bool
    ) -> tuple[int, int] | None:
        """Find the previous match before the cursor, wrapping around the text."""
        pat = self.pat
        if pat is None:
            return None
        row, col = cursor
        current = lines[row]

        if col > 0 or match_cursor:
            start_col = col if match_cursor else col - 1
            if start_col < len(current):
                starts = [
                    m.start() for m in pat.finditer(current) if m.start() <= start_col
                ]
                if starts:
                    return (row, starts[-1])

        for i in range(row - 1, -1, -1):
            found = _last_start(pat, lines[i])
            if found is not None:
                return (i, found)

        for i in range(len(lines) - 1, row, -1):
            found = _last_start(pat, lines[i])
            if found is not None:
                return (i, found)

        if col < len(current):
            found = _last_start(pat, current)
            if found is not None and found >= col:
                return (row, found)
        return None


def _last_start(pat: re.Pattern[str], line: str) -> int | None:
    last = None
    for m in pat.finditer(line):
        last = m.start()
    return last