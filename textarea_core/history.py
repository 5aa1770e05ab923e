"""Undo and redo history of text edits."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Union

Payload = Union[str, list, None]


@dataclass(frozen=True)
class Pos:
    """A cursor position: row, character column and offset into the line."""

    row: int
    col: int
    offset: int


class EditKind(enum.Enum):
    """Kinds of primitive edits that can be applied and reverted."""

    INSERT_CHAR = "insert_char"
    DELETE_CHAR = "delete_char"
    INSERT_NEWLINE = "insert_newline"
    DELETE_NEWLINE = "delete_newline"
    INSERT_STR = "insert_str"
    DELETE_STR = "delete_str"
    INSERT_CHUNK = "insert_chunk"
    DELETE_CHUNK = "delete_chunk"

    def invert(self) -> EditKind:
        """Return the kind of edit that reverts this one."""
        return _INVERSES[self]


_INVERSES = {
    EditKind.INSERT_CHAR: EditKind.DELETE_CHAR,
    EditKind.DELETE_CHAR: EditKind.INSERT_CHAR,
    EditKind.INSERT_NEWLINE: EditKind.DELETE_NEWLINE,
    EditKind.DELETE_NEWLINE: EditKind.INSERT_NEWLINE,
    EditKind.INSERT_STR: EditKind.DELETE_STR,
    EditKind.DELETE_STR: EditKind.INSERT_STR,
    EditKind.INSERT_CHUNK: EditKind.DELETE_CHUNK,
    EditKind.DELETE_CHUNK: EditKind.INSERT_CHUNK,
}


def _check_chunk(chunk: list[str]) -> None:
    if len(chunk) <= 1:
        raise ValueError(f"chunk size must be > 1: {chunk!r}")


def apply_edit(
    kind: EditKind, payload: Payload, lines: list[str], before: Pos, after: Pos
) -> None:
    """Apply one edit to ``lines`` in place."""
    if kind is EditKind.INSERT_CHAR or kind is EditKind.INSERT_STR:
        line = lines[before.row]
        lines[before.row] = line[: before.offset] + payload + line[before.offset :]
    elif kind is EditKind.DELETE_CHAR:
        line = lines[before.row]
        lines[before.row] = line[: after.offset] + line[after.offset + 1 :]
    elif kind is EditKind.INSERT_NEWLINE:
        line = lines[before.row]
        lines[before.row] = line[: before.offset]
        lines.insert(before.row + 1, line[before.offset :])
    elif kind is EditKind.DELETE_NEWLINE:
        if before.row <= 0:
            raise ValueError(f"invalid position: {before!r}")
        line = lines.pop(before.row)
        lines[before.row - 1] += line
    elif kind is EditKind.DELETE_STR:
        line = lines[after.row]
        lines[after.row] = line[: after.offset] + line[after.offset + len(payload) :]
    elif kind is EditKind.INSERT_CHUNK:
        chunk = list(payload)
        _check_chunk(chunk)
        first = lines[before.row]
        tail = first[before.offset :]
        lines[before.row] = first[: before.offset] + chunk[0]
        next_row = before.row + 1
        lines.insert(next_row, chunk[-1] + tail)
        lines[next_row:next_row] = chunk[1:-1]
    elif kind is EditKind.DELETE_CHUNK:
        chunk = list(payload)
        _check_chunk(chunk)
        end = after.row + len(chunk)
        last_line = lines[end - 1]
        del lines[after.row + 1 : end]
        rest = last_line[len(chunk[-1]) :]
        lines[after.row] = lines[after.row][: after.offset] + rest
    else:
        raise ValueError(f"unknown edit kind: {kind!r}")


@dataclass(frozen=True)
class Edit:
    """An edit together with the cursor positions before and after it."""

    kind: EditKind
    payload: Payload
    before: Pos
    after: Pos

    def redo(self, lines: list[str]) -> None:
        """Apply the edit to ``lines``."""
        apply_edit(self.kind, self.payload, lines, self.before, self.after)

    def undo(self, lines: list[str]) -> None:
        """Revert the edit on ``lines``."""
        apply_edit(self.kind.invert(), self.payload, lines, self.after, self.before)

    def cursor_before(self) -> tuple[int, int]:
        """Cursor ``(row, col)`` before the edit."""
        return (self.before.row, self.before.col)

    def cursor_after(self) -> tuple[int, int]:
        """Cursor ``(row, col)`` after the edit."""
        return (self.after.row, self.after.col)


class History:
    """A bounded list of edits with a position for undo and redo."""

    def __init__(self, max_items: int) -> None:
        self._index = 0
        self._max_items = max_items
        self._edits: deque[Edit] = deque()

    @property
    def max_items(self) -> int:
        """The most edits kept; zero disables the history."""
        return self._max_items

    def push(self, edit: Edit) -> None:
        """Record an edit, dropping any edits that were undone."""
        if self._max_items == 0:
            return
        if len(self._edits) == self._max_items:
            self._edits.popleft()
            self._index = max(self._index - 1, 0)
        while len(self._edits) > self._index:
            self._edits.pop()
        self._index += 1
        self._edits.append(edit)

    def redo(self, lines: list[str]) -> tuple[int, int] | None:
        """Reapply the next undone edit; return the new cursor or ``None``."""
        if self._index == len(self._edits):
            return None
        edit = self._edits[self._index]
        edit.redo(lines)
        self._index += 1
        return edit.cursor_after()

    def undo(self, lines: list[str]) -> tuple[int, int] | None:
        """Revert the last edit; return the new cursor or ``None``."""
        if self._index == 0:
            return None
        self._index -= 1
        edit = self._edits[self._index]
        edit.undo(lines)
        return edit.cursor_before()