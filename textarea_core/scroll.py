"""How to scroll a text area."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


def _as_i16(n: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return (n + (1 << 15)) % (1 << 16) - (1 << 15)


class ScrollKind(enum.Enum):
    """Kinds of scrolling. The values are the names used in JSON."""

    DELTA = "Delta"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    HALF_PAGE_DOWN = "HalfPageDown"
    HALF_PAGE_UP = "HalfPageUp"


@dataclass(frozen=True)
class Scrolling:
    """A scroll request. For ``DELTA``, positive rows and cols scroll down and right."""

    kind: ScrollKind
    rows: int = 0
    cols: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ScrollKind):
            raise TypeError(f"scroll kind must be a ScrollKind: {self.kind!r}")
        if self.kind is ScrollKind.DELTA:
            for name, amount in (("rows", self.rows), ("cols", self.cols)):
                if (
                    not isinstance(amount, int)
                    or isinstance(amount, bool)
                    or not _I16_MIN <= amount <= _I16_MAX
                ):
                    raise ValueError(f"{name} must be a 16-bit signed integer: {amount!r}")
        elif self.rows or self.cols:
            raise ValueError(f"{self.kind.value} scrolling takes no amounts")

    @classmethod
    def delta(cls, rows: int, cols: int) -> Scrolling:
        """Scroll by ``rows`` vertically and ``cols`` horizontally."""
        return cls(ScrollKind.DELTA, rows, cols)

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Scrolling:
        """Make a delta scroll from a ``(rows, cols)`` pair."""
        rows, cols = pair
        return cls.delta(rows, cols)

    def deltas(self, height: int, wrap_enabled: bool) -> tuple[int, int]:
        """Return the ``(rows, cols)`` to scroll for a viewport ``height`` rows tall.

        Horizontal scrolling is dropped when lines are wrapped.
        """
        if self.kind is ScrollKind.DELTA:
            return (self.rows, 0 if wrap_enabled else self.cols)
        h = _as_i16(height)
        if self.kind is ScrollKind.PAGE_DOWN:
            rows = h
        elif self.kind is ScrollKind.PAGE_UP:
            rows = _as_i16(-h)
        elif self.kind is ScrollKind.HALF_PAGE_DOWN:
            rows = int(h / 2)
        else:
            rows = int(_as_i16(-h) / 2)
        return (rows, 0)

    def _to_obj(self) -> Any:
        if self.kind is ScrollKind.DELTA:
            return {"Delta": {"rows": self.rows, "cols": self.cols}}
        return self.kind.value

    def to_json(self) -> str:
        """Serialize the scroll request to compact JSON."""
        return json.dumps(self._to_obj(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> Scrolling:
        """Parse a scroll request from JSON; raises ``ValueError`` if invalid."""
        obj = json.loads(text)
        if isinstance(obj, str):
            try:
                kind = ScrollKind(obj)
            except ValueError:
                raise ValueError(f"unknown scrolling: {obj!r}") from None
            if kind is ScrollKind.DELTA:
                raise ValueError("Delta scrolling needs rows and cols")
            return cls(kind)
        if isinstance(obj, dict) and list(obj) == ["Delta"]:
            body = obj["Delta"]
            if not isinstance(body, dict) or set(body) != {"rows", "cols"}:
                raise ValueError(f"invalid Delta scrolling: {body!r}")
            return cls.delta(body["rows"], body["cols"])
        raise ValueError(f"invalid scrolling: {obj!r}")