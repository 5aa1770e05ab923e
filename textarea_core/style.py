"""Terminal text styles and styled text spans."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class Color(enum.Enum):
    """Named terminal colors."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


@dataclass(frozen=True)
class Style:
    """Foreground and background colors of a piece of text; ``None`` means unset."""

    fg: Color | None = None
    bg: Color | None = None

    def with_fg(self, color: Color | None) -> Style:
        """Return a copy of this style with the given foreground color."""
        return replace(self, fg=color)

    def with_bg(self, color: Color | None) -> Style:
        """Return a copy of this style with the given background color."""
        return replace(self, bg=color)


@dataclass(frozen=True)
class Span:
    """A run of text drawn with a single style."""

    content: str
    style: Style = field(default_factory=Style)