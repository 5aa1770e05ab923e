"""Building blocks for a terminal multi-line text editor: styles, line highlighting, undo history, search, key input and scrolling."""

__version__ = "0.7.0"
__all__ = ["highlight", "history", "input", "scroll", "search", "style"]