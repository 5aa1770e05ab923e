"""Backend-independent key input types."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any, Union

KeyValue = Union[str, int, None]


class KeyCode(enum.Enum):
    """Kinds of key input. The values are the names used in JSON."""

    CHAR = "Char"
    F = "F"
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    TAB = "Tab"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    ESC = "Esc"
    COPY = "Copy"
    CUT = "Cut"
    PASTE = "Paste"
    MOUSE_SCROLL_DOWN = "MouseScrollDown"
    MOUSE_SCROLL_UP = "MouseScrollUp"
    NULL = "Null"


_WITH_VALUE = (KeyCode.CHAR, KeyCode.F)


@dataclass(frozen=True)
class Key:
    """A key: its kind and, for characters and function keys, the character or number.

    The default key is ``NULL``, an invalid input that is always ignored.
    """

    code: KeyCode = KeyCode.NULL
    value: KeyValue = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, KeyCode):
            raise TypeError(f"key code must be a KeyCode: {self.code!r}")
        if self.code is KeyCode.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"character key needs exactly one character: {self.value!r}")
        elif self.code is KeyCode.F:
            if (
                not isinstance(self.value, int)
                or isinstance(self.value, bool)
                or not 0 <= self.value <= 255
            ):
                raise ValueError(f"function key number must be in 0..=255: {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"{self.code.value} key takes no value: {self.value!r}")

    @classmethod
    def char(cls, c: str) -> Key:
        """A key that types the character ``c``."""
        return cls(KeyCode.CHAR, c)

    @classmethod
    def function(cls, n: int) -> Key:
        """The function key F``n``."""
        return cls(KeyCode.F, n)

    def _to_obj(self) -> Any:
        if self.code in _WITH_VALUE:
            return {self.code.value: self.value}
        return self.code.value

    @classmethod
    def _from_obj(cls, obj: Any) -> Key:
        if isinstance(obj, str):
            try:
                code = KeyCode(obj)
            except ValueError:
                raise ValueError(f"unknown key: {obj!r}") from None
            if code in _WITH_VALUE:
                raise ValueError(f"key {obj!r} needs a value")
            return cls(code)
        if isinstance(obj, dict) and len(obj) == 1:
            ((name, value),) = obj.items()
            try:
                code = KeyCode(name)
            except ValueError:
                raise ValueError(f"unknown key: {name!r}") from None
            if code not in _WITH_VALUE:
                raise ValueError(f"key {name!r} takes no value")
            return cls(code, value)
        raise ValueError(f"invalid key: {obj!r}")

    def to_json(self) -> str:
        """Serialize the key to compact JSON."""
        return json.dumps(self._to_obj(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Key:
        """Parse a key from JSON; raises ``ValueError`` if it is not a valid key."""
        return cls._from_obj(json.loads(text))


_MODIFIERS = ("ctrl", "alt", "shift")


@dataclass(frozen=True)
class Input:
    """A key press together with the state of the Ctrl, Alt and Shift modifiers."""

    key: Key = field(default_factory=Key)
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def to_json(self) -> str:
        """Serialize the input to compact JSON."""
        obj = {"key": self.key._to_obj(), "ctrl": self.ctrl, "alt": self.alt, "shift": self.shift}
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Input:
        """Parse an input from JSON; raises ``ValueError`` if it is not valid."""
        obj = json.loads(text)
        if not isinstance(obj, dict):
            raise ValueError(f"invalid input: {obj!r}")
        missing = [name for name in ("key", *_MODIFIERS) if name not in obj]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        for name in _MODIFIERS:
            if not isinstance(obj[name], bool):
                raise ValueError(f"field {name!r} must be a boolean: {obj[name]!r}")
        return cls(
            key=Key._from_obj(obj["key"]),
            ctrl=obj["ctrl"],
            alt=obj["alt"],
            shift=obj["shift"],
        )