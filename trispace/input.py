"""Button state tracking from keyboard events."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Key(enum.IntEnum):
    """Logical buttons of the game pad."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    X = 6
    Y = 7
    TL = 8
    TR = 9
    MENU = 10
    SELECT = 11
    START = 12


class EventKind(enum.Enum):
    """Kinds of incoming event."""

    QUIT = "quit"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """An input event; key is the name of the physical key, if any."""

    kind: EventKind
    key: str | None = None


_QUIT = "quit"

_DESKTOP_KEYS: dict[str, Key | str] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "a": Key.A,
    "s": Key.B,
    "x": Key.X,
    "y": Key.Y,
    "u": Key.TL,
    "i": Key.TR,
    "q": Key.MENU,
    "n": Key.SELECT,
    "m": Key.START,
}

_HANDHELD_KEYS: dict[str, Key | str] = {
    "u": Key.UP,
    "d": Key.DOWN,
    "l": Key.LEFT,
    "r": Key.RIGHT,
    "a": Key.A,
    "b": Key.B,
    "x": Key.X,
    "y": Key.Y,
    "m": Key.TL,
    "n": Key.TR,
    "q": _QUIT,
    "k": Key.SELECT,
    "s": Key.START,
}


class InputState:
    """Current and previous frame button states."""

    def __init__(self, handheld: bool = False) -> None:
        self._mapping = _HANDHELD_KEYS if handheld else _DESKTOP_KEYS
        self._keys = [False] * len(Key)
        self._keys_last = [False] * len(Key)

    def handle_events(self, events: Iterable[KeyEvent]) -> bool:
        """Start a new frame and apply its events; False once quitting is requested."""
        running = True
        self._keys_last = list(self._keys)
        for event in events:
            if event.kind is EventKind.QUIT:
                running = False
                continue
            if event.kind not in (EventKind.KEY_DOWN, EventKind.KEY_UP):
                continue
            target = self._mapping.get(event.key) if event.key is not None else None
            if target is None:
                continue
            if target == _QUIT:
                running = False
            else:
                self._keys[target] = event.kind is EventKind.KEY_DOWN
        return running

    def key_pressed(self, key: Key) -> bool:
        """Whether the button is held down."""
        return self._keys[key]

    def key_up(self, key: Key) -> bool:
        """Whether the button was released during the latest frame."""
        return self._keys_last[key] and not self._keys[key]