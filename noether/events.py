"""Window and input events delivered to an application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from noether.input import KeyCode, KeyMod, MouseButton


class EventType(Enum):
    KEY = auto()
    MOUSE_BUTTON = auto()
    MOUSE_MOVEMENT = auto()
    WINDOW_CLOSE = auto()
    WINDOW_BACKBUFFER_SIZE = auto()
    WINDOW_SIZE = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: KeyCode
    mods: KeyMod
    is_down: bool
    is_repeat: bool = False


@dataclass(frozen=True)
class MouseButtonEvent:
    button: MouseButton
    mods: KeyMod
    is_down: bool


@dataclass(frozen=True)
class MouseMovementEvent:
    x: float
    y: float


@dataclass(frozen=True)
class WindowCloseEvent:
    pass


@dataclass(frozen=True)
class WindowBackbufferSizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class WindowSizeEvent:
    width: int
    height: int


Payload = Union[
    KeyEvent,
    MouseButtonEvent,
    MouseMovementEvent,
    WindowCloseEvent,
    WindowBackbufferSizeEvent,
    WindowSizeEvent,
]

_PAYLOAD_TYPES = {
    KeyEvent: EventType.KEY,
    MouseButtonEvent: EventType.MOUSE_BUTTON,
    MouseMovementEvent: EventType.MOUSE_MOVEMENT,
    WindowCloseEvent: EventType.WINDOW_CLOSE,
    WindowBackbufferSizeEvent: EventType.WINDOW_BACKBUFFER_SIZE,
    WindowSizeEvent: EventType.WINDOW_SIZE,
}


@dataclass
class Event:
    """An event of a given type carrying the matching payload."""

    type: EventType
    payload: Payload
    handled: bool = False

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(type(self.payload))
        if expected is None:
            raise TypeError(f"unsupported event payload: {type(self.payload).__name__}")
        if expected is not self.type:
            raise ValueError(f"payload {type(self.payload).__name__} does not match {self.type}")

    @classmethod
    def of(cls, payload: Payload) -> "Event":
        """Build an event whose type is taken from its payload."""
        event_type = _PAYLOAD_TYPES.get(type(payload))
        if event_type is None:
            raise TypeError(f"unsupported event payload: {type(payload).__name__}")
        return cls(event_type, payload)