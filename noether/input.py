"""Keyboard and mouse codes and a polling front-end over an input source."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag
from typing import Optional, Protocol, Tuple


class CursorMode(Enum):
    DISABLED = "disabled"
    HIDDEN = "hidden"
    REGULAR = "regular"


class MouseButton(IntEnum):
    BUTTON1 = 0
    BUTTON2 = 1
    BUTTON3 = 2
    BUTTON4 = 3
    BUTTON5 = 4
    BUTTON6 = 5
    BUTTON7 = 6
    BUTTON8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class KeyMod(IntFlag):
    NONE = 0
    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008
    CAPS_LOCK = 0x0010
    NUM_LOCK = 0x0020


class KeyCode(IntEnum):
    UNKNOWN = -1

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    NUM0 = 48
    NUM1 = 49
    NUM2 = 50
    NUM3 = 51
    NUM4 = 52
    NUM5 = 53
    NUM6 = 54
    NUM7 = 55
    NUM8 = 56
    NUM9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE = 96
    WORLD1 = 161
    WORLD2 = 162

    ESC = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KEYPAD0 = 320
    KEYPAD1 = 321
    KEYPAD2 = 322
    KEYPAD3 = 323
    KEYPAD4 = 324
    KEYPAD5 = 325
    KEYPAD6 = 326
    KEYPAD7 = 327
    KEYPAD8 = 328
    KEYPAD9 = 329
    KEYPAD_DECIMAL = 330
    KEYPAD_DIVIDE = 331
    KEYPAD_MULTIPLY = 332
    KEYPAD_SUBTRACT = 333
    KEYPAD_ADD = 334
    KEYPAD_ENTER = 335
    KEYPAD_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class InputSource(Protocol):
    """What a window must offer for input to be polled from it."""

    def key_pressed(self, key: KeyCode) -> bool: ...

    def mouse_button_pressed(self, button: MouseButton) -> bool: ...

    def cursor_position(self) -> Tuple[float, float]: ...

    def window_size(self) -> Tuple[int, int]: ...

    def set_cursor_position(self, x: float, y: float) -> None: ...

    def set_cursor_mode(self, mode: CursorMode) -> None: ...


class Input:
    """Polls keyboard and mouse state from the current input source."""

    def __init__(self, source: Optional[InputSource] = None) -> None:
        self._source = source

    def set_input_source(self, source: InputSource) -> None:
        self._source = source

    @property
    def source(self) -> InputSource:
        if self._source is None:
            raise RuntimeError("no input source has been set")
        return self._source

    def is_key_pressed(self, key) -> bool:
        return bool(self.source.key_pressed(KeyCode(key)))

    def is_mouse_button_pressed(self, button) -> bool:
        return bool(self.source.mouse_button_pressed(MouseButton(button)))

    def get_mouse_position(self) -> Tuple[float, float]:
        x, y = self.source.cursor_position()
        return float(x), float(y)

    def recenter_mouse_position(self) -> None:
        """Move the cursor to the middle of the window."""
        source = self.source
        width, height = source.window_size()
        source.set_cursor_position(int(width) // 2, int(height) // 2)

    def set_cursor_mode(self, mode: CursorMode) -> None:
        self.source.set_cursor_mode(CursorMode(mode))