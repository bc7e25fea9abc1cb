import pytest

from noether.events import (
    Event,
    EventType,
    KeyEvent,
    MouseButtonEvent,
    MouseMovementEvent,
    WindowBackbufferSizeEvent,
    WindowCloseEvent,
    WindowSizeEvent,
)
from noether.input import KeyCode, KeyMod, MouseButton


@pytest.mark.parametrize(
    "payload, expected",
    [
        (KeyEvent(KeyCode.ESC, KeyMod.NONE, True), EventType.KEY),
        (MouseButtonEvent(MouseButton.LEFT, KeyMod.SHIFT, False), EventType.MOUSE_BUTTON),
        (MouseMovementEvent(1.0, 2.0), EventType.MOUSE_MOVEMENT),
        (WindowCloseEvent(), EventType.WINDOW_CLOSE),
        (WindowBackbufferSizeEvent(640, 480), EventType.WINDOW_BACKBUFFER_SIZE),
        (WindowSizeEvent(320, 240), EventType.WINDOW_SIZE),
    ],
)
def test_of_picks_type_from_payload(payload, expected):
    event = Event.of(payload)
    assert event.type is expected
    assert event.payload == payload
    assert event.handled is False


def test_key_event_defaults_to_not_repeat():
    event = KeyEvent(KeyCode.SPACE, KeyMod.NONE, True)
    assert event.is_repeat is False


def test_mismatched_payload_rejected():
    with pytest.raises(ValueError):
        Event(EventType.KEY, WindowCloseEvent())


def test_unknown_payload_rejected():
    with pytest.raises(TypeError):
        Event.of(object())


def test_handled_flag_can_be_set():
    event = Event.of(WindowCloseEvent())
    event.handled = True
    assert event.handled is True