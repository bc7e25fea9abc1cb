"""The application loop, its window and graphics-device interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Callable, Optional

from noether.buffers import VertexArray
from noether.clock import Clock
from noether.events import Event, EventType
from noether.input import Input
from noether.maths import IRect2D

EventCallback = Callable[[Event], None]


class DisplayMode(Enum):
    WINDOWED = auto()
    WINDOWED_FULLSCREEN = auto()
    FULLSCREEN = auto()


@dataclass
class WindowSpec:
    """What a window is asked to be when it is created."""

    width: int = 600
    height: int = 800
    title: str = "Noether Application"
    event_callback: Optional[EventCallback] = None
    mode: DisplayMode = DisplayMode.WINDOWED_FULLSCREEN


class ClearFlag(IntFlag):
    COLOR = 1
    DEPTH = 1 << 1
    STENCIL = 1 << 2


class Window(ABC):
    """A window that owns a drawable backbuffer and delivers events."""

    @property
    @abstractmethod
    def screen_width(self) -> int: ...

    @property
    @abstractmethod
    def screen_height(self) -> int: ...

    @property
    @abstractmethod
    def backbuffer_width(self) -> int: ...

    @property
    @abstractmethod
    def backbuffer_height(self) -> int: ...

    @abstractmethod
    def new_frame(self) -> None:
        """Present the finished frame and collect pending events."""


class GraphicsDevice(ABC):
    """Rendering state and draw calls for one window."""

    @abstractmethod
    def clear(self, flags: Optional[ClearFlag] = None) -> None:
        """Clear the given buffers; colour, depth and stencil when flags is None."""

    @abstractmethod
    def set_depth_testing(self, active: bool) -> None: ...

    @abstractmethod
    def set_blending(self, active: bool) -> None: ...

    @abstractmethod
    def set_viewport(self, width: int, height: int) -> None: ...

    @abstractmethod
    def set_vsync(self, active: bool) -> None: ...

    @abstractmethod
    def blit(self, src, dst, src_rect: IRect2D, dst_rect: IRect2D) -> None: ...

    @abstractmethod
    def begin_gui(self) -> None: ...

    @abstractmethod
    def end_gui(self) -> None: ...

    @abstractmethod
    def draw_vertex_array(self, vertex_array: VertexArray, count: Optional[int] = None) -> None:
        """Draw triangles from a vertex array, all of its indices when count is None."""


class App(ABC):
    """Runs the frame loop: update, render and GUI until the window closes."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.input = Input()
        self._clock = clock if clock is not None else Clock()
        self._window: Optional[Window] = None
        self._graphics_device: Optional[GraphicsDevice] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def main_window(self) -> Window:
        if self._window is None:
            raise RuntimeError("the application has no window yet")
        return self._window

    @property
    def graphics_device(self) -> GraphicsDevice:
        if self._graphics_device is None:
            raise RuntimeError("the application has no graphics device yet")
        return self._graphics_device

    def run(self) -> None:
        """Open the window, initialise, loop until closed, then shut down."""
        spec = WindowSpec(
            width=1280,
            height=720,
            title="Noether Application",
            event_callback=self.handle_event,
            mode=DisplayMode.WINDOWED,
        )
        self._window = self.create_window(spec)
        self.input.set_input_source(self._window)
        self._graphics_device = self.create_graphics_device(self._window)

        self.initialise()

        self._running = True
        self._clock.start()
        while self._running:
            self._tick()

        self.shutdown()

    def handle_event(self, event: Event) -> None:
        """React to window events, then pass unhandled ones to on_event."""
        if event.type is EventType.WINDOW_CLOSE:
            self._running = False
            event.handled = True
        elif event.type is EventType.WINDOW_BACKBUFFER_SIZE:
            self.graphics_device.set_viewport(event.payload.width, event.payload.height)

        if not event.handled:
            self.on_event(event)

    def _tick(self) -> None:
        dt = self._clock.tick()
        self.main_window.new_frame()

        self.update(dt)

        device = self.graphics_device
        device.clear()
        self.render()
        device.begin_gui()
        try:
            self.draw_gui()
        finally:
            device.end_gui()

    @abstractmethod
    def create_window(self, spec: WindowSpec) -> Window:
        """Open the main window described by spec."""

    @abstractmethod
    def create_graphics_device(self, window: Window) -> GraphicsDevice:
        """Create the graphics device that draws into window."""

    @abstractmethod
    def initialise(self) -> None: ...

    @abstractmethod
    def shutdown(self) -> None: ...

    @abstractmethod
    def update(self, dt: float) -> None: ...

    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def draw_gui(self) -> None: ...

    @abstractmethod
    def on_event(self, event: Event) -> None: ...