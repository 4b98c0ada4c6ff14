"""Draws components into an off-screen buffer and pushes it to a display."""

from __future__ import annotations

from .base import DrawBase
from .buffer import Gbuffer
from .display import HalDisplay
from .types import RGB


class Drawer:
    """Owns a frame buffer the size of its display."""

    def __init__(self, display: HalDisplay) -> None:
        if display is None:
            raise ValueError("a display is required")
        self._display = display
        self._width = display.width
        self._height = display.height
        self._alpha = display.alpha
        self._buffer = Gbuffer(self._width, self._height)
        self._closed = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def buffer(self) -> Gbuffer:
        return self._buffer

    @property
    def display(self) -> HalDisplay:
        return self._display

    def draw_component(self, component: DrawBase) -> None:
        """Render a component into the buffer."""
        component.draw(self._buffer)

    def flush(self) -> None:
        """Copy the buffer to the display, column by column, and present it."""
        for x in range(self._width):
            for y in range(self._height):
                self._display.set_color(self._buffer.at(x, y))
                self._display.draw_pixel(x, y)
        self._display.show_canvas()

    def clear(self) -> None:
        """Fill the buffer with white."""
        self._buffer.clear()

    def set_color(self, color: RGB) -> None:
        self._display.set_color(color)

    def set_alpha(self, a: int) -> None:
        self._alpha = a
        self._display.set_alpha(a)

    def close(self) -> None:
        """Shut the display down; further calls do nothing."""
        if not self._closed:
            self._closed = True
            self._display.deinit()

    def __enter__(self) -> Drawer:
        return self

    def __exit__(self, *args) -> None:
        self.close()