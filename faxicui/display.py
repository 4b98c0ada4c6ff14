"""Abstract display interface implemented by concrete screens."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import RGB, WHITE


class HalDisplay(ABC):
    """A pixel display with a current drawing colour and alpha."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._color: RGB = WHITE
        self._alpha = 255

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def color(self) -> RGB:
        return self._color

    @property
    def alpha(self) -> int:
        return self._alpha

    @abstractmethod
    def init(self) -> bool:
        """Bring the display up; return True on success."""

    @abstractmethod
    def deinit(self) -> None:
        """Shut the display down."""

    @abstractmethod
    def draw_pixel(self, x: int, y: int) -> None:
        """Paint one pixel in the current colour."""

    @abstractmethod
    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        """Fill a rectangle in the current colour."""

    @abstractmethod
    def clear_canvas(self) -> None:
        """Fill the whole canvas with the current colour."""

    @abstractmethod
    def delay(self, ms: int) -> None:
        """Wait for the given number of milliseconds."""

    @abstractmethod
    def check_event(self) -> bool:
        """Process pending events; return False once a quit is requested."""

    @abstractmethod
    def get_tick(self) -> int:
        """Return milliseconds since the display was initialised."""

    @abstractmethod
    def show_canvas(self) -> None:
        """Present what has been drawn."""

    @abstractmethod
    def set_color(self, color: RGB) -> None:
        """Set the drawing colour."""

    @abstractmethod
    def set_rgb(self, r: int, g: int, b: int) -> None:
        """Set the drawing colour from separate channels."""

    @abstractmethod
    def set_alpha(self, a: int) -> None:
        """Set the drawing alpha."""