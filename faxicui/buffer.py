"""An off-screen RGB frame buffer."""

from __future__ import annotations

from .types import BLACK, RGB, WHITE, Point


class Gbuffer:
    """A width x height grid of colours stored row by row."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = 0
        self._height = 0
        self._pixels: list[RGB] = []
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the dimensions, keeping the stored pixels in order; new ones are black."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid buffer size {width}x{height}")
        size = width * height
        del self._pixels[size:]
        self._pixels.extend([BLACK] * (size - len(self._pixels)))
        self._width = width
        self._height = height

    def clear(self) -> None:
        """Fill the whole buffer with white."""
        self._pixels = [WHITE] * (self._width * self._height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def at(self, x: int, y: int) -> RGB:
        """Return the pixel at (x, y); coordinates outside give the first pixel."""
        if not self._pixels:
            raise IndexError("buffer is empty")
        if not self._inside(x, y):
            return self._pixels[0]
        return self._pixels[x + y * self._width]

    def get(self, x: int, y: int) -> RGB:
        """Return the pixel at (x, y), or white outside the buffer."""
        if not self._inside(x, y):
            return WHITE
        return self._pixels[x + y * self._width]

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._inside(x, y):
            self._pixels[x + y * self._width] = color

    def _fill_rows(self, left: int, top: int, bottom: int, span: int, color: RGB) -> None:
        # Each row fills `span` consecutive cells from `left`, running on into
        # the following row when it passes the right edge; anything past the
        # end of the buffer is dropped.
        size = len(self._pixels)
        for y in range(top, bottom + 1):
            start = y * self._width + left
            if start >= size:
                break
            end = min(start + span, size)
            self._pixels[start:end] = [color] * (end - start)

    def set_area(self, x1: int, y1: int, x2: int, y2: int, color: RGB) -> None:
        """Fill the rectangle spanned by two corners."""
        top, bottom = sorted((y1, y2))
        left, right = sorted((x1, x2))
        if right < 0 or left >= self._width:
            return
        if bottom < 0 or top >= self._height:
            return
        top = max(top, 0)
        bottom = min(self._width, bottom)
        left = max(left, 0)
        self._fill_rows(left, top, bottom, abs(x2 - x1) + 1, color)

    def set_area_points(self, p1: Point, p2: Point, color: RGB) -> None:
        """Fill the rectangle spanned by two corner points."""
        top, bottom = sorted((p1.y, p2.y))
        left, right = sorted((p1.x, p2.x))
        span = abs(p2.x - p1.x) + 1
        if right < 0 or left > self._width:
            return
        if bottom < 0 or top > self._height:
            return
        top = max(top, 0)
        bottom = min(self._width, bottom)
        left = max(left, 0)
        self._fill_rows(left, top, bottom, span, color)