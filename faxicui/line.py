"""Straight line component: solid, dashed and slanted lines of any width."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .base import DrawBase, DrawStyle
from .buffer import Gbuffer
from .types import RGB, Point

_UINT32 = 1 << 32

# Width correction for slanted lines, indexed by 32 * minor / major slope.
_WIDTH_CORRECTION = (
    128, 128, 128, 129, 129, 130, 130, 131,
    132, 133, 134, 135, 137, 138, 140, 141,
    143, 145, 147, 149, 151, 153, 155, 158,
    160, 162, 165, 167, 170, 173, 175, 178,
    181,
)


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class LineType(Enum):
    SOLID = "solid"
    DASH = "dash"


@dataclass
class LineStyle(DrawStyle):
    """Colour, width and dash pattern of a line."""

    color: RGB
    width: int = 1
    dash_width: int = 0
    dash_gap: int = 0
    round_start: bool = False
    round_end: bool = False

    def __post_init__(self) -> None:
        for name in ("width", "dash_width", "dash_gap"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    def set_dash(self, dash_width: int, dash_gap: int) -> None:
        """Set the length of the drawn and skipped parts of a dash."""
        if dash_width < 0 or dash_gap < 0:
            raise ValueError("dash lengths must not be negative")
        self.dash_width = dash_width
        self.dash_gap = dash_gap

    @property
    def is_dash(self) -> bool:
        return bool(self.dash_width and self.dash_gap)

    @property
    def type(self) -> LineType:
        return LineType.DASH if self.is_dash else LineType.SOLID


class DrawLine(DrawBase):
    """A line between two points drawn with a LineStyle."""

    def __init__(self, p1: Point, p2: Point, style: LineStyle) -> None:
        if not isinstance(style, LineStyle):
            raise TypeError("DrawLine needs a LineStyle")
        super().__init__(style)
        self.p1 = Point(p1.x, p1.y)
        self.p2 = Point(p2.x, p2.y)

    def draw(self, buf: Gbuffer) -> None:
        """Render the line into ``buf``."""
        if self.style.width < 1:
            return
        if self.p1 == self.p2:
            return
        if self.p1.y == self.p2.y:
            self._draw_horizontal(buf)
        elif self.p1.x == self.p2.x:
            self._draw_vertical(buf)
        else:
            self._draw_skew(buf)

    def _halves(self) -> tuple[int, int]:
        w = self.style.width - 1
        half0 = w >> 1
        return half0, half0 + (w & 1)

    def _dash_runs(self, lo: int, hi: int) -> Iterator[tuple[int, int]]:
        """Yield the drawn stretches of a dashed run from lo to hi."""
        dash = self.style.dash_width
        period = dash + self.style.dash_gap
        count = (lo % _UINT32) % period + 1
        pos = lo
        while pos <= hi:
            if count <= dash:
                step = dash - count
                yield pos, min(pos + step, hi)
                pos += step + 1
                count += step + 1
            else:
                step = period - count
                pos += step + 1
                count = 1

    def _draw_horizontal(self, buf: Gbuffer) -> None:
        style = self.style
        half0, half1 = self._halves()
        left, right = sorted((self.p1.x, self.p2.x))
        top = self.p1.y - half0
        bottom = self.p1.y + half1
        if not style.is_dash:
            buf.set_area(left, top, right, bottom, style.color)
            return
        for start, end in self._dash_runs(left, right):
            buf.set_area(start, top, end, bottom, style.color)

    def _draw_vertical(self, buf: Gbuffer) -> None:
        style = self.style
        half0, half1 = self._halves()
        left = self.p1.x - half1
        right = self.p1.x + half0
        top, bottom = sorted((self.p1.y, self.p2.y))
        if not style.is_dash:
            buf.set_area(left, top, right, bottom, style.color)
            return
        for start, end in self._dash_runs(top, bottom):
            buf.set_area(left, start, right, end, style.color)

    def _draw_skew(self, buf: Gbuffer) -> None:
        style = self.style
        if self.p1.y > self.p2.y:
            self.p1, self.p2 = self.p2, self.p1
        p1, p2 = self.p1, self.p2

        xdiff = p2.x - p1.x
        ydiff = p2.y - p1.y
        flat = abs(xdiff) > abs(ydiff)
        if flat:
            index = (abs(ydiff) << 5) // abs(xdiff)
        else:
            index = (abs(xdiff) << 5) // abs(ydiff)

        w = ((style.width * _WIDTH_CORRECTION[index] + 63) >> 7) - 1
        half0 = w >> 1
        half1 = half0 + (w & 1)

        def span(y: int) -> tuple[int, int]:
            if flat:
                lo = _tdiv((y - p1.y - half0) * xdiff, ydiff)
                hi = _tdiv((y - p1.y + half1) * xdiff, ydiff)
                if xdiff > 0:
                    l1, r1 = p1.x + lo, p1.x + hi
                else:
                    l1, r1 = p1.x + hi, p1.x + lo
            else:
                l1 = p1.x - half0 + _tdiv((y - p1.y) * xdiff, ydiff)
                r1 = l1 + w
            if xdiff < 0:
                l2 = _tdiv((p2.y - y) * ydiff, xdiff) + p2.x
                r2 = _tdiv((p1.y - y) * ydiff, xdiff) + p1.x
            else:
                l2 = _tdiv((p1.y - y) * ydiff, xdiff) + p1.x
                r2 = _tdiv((p2.y - y) * ydiff, xdiff) + p2.x
            left = max(l1, l2)
            right = min(r1, r2)
            if left > right:
                return -1, -1
            return left, right

        top = min(p1.y, p2.y) - w
        bottom = max(p1.y, p2.y) + w
        prev_left, prev_right, last_y = -1, -1, top
        for y in range(top, bottom + 1):
            left, right = span(y)
            if prev_left == left and prev_right == left:
                continue
            if prev_left == -1 and prev_right == -1:
                last_y = y
                prev_left, prev_right = left, right
                continue
            buf.set_area(prev_left, last_y, prev_right, y - 1, style.color)
            prev_left, prev_right = left, right
            last_y = y