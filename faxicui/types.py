"""Basic value types shared by the display and drawing layers."""

from __future__ import annotations

from dataclasses import dataclass

RGBAHex = int


@dataclass(frozen=True)
class RGB:
    """A 24-bit colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")


@dataclass
class Point:
    """An integer position on the canvas."""

    x: int
    y: int


WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)
RED = RGB(255, 0, 0)
GREEN = RGB(0, 255, 0)
BLUE = RGB(0, 0, 255)
MAGENTA = RGB(255, 0, 255)
CYAN = RGB(0, 255, 255)
YELLOW = RGB(255, 255, 0)
ORANGE = RGB(255, 165, 0)
PURPLE = RGB(128, 0, 128)
GRAY = RGB(128, 128, 128)
PINK = RGB(255, 192, 203)
NAVY = RGB(0, 0, 139)