"""A window that simulates a small pixel screen."""

from __future__ import annotations

import logging
import time

import pygame

from .display import HalDisplay
from .types import RGB, WHITE

log = logging.getLogger(__name__)

POINT_SIZE = 1


class Simulator(HalDisplay):
    """A display drawn into a pygame window, each pixel POINT_SIZE wide."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self._surface: pygame.Surface | None = None
        self._started: float | None = None

    def init(self) -> bool:
        """Open the window and paint it white; return False if that fails."""
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode(
                (self.width * POINT_SIZE, self.height * POINT_SIZE), 0, 32
            )
        except pygame.error as exc:
            log.error("could not open simulator window: %s", exc)
            return False
        pygame.display.set_caption("Simulator")
        self._started = time.monotonic()
        log.info("simulator %dx%d ready", self.width, self.height)
        self.set_color(WHITE)
        self.clear_canvas()
        self.show_canvas()
        return True

    def deinit(self) -> None:
        self.close()

    def close(self) -> None:
        """Close the window and release the video subsystem."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def _require_surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("simulator is not initialised")
        return self._surface

    def _fill(self, rect: pygame.Rect) -> None:
        surface = self._require_surface()
        rect.normalize()
        if rect.width == 0 or rect.height == 0:
            return
        c = self._color
        if self._alpha == 255:
            surface.fill((c.r, c.g, c.b), rect)
            return
        patch = pygame.Surface(rect.size, pygame.SRCALPHA)
        patch.fill((c.r, c.g, c.b, self._alpha))
        surface.blit(patch, rect.topleft)

    def draw_pixel(self, x: int, y: int) -> None:
        self._fill(pygame.Rect(x * POINT_SIZE, y * POINT_SIZE, POINT_SIZE, POINT_SIZE))

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        self._fill(
            pygame.Rect(x * POINT_SIZE, y * POINT_SIZE, w * POINT_SIZE, h * POINT_SIZE)
        )

    def clear_canvas(self) -> None:
        c = self._color
        self._require_surface().fill((c.r, c.g, c.b))

    def read_pixel(self, x: int, y: int) -> RGB:
        """Return the colour currently shown at (x, y)."""
        c = self._require_surface().get_at((x * POINT_SIZE, y * POINT_SIZE))
        return RGB(c.r, c.g, c.b)

    def delay(self, ms: int) -> None:
        time.sleep(max(ms, 0) / 1000)

    def check_event(self) -> bool:
        self._require_surface()
        return all(event.type != pygame.QUIT for event in pygame.event.get())

    def get_tick(self) -> int:
        if self._started is None:
            return 0
        return int((time.monotonic() - self._started) * 1000)

    def show_canvas(self) -> None:
        self._require_surface()
        pygame.display.flip()

    def set_color(self, color: RGB) -> None:
        self._color = color

    def set_rgb(self, r: int, g: int, b: int) -> None:
        self._color = RGB(r, g, b)

    def set_alpha(self, a: int) -> None:
        if not 0 <= a <= 255:
            raise ValueError(f"alpha must be in 0..255, got {a}")
        self._alpha = a