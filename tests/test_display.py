import pytest

from faxicui import types
from faxicui.display import HalDisplay
from faxicui.types import RGB


class RecordingDisplay(HalDisplay):
    def __init__(self, width, height):
        super().__init__(width, height)
        self.pixels = {}
        self.shown = 0
        self.ready = False

    def init(self):
        self.ready = True
        return True

    def deinit(self):
        self.ready = False

    def draw_pixel(self, x, y):
        self.pixels[(x, y)] = (self.color, self.alpha)

    def draw_rect(self, x, y, w, h):
        for yy in range(y, y + h):
            for xx in range(x, x + w):
                self.draw_pixel(xx, yy)

    def clear_canvas(self):
        self.pixels.clear()

    def delay(self, ms):
        pass

    def check_event(self):
        return self.ready

    def get_tick(self):
        return 0

    def show_canvas(self):
        self.shown += 1

    def set_color(self, color):
        self._color = color

    def set_rgb(self, r, g, b):
        self.set_color(RGB(r, g, b))

    def set_alpha(self, a):
        self._alpha = a


def test_abstract_display_cannot_be_instantiated():
    with pytest.raises(TypeError):
        HalDisplay(128, 64)


def test_incomplete_subclass_cannot_be_instantiated():
    class Partial(HalDisplay):
        def init(self):
            return True

    with pytest.raises(TypeError):
        Partial(128, 64)

    complete = RecordingDisplay(128, 64)
    complete.set_color(RGB(1, 2, 3))
    assert complete.color == RGB(1, 2, 3)


def test_dimensions_and_defaults():
    display = RecordingDisplay(128, 64)
    assert display.width == 128
    assert display.height == 64
    assert display.color == RGB(255, 255, 255)
    assert display.alpha == 255


def test_color_and_alpha_reflect_setters():
    display = RecordingDisplay(128, 64)
    display.set_rgb(255, 0, 0)
    assert display.color == RGB(255, 0, 0)
    assert display.color == types.RED
    display.set_alpha(100)
    assert display.alpha == 100


def test_dimensions_are_read_only():
    display = RecordingDisplay(8, 8)
    display.set_color(RGB(0, 0, 255))
    with pytest.raises(AttributeError):
        display.width = 16
    assert display.width == 8
    assert display.color == RGB(0, 0, 255)


def test_subclass_draws_with_current_state():
    display = RecordingDisplay(8, 8)
    display.set_color(RGB(0, 0, 255))
    display.draw_rect(1, 1, 2, 2)
    assert set(display.pixels) == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert all(value == (types.BLUE, 255) for value in display.pixels.values())