import pygame
import pytest

from faxicui.simulator import Simulator
from faxicui.types import (
    BLACK,
    BLUE,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    NAVY,
    ORANGE,
    PINK,
    PURPLE,
    RED,
    RGB,
    WHITE,
    YELLOW,
)

WIDTH, HEIGHT = 128, 64
COLOR_MAP = [BLACK, WHITE, RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA, ORANGE, PURPLE, PINK, NAVY, GRAY]


@pytest.fixture
def sim(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    simulator = Simulator(WIDTH, HEIGHT)
    assert simulator.init() is True
    yield simulator
    simulator.close()


def test_init_paints_white(sim):
    assert sim.read_pixel(0, 0) == WHITE
    assert sim.read_pixel(WIDTH - 1, HEIGHT - 1) == WHITE
    assert sim.color == WHITE


def test_draw_pixel_uses_current_color(sim):
    sim.set_color(RED)
    sim.draw_pixel(3, 4)
    assert sim.read_pixel(3, 4) == RED
    assert sim.read_pixel(4, 4) == WHITE


def test_set_rgb(sim):
    sim.set_rgb(1, 2, 3)
    sim.draw_pixel(0, 0)
    assert sim.color == RGB(1, 2, 3)
    assert sim.read_pixel(0, 0) == RGB(1, 2, 3)


def test_source_pixel_and_rect_pattern(sim):
    for i, color in enumerate(COLOR_MAP):
        sim.set_color(color)
        for j in range(30):
            sim.draw_pixel(i * 2, j * 2)
    for i, color in enumerate(COLOR_MAP):
        sim.set_color(color)
        sim.draw_rect(i * 4 + 60, 0, 4, 64)
    sim.show_canvas()
    for i, color in enumerate(COLOR_MAP):
        assert sim.read_pixel(i * 2, 58) == color
        assert sim.read_pixel(i * 4 + 63, 63) == color
    assert sim.read_pixel(1, 0) == WHITE


def test_clear_canvas_fills_with_color(sim):
    sim.set_color(NAVY)
    sim.clear_canvas()
    assert sim.read_pixel(10, 10) == NAVY


def test_alpha_zero_leaves_canvas(sim):
    sim.set_alpha(0)
    sim.set_color(BLACK)
    sim.draw_pixel(5, 5)
    assert sim.read_pixel(5, 5) == WHITE


def test_half_alpha_blends(sim):
    sim.set_alpha(128)
    sim.set_color(BLACK)
    sim.draw_rect(0, 0, 2, 2)
    pixel = sim.read_pixel(1, 1)
    assert 115 <= pixel.r <= 140
    assert pixel.r == pixel.g == pixel.b


def test_alpha_out_of_range(sim):
    with pytest.raises(ValueError):
        sim.set_alpha(256)


def test_quit_event_stops(sim):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert sim.check_event() is False
    assert sim.check_event() is True


def test_ticks_do_not_go_backwards(sim):
    first = sim.get_tick()
    sim.delay(5)
    assert sim.get_tick() >= first + 5


def test_drawing_before_init_fails():
    simulator = Simulator(4, 4)
    with pytest.raises(RuntimeError):
        simulator.show_canvas()
    with pytest.raises(RuntimeError):
        simulator.draw_pixel(0, 0)
    assert simulator.get_tick() == 0


def test_deinit_closes(sim):
    sim.deinit()
    with pytest.raises(RuntimeError):
        sim.read_pixel(0, 0)