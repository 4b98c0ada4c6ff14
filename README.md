# faxicui

A small drawing toolkit for embedded screens. Components are drawn into an
in-memory RGB frame buffer, and the finished frame is then pushed pixel by
pixel to a display. A display backed by a pygame window, `Simulator`,
stands in for the real screen on a desktop.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- `faxicui.types`: `RGB`, a frozen colour whose `r`, `g` and `b` channels
  must be ints in 0..255 (otherwise `ValueError`), and `Point`, an integer
  `x`/`y` position. Named colours are provided: `WHITE`, `BLACK`, `RED`,
  `GREEN`, `BLUE`, `MAGENTA`, `CYAN`, `YELLOW`, `ORANGE`, `PURPLE`, `GRAY`,
  `PINK` and `NAVY`.
- `faxicui.display`: `HalDisplay`, the abstract display interface. A
  display has read-only `width`, `height`, `color` (white to start with)
  and `alpha` (255 to start with), and implements `init`, `deinit`,
  `draw_pixel`, `draw_rect`, `clear_canvas`, `delay`, `check_event`,
  `get_tick`, `show_canvas`, `set_color`, `set_rgb` and `set_alpha`.
- `faxicui.simulator`: `Simulator`, a `HalDisplay` drawn into a pygame
  window with each screen pixel `POINT_SIZE` (1) window pixels wide.
  `init()` opens the window, paints it white and returns `False` if the
  window cannot be opened. Drawing with an alpha below 255 blends over what
  is already shown; `set_alpha` rejects values outside 0..255.
  `check_event()` returns `False` once the window has been asked to close,
  `get_tick()` gives milliseconds since `init()`, and `read_pixel(x, y)`
  returns the colour shown at a position. `close()` (or `deinit()`) shuts
  the window. Drawing before `init()` raises `RuntimeError`.
- `faxicui.buffer`: `Gbuffer`, a `width` × `height` grid of colours stored
  row by row. New pixels are black; `clear()` fills the grid with white.
  `set_pixel` ignores coordinates outside the grid, `get` returns white for
  them, and `at` returns the first pixel for them. `resize` keeps stored
  pixels in order and rejects negative sizes. `set_area(x1, y1, x2, y2,
  color)` and `set_area_points(p1, p2, color)` fill the rectangle spanned
  by two corners; an area entirely off the grid is skipped, and a row that
  runs past the right edge continues into the next row.
- `faxicui.base`: `DrawStyle` and `DrawBase`, the base classes for
  drawable components. A component implements `draw(buf)`.
- `faxicui.line`: `LineStyle`, a dataclass holding `color`, `width`,
  `dash_width`, `dash_gap`, `round_start` and `round_end`. `set_dash`
  sets the dash pattern; a line is dashed (`is_dash`, `type` is
  `LineType.DASH`) only when both dash lengths are non-zero. `DrawLine(p1,
  p2, style)` draws horizontal, vertical and slanted lines of any width;
  slanted lines get their width corrected for the slope. Lines of width
  below 1 and lines whose ends coincide draw nothing.
- `faxicui.drawer`: `Drawer`, which owns a `Gbuffer` the size of its
  display. `draw_component` renders a component into the buffer, `clear`
  fills it with white, and `flush` copies every pixel to the display and
  presents it. `set_color` and `set_alpha` pass through to the display.
  `close()`, or leaving a `with` block, calls the display's `deinit()`.

## Example

```python
from faxicui.types import RGB, Point
from faxicui.simulator import Simulator
from faxicui.drawer import Drawer
from faxicui.line import LineStyle, DrawLine

sim = Simulator(256, 256)
sim.init()

solid = LineStyle(RGB(0, 0, 0), width=15)

dashed = LineStyle(RGB(255, 0, 0), width=5)
dashed.set_dash(5, 5)

with Drawer(sim) as drawer:
    while sim.check_event():
        drawer.clear()
        drawer.draw_component(DrawLine(Point(3, 0), Point(3, 60), solid))
        drawer.draw_component(DrawLine(Point(60, 10), Point(100, 10), dashed))
        drawer.draw_component(DrawLine(Point(100, 100), Point(200, 150), solid))
        drawer.flush()
        sim.delay(16)
```

## What it does not do

- Lines are the only drawable component; there are no rectangles,
  circles or text.
- `round_start` and `round_end` are stored on a `LineStyle` but line ends
  are always drawn square.
- The only display is the pygame `Simulator`; there is no driver for real
  screen hardware, and the package installs no command.