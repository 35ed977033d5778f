# fractol

An interactive explorer for three escape-time fractals: the Mandelbrot set,
Julia sets and the Tricorn. It opens an 800×800 window (drawn with pygame)
and redraws the fractal as you zoom, pan and recolour it.

## Installation

```
pip install .
```

## Usage

```
fractol Mandelbrot
fractol Tricorn
fractol Julia X Y
```

For a Julia set, `X` and `Y` are the real and imaginary parts of the constant
`c`. Both must be plain decimal numbers (an optional sign, digits and at most
one decimal point) between -2 and 2, for example:

```
fractol Julia -0.7 0.27015
```

On a valid start the list of controls is printed to standard output before
the window opens. Any other arguments print a usage message to standard error
and the command exits with status 1.

## Controls

| Input              | Action                                      |
|--------------------|---------------------------------------------|
| Mouse wheel        | Zoom around the cursor                      |
| Arrow keys         | Move the view by half the current zoom      |
| C                  | Cycle the base colour                       |
| V                  | Cycle the colour palette                    |
| M                  | Increase the iteration limit by 10          |
| L                  | Decrease the iteration limit by 10          |
| R                  | Reset the view, colours and Julia constant  |
| ESC                | Quit (closing the window also quits)        |

In Julia mode, moving the mouse by more than 10 pixels sets the constant `c`
to the point under the cursor, so the set morphs as you move.

Every mouse button press recomputes the iteration limit from the current zoom
as `int(42 + 50 * log(zoom + 1))`, so a click or scroll replaces any change
made with M or L.

Pixels whose orbit stays within radius 2 for the whole iteration limit are
drawn black; the others are coloured by blending from the base colour to the
palette colour according to the iteration at which they escaped.

## Using it as a library

The fractal state and renderer work without a window:

```python
from fractol.state import Fractal, FractalType
from fractol.render import render, pixel_color

fractal = Fractal(FractalType.MANDELBROT)
pixels = render(fractal, 200, 200)   # (200, 200) numpy array of 0xRRGGBB
corner = pixel_color(fractal, 0, 0)  # colour of a single pixel
```

- `fractol.state.Fractal` holds the view: `zoom`, `offset_x`, `offset_y`,
  `max_iterations`, `color_shift`, `color_cycle`, `julia_x`, `julia_y`, and
  the screen size `width` and `height`. Its methods include `reset()`,
  `zoom_in()`, `zoom_out()`, `update_max_iterations()`, `next_palette_color()`,
  `next_cycle_color()`, `color_for()` and `screen_to_plane()`.
- `fractol.render` provides `render()`, `pixel_color()`,
  `escape_iterations()` (the escape iteration, or `None` for points that stay
  bounded), `starting_point()` and `complex_square()`.
- `fractol.events.Controller` applies key codes (`Key`) and mouse events
  (`MouseButton`) to a `Fractal` and calls a `redraw` callback afterwards.
- `fractol.parsing` holds the argument checks: `is_number()`,
  `parse_decimal()` and `matches_prefix()`.
- `fractol.app.parse_args()` turns command-line arguments into a `Fractal`,
  raising `UsageError` when they are not valid; `run()` opens the window.

`render()` uses the fractal's own `width` and `height` for the mapping to the
complex plane; the `width` and `height` arguments only choose how many pixels
of that view are drawn, starting at the top-left corner.

## Running the tests

```
pip install .[test]
pytest
```