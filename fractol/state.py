"""View state of a fractal: plane mapping, zoom, iteration budget and colours."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
PSYCHEDELIC_RED = 0xFF4500
PSYCHEDELIC_PINK = 0xFF1493
PSYCHEDELIC_PURPLE = 0x9400D3
PSYCHEDELIC_YELLOW = 0xFFD700
PSYCHEDELIC_GREEN = 0x7FFF00
PSYCHEDELIC_BLUE = 0x1E90FF
PSYCHEDELIC_CYAN = 0x00FFFF
PSYCHEDELIC_ORANGE = 0xFF6347
PSYCHEDELIC_TEAL = 0x008080
PSYCHEDELIC_LIME = 0x32CD32

PALETTE_COLORS = (
    PSYCHEDELIC_BLUE,
    PSYCHEDELIC_CYAN,
    PSYCHEDELIC_GREEN,
    PSYCHEDELIC_ORANGE,
    PSYCHEDELIC_TEAL,
    PSYCHEDELIC_LIME,
    PSYCHEDELIC_PINK,
    PSYCHEDELIC_PURPLE,
    PSYCHEDELIC_RED,
    PSYCHEDELIC_YELLOW,
)

CYCLE_COLORS = (BLACK, WHITE, RED, GREEN, BLUE)

DEFAULT_MAX_ITERATIONS = 42
DEFAULT_JULIA = (-0.7, 0.27015)


class FractalType(enum.Enum):
    """The kinds of fractal that can be drawn."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    TRICORN = "Tricorn"


def map_range(value, old_min, old_max, new_min, new_max):
    """Linearly rescale *value* from [old_min, old_max] to [new_min, new_max].

    Works element-wise on numpy arrays as well as on plain numbers.
    """
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass
class Fractal:
    """Everything needed to draw one frame of a fractal."""

    type: FractalType = FractalType.MANDELBROT
    width: int = WIDTH
    height: int = HEIGHT
    max_iterations: int = field(default=DEFAULT_MAX_ITERATIONS, init=False)
    zoom: float = field(default=1.0, init=False)
    offset_x: float = field(default=-0.5, init=False)
    offset_y: float = field(default=0.0, init=False)
    min_x: float = field(default=-2.0, init=False)
    min_y: float = field(default=-2.0, init=False)
    max_x: float = field(default=2.0, init=False)
    max_y: float = field(default=2.0, init=False)
    color_shift: int = field(default=PSYCHEDELIC_BLUE, init=False)
    color_cycle: int = field(default=BLACK, init=False)
    julia_x: float = field(default=DEFAULT_JULIA[0], init=False)
    julia_y: float = field(default=DEFAULT_JULIA[1], init=False)
    _palette_index: int = field(default=0, init=False, repr=False)
    _cycle_index: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore the initial view, iteration budget, colours and Julia constant."""
        self.max_iterations = DEFAULT_MAX_ITERATIONS
        self.zoom = 1.0
        self.offset_x = 0.0 if self.type is FractalType.JULIA else -0.5
        self.offset_y = 0.0
        self.min_x = -2.0
        self.min_y = -2.0
        self.max_x = 2.0
        self.max_y = 2.0
        self.color_shift = PSYCHEDELIC_BLUE
        self.color_cycle = BLACK
        self.julia_x, self.julia_y = DEFAULT_JULIA

    def next_palette_color(self) -> int:
        """Set the colour shift to the next palette entry and return it."""
        self.color_shift = PALETTE_COLORS[self._palette_index]
        self._palette_index = (self._palette_index + 1) % len(PALETTE_COLORS)
        return self.color_shift

    def next_cycle_color(self) -> int:
        """Set the base colour to the next cycle entry and return it."""
        self.color_cycle = CYCLE_COLORS[self._cycle_index]
        self._cycle_index = (self._cycle_index + 1) % len(CYCLE_COLORS)
        return self.color_cycle

    def color_for(self, iterations: int) -> int:
        """Blend from the base colour to the shift colour by escape iteration."""
        delta = (self.color_shift - self.color_cycle) * iterations
        return _trunc_div(delta, self.max_iterations) + self.color_cycle

    def zoom_in(self, factor: float, mouse_x: float, mouse_y: float) -> None:
        """Multiply the zoom by *factor*, pulling the offset toward the mouse."""
        self.zoom *= factor
        self.offset_x += (mouse_x - self.offset_x) * (1 - 1 / factor)
        self.offset_y += (mouse_y - self.offset_y) * (1 - 1 / factor)

    def zoom_out(self, factor: float, mouse_x: float, mouse_y: float) -> None:
        """Divide the zoom by *factor*, shifting the offset relative to the mouse."""
        self.zoom /= factor
        self.offset_x -= (mouse_x - self.offset_x) * (1 - factor)
        self.offset_y -= (mouse_y - self.offset_y) * (1 - factor)

    def update_max_iterations(self) -> None:
        """Derive the iteration budget from the current zoom."""
        self.max_iterations = int(42 + 50 * math.log(self.zoom + 1.0))

    def screen_to_plane(self, x, y):
        """Map screen coordinates to the complex plane as a pair (re, im)."""
        re = map_range(x, 0, self.width, self.min_x, self.max_x) * self.zoom + self.offset_x
        im = map_range(y, 0, self.height, self.min_y, self.max_y) * self.zoom + self.offset_y
        return re, im