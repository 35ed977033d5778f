"""Keyboard and mouse handling that drives a fractal view."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from fractol.state import Fractal, FractalType, map_range

ZOOM_FACTOR = 1.1
PAN_STEP = 0.5
ITERATION_STEP = 10
MOVE_THRESHOLD = 10


class Key(enum.IntEnum):
    """Key codes understood by the controller."""

    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    M = 109
    L = 108
    R = 114
    I = 105  # noqa: E741
    O = 111
    C = 99
    V = 118


class MouseButton(enum.IntEnum):
    """Mouse buttons with a special meaning."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


def _no_redraw(fractal: Fractal) -> None:
    return None


@dataclass
class Controller:
    """Applies input events to a fractal and asks for a redraw afterwards."""

    fractal: Fractal
    redraw: Callable[[Fractal], None] = _no_redraw
    running: bool = True
    _last_x: int = field(default=-1, init=False, repr=False)
    _last_y: int = field(default=-1, init=False, repr=False)

    def handle_key(self, key: int) -> None:
        """Act on a key press; Escape stops the controller without redrawing."""
        f = self.fractal
        if key == Key.ESCAPE:
            self.running = False
            return
        if key == Key.LEFT:
            f.offset_x -= PAN_STEP * f.zoom
        elif key == Key.UP:
            f.offset_y -= PAN_STEP * f.zoom
        elif key == Key.RIGHT:
            f.offset_x += PAN_STEP * f.zoom
        elif key == Key.DOWN:
            f.offset_y += PAN_STEP * f.zoom
        elif key == Key.M:
            f.max_iterations += ITERATION_STEP
        elif key == Key.L:
            f.max_iterations -= ITERATION_STEP
        elif key == Key.R:
            f.reset()
        elif key == Key.C:
            f.next_cycle_color()
        elif key == Key.V:
            f.next_palette_color()
        self.redraw(f)

    def handle_mouse_button(self, button: int, x: int, y: int) -> None:
        """Zoom around the pointer on scroll, then refresh the iteration budget."""
        f = self.fractal
        mouse_x = map_range(x, 0, f.width, f.min_x, f.max_x)
        mouse_y = map_range(y, 0, f.height, f.min_y, f.max_y)
        if button == MouseButton.SCROLL_DOWN:
            f.zoom_in(ZOOM_FACTOR, mouse_x, mouse_y)
        elif button == MouseButton.SCROLL_UP:
            f.zoom_out(ZOOM_FACTOR, mouse_x, mouse_y)
        f.update_max_iterations()
        self.redraw(f)

    def handle_mouse_move(self, x: int, y: int) -> None:
        """For Julia sets, move the constant to the pointer after a large enough move."""
        f = self.fractal
        if f.type is not FractalType.JULIA:
            return
        if abs(x - self._last_x) > MOVE_THRESHOLD or abs(y - self._last_y) > MOVE_THRESHOLD:
            f.julia_x, f.julia_y = f.screen_to_plane(x, y)
            self.redraw(f)
            self._last_x = x
            self._last_y = y