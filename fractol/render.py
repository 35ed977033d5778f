"""Escape-time iteration and frame rendering."""

from __future__ import annotations

import numpy as np

from fractol.state import BLACK, Fractal, FractalType

ESCAPE_RADIUS_SQUARED = 4


def complex_square(z: complex) -> complex:
    """Return z squared, computed component-wise."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def starting_point(fractal: Fractal, x, y) -> tuple[complex, complex]:
    """Return the initial z and the constant c for the pixel at (x, y)."""
    re, im = fractal.screen_to_plane(x, y)
    point = complex(re, im)
    if fractal.type is FractalType.JULIA:
        return point, complex(fractal.julia_x, fractal.julia_y)
    if fractal.type is FractalType.TRICORN:
        return point, point.conjugate()
    return point, point


def escape_iterations(fractal: Fractal, x, y) -> int | None:
    """Return the iteration at which the orbit escapes, or None if it stays bounded."""
    z, c = starting_point(fractal, x, y)
    for iteration in range(fractal.max_iterations):
        z = complex_square(z) + c
        if z.real * z.real + z.imag * z.imag > ESCAPE_RADIUS_SQUARED:
            return iteration
    return None


def pixel_color(fractal: Fractal, x, y) -> int:
    """Return the colour of the pixel at (x, y)."""
    iterations = escape_iterations(fractal, x, y)
    if iterations is None:
        return BLACK
    return fractal.color_for(iterations)


def render(fractal: Fractal, width: int | None = None, height: int | None = None) -> np.ndarray:
    """Render a frame as a (height, width) array of 0xRRGGBB colours.

    The screen mapping uses the fractal's own size; *width* and *height*
    choose how many pixels of it are drawn and default to that size.
    """
    width = fractal.width if width is None else width
    height = fractal.height if height is None else height

    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    re, im = fractal.screen_to_plane(xs, ys)
    zx = np.broadcast_to(re, (height, width)).copy()
    zy = np.broadcast_to(im[:, None], (height, width)).copy()

    if fractal.type is FractalType.JULIA:
        cx = np.full((height, width), fractal.julia_x)
        cy = np.full((height, width), fractal.julia_y)
    elif fractal.type is FractalType.TRICORN:
        cx, cy = zx.copy(), -zy
    else:
        cx, cy = zx.copy(), zy.copy()

    escaped_at = np.full((height, width), -1, dtype=np.int64)
    active = np.ones((height, width), dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for iteration in range(fractal.max_iterations):
            if not active.any():
                break
            zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
            escaping = active & (zx * zx + zy * zy > ESCAPE_RADIUS_SQUARED)
            escaped_at[escaping] = iteration
            active &= ~escaping

    colors = np.full((height, width), BLACK, dtype=np.int64)
    escaped = escaped_at >= 0
    if escaped.any():
        delta = (fractal.color_shift - fractal.color_cycle) * escaped_at[escaped]
        divisor = fractal.max_iterations
        quotient = np.abs(delta) // abs(divisor)
        quotient = np.where((delta < 0) != (divisor < 0), -quotient, quotient)
        colors[escaped] = quotient + fractal.color_cycle
    return (colors & 0xFFFFFFFF).astype(np.uint32)