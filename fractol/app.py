"""Command-line entry point and interactive window."""

from __future__ import annotations

import sys
from typing import Sequence

import numpy as np

from fractol.events import Controller, Key
from fractol.parsing import is_number, matches_prefix, parse_decimal
from fractol.render import render
from fractol.state import Fractal, FractalType

WINDOW_TITLE = "Fractol"
JULIA_LIMIT = 2.0

_USAGE_LINES = (
    "Usage: ./fractol [Mandelbrot | Tricorn]",
    "./fractol Julia [X] [Y]",
    "X and Y values must be between -2 and 2.",
)

_INSTRUCTION_LINES = (
    "Instructions:",
    "Zoom: Mouse wheel",
    "Move: Arrows",
    "Change color: C",
    "Change color palette: V",
    "Increase max iterations: M",
    "Decrease max iterations: L",
    "Reset: R",
    "Exit: ESC",
)


class UsageError(ValueError):
    """The command-line arguments do not describe a fractal."""


def usage_text() -> str:
    """Return the usage message."""
    return "\n".join(_USAGE_LINES) + "\n"


def instructions_text() -> str:
    """Return the control instructions."""
    return "\n".join(_INSTRUCTION_LINES) + "\n"


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from the arguments that follow the program name."""
    args = list(argv)
    if len(args) == 1 and matches_prefix(args[0], "Mandelbrot", 10):
        return Fractal(type=FractalType.MANDELBROT)
    if len(args) == 1 and matches_prefix(args[0], "Tricorn", 7):
        return Fractal(type=FractalType.TRICORN)
    if len(args) == 3 and matches_prefix(args[0], "Julia", 5):
        if not (is_number(args[1]) and is_number(args[2])):
            raise UsageError("Julia parameters must be numbers")
        cx = parse_decimal(args[1])
        cy = parse_decimal(args[2])
        if not (-JULIA_LIMIT <= cx <= JULIA_LIMIT and -JULIA_LIMIT <= cy <= JULIA_LIMIT):
            raise UsageError("Julia parameters must be between -2 and 2")
        fractal = Fractal(type=FractalType.JULIA)
        fractal.julia_x = cx
        fractal.julia_y = cy
        return fractal
    raise UsageError("unrecognised arguments")


def _to_rgb(colors: np.ndarray) -> np.ndarray:
    """Turn a (height, width) array of 0xRRGGBB into a (width, height, 3) byte array."""
    rgb = np.stack(
        [(colors >> 16) & 0xFF, (colors >> 8) & 0xFF, colors & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def run(fractal: Fractal) -> None:
    """Open a window and draw the fractal until the user quits."""
    import pygame

    key_codes = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((fractal.width, fractal.height))
        pygame.display.set_caption(WINDOW_TITLE)

        def redraw(f: Fractal) -> None:
            pygame.surfarray.blit_array(screen, _to_rgb(render(f)))
            pygame.display.flip()

        controller = Controller(fractal, redraw=redraw)
        redraw(fractal)
        while controller.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                controller.running = False
            elif event.type == pygame.KEYDOWN:
                controller.handle_key(key_codes.get(event.key, event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                controller.handle_mouse_button(event.button, x, y)
            elif event.type == pygame.MOUSEMOTION:
                x, y = event.pos
                controller.handle_mouse_move(x, y)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, print the controls and run the viewer."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError:
        sys.stderr.write(usage_text())
        return 1
    sys.stdout.write(instructions_text())
    run(fractal)
    return 0


if __name__ == "__main__":
    sys.exit(main())