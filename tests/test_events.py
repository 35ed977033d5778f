import pytest

from fractol.events import Controller, Key, MouseButton
from fractol.state import (
    BLACK,
    PSYCHEDELIC_BLUE,
    WHITE,
    Fractal,
    FractalType,
    map_range,
)


def make(kind=FractalType.MANDELBROT):
    drawn = []
    fractal = Fractal(type=kind)
    controller = Controller(fractal, redraw=drawn.append)
    return controller, fractal, drawn


def test_raw_x11_keysyms_drive_controller():
    controller, fractal, drawn = make()
    before = fractal.offset_x
    controller.handle_key(65361)
    assert fractal.offset_x == pytest.approx(before - 0.5 * fractal.zoom)
    assert drawn == [fractal]

    controller.handle_mouse_button(5, 400, 400)
    assert fractal.zoom == pytest.approx(1.1)
    controller.handle_mouse_button(4, 400, 400)
    assert fractal.zoom == pytest.approx(1.0)

    controller.handle_key(65307)
    assert controller.running is False
    assert len(drawn) == 3


def test_escape_stops_without_redraw():
    controller, _, drawn = make()
    controller.handle_key(Key.ESCAPE)
    assert controller.running is False
    assert drawn == []


@pytest.mark.parametrize(
    "key, attr, sign",
    [
        (Key.LEFT, "offset_x", -1),
        (Key.RIGHT, "offset_x", 1),
        (Key.UP, "offset_y", -1),
        (Key.DOWN, "offset_y", 1),
    ],
)
def test_arrows_pan_by_half_zoom(key, attr, sign):
    controller, fractal, drawn = make()
    fractal.zoom = 3.0
    before = getattr(fractal, attr)
    controller.handle_key(key)
    assert getattr(fractal, attr) == pytest.approx(before + sign * 0.5 * fractal.zoom)
    assert drawn == [fractal]


def test_iteration_keys_adjust_budget():
    controller, fractal, _ = make()
    start = fractal.max_iterations
    controller.handle_key(Key.M)
    controller.handle_key(Key.M)
    assert fractal.max_iterations == start + 20
    controller.handle_key(Key.L)
    assert fractal.max_iterations == start + 10


def test_reset_key_restores_view():
    controller, fractal, _ = make()
    controller.handle_key(Key.LEFT)
    controller.handle_key(Key.M)
    controller.handle_key(Key.R)
    fresh = Fractal()
    assert fractal.offset_x == fresh.offset_x
    assert fractal.max_iterations == fresh.max_iterations


def test_color_keys_step_through_colors():
    controller, fractal, _ = make()
    controller.handle_key(Key.C)
    assert fractal.color_cycle == BLACK
    controller.handle_key(Key.C)
    assert fractal.color_cycle == WHITE
    controller.handle_key(Key.V)
    assert fractal.color_shift == PSYCHEDELIC_BLUE


def test_unknown_key_still_redraws():
    controller, fractal, drawn = make()
    offset = fractal.offset_x
    controller.handle_key(12345)
    assert drawn == [fractal]
    assert fractal.offset_x == offset
    assert controller.running is True


def test_scroll_down_zooms_in_around_pointer():
    controller, fractal, drawn = make()
    reference = Fractal()
    mx = map_range(100, 0, reference.width, reference.min_x, reference.max_x)
    my = map_range(300, 0, reference.height, reference.min_y, reference.max_y)
    reference.zoom_in(1.1, mx, my)
    reference.update_max_iterations()
    controller.handle_mouse_button(MouseButton.SCROLL_DOWN, 100, 300)
    assert fractal.zoom == pytest.approx(reference.zoom)
    assert fractal.offset_x == pytest.approx(reference.offset_x)
    assert fractal.offset_y == pytest.approx(reference.offset_y)
    assert fractal.max_iterations == reference.max_iterations
    assert len(drawn) == 1


def test_scroll_up_zooms_out():
    controller, fractal, _ = make()
    controller.handle_mouse_button(MouseButton.SCROLL_UP, 400, 400)
    assert fractal.zoom < 1.0
    reference = Fractal()
    reference.zoom_out(1.1, 0.0, 0.0)
    assert fractal.offset_x == pytest.approx(reference.offset_x)


def test_other_button_only_updates_iterations():
    controller, fractal, drawn = make()
    controller.handle_mouse_button(1, 10, 10)
    assert fractal.zoom == 1.0
    reference = Fractal()
    reference.update_max_iterations()
    assert fractal.max_iterations == reference.max_iterations
    assert drawn == [fractal]


def test_mouse_move_ignored_for_mandelbrot():
    controller, fractal, drawn = make()
    controller.handle_mouse_move(500, 500)
    assert (fractal.julia_x, fractal.julia_y) == (-0.7, 0.27015)
    assert drawn == []


def test_mouse_move_sets_julia_constant():
    controller, fractal, drawn = make(FractalType.JULIA)
    controller.handle_mouse_move(600, 200)
    expected = fractal.screen_to_plane(600, 200)
    assert (fractal.julia_x, fractal.julia_y) == pytest.approx(expected)
    assert drawn == [fractal]


def test_small_mouse_moves_are_ignored():
    controller, fractal, drawn = make(FractalType.JULIA)
    controller.handle_mouse_move(600, 200)
    first = (fractal.julia_x, fractal.julia_y)
    controller.handle_mouse_move(605, 208)
    assert (fractal.julia_x, fractal.julia_y) == first
    assert len(drawn) == 1
    controller.handle_mouse_move(620, 208)
    assert len(drawn) == 2
    assert fractal.julia_x != first[0]


def test_first_move_near_origin_is_ignored():
    controller, fractal, drawn = make(FractalType.JULIA)
    controller.handle_mouse_move(0, 0)
    assert drawn == []
    assert (fractal.julia_x, fractal.julia_y) == (-0.7, 0.27015)