import numpy as np
import pygame
import pytest

from fractol.app import FractolApp, action_for_key, main, window_title
from fractol.config import RENDER_DELAY, WINDOW_TITLE_PREFIX, FractalKind
from fractol.parse import FractalSpec
from fractol.view import Action, create_view


def _spec(kind=FractalKind.MANDELBROT, constant=0j):
    return FractalSpec(kind.value, kind, constant)


def _ready_app(kind=FractalKind.MANDELBROT, constant=0j):
    app = FractolApp(create_view(_spec(kind, constant)), "title")
    app.width = 8
    app.height = 6
    app.tick(0.0)
    app.tick(1.0)
    return app


def test_window_title_appends_name():
    assert window_title("julia") == WINDOW_TITLE_PREFIX + "julia"


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_RIGHT, Action.PAN_RIGHT),
        (pygame.K_LEFT, Action.PAN_LEFT),
        (pygame.K_UP, Action.PAN_UP),
        (pygame.K_DOWN, Action.PAN_DOWN),
        (pygame.K_EQUALS, Action.ZOOM_IN),
        (pygame.K_MINUS, Action.ZOOM_OUT),
        (pygame.K_c, Action.SHIFT_ALL),
        (pygame.K_r, Action.SHIFT_RED),
        (pygame.K_g, Action.SHIFT_GREEN),
        (pygame.K_b, Action.SHIFT_BLUE),
        (pygame.K_1, Action.RESET),
        (pygame.K_0, Action.RESET_BLACK),
    ],
)
def test_action_for_key(key, action):
    assert action_for_key(key) is action


def test_unbound_key_has_no_action():
    assert action_for_key(pygame.K_q) is None


def test_keys_ignored_while_rendering():
    app = FractolApp(create_view(_spec()), "title")
    assert app.rendering is True
    assert app.handle_key(pygame.K_RIGHT) is None
    assert app.view.offset == 0j


def test_escape_stops_even_while_rendering():
    app = FractolApp(create_view(_spec()), "title")
    app.handle_key(pygame.K_ESCAPE)
    assert app.running is False


def test_tick_draws_pending_frame_then_waits_for_delay():
    app = FractolApp(create_view(_spec()), "title")
    app.width = 8
    app.height = 6
    assert app.tick(5.0) is True
    assert app.pixels.shape == (6, 8)
    assert app.delay == pytest.approx(5.0 + RENDER_DELAY)
    assert app.tick(5.0) is False
    assert app.rendering is True
    app.tick(6.0)
    assert app.rendering is False


def test_pixels_are_opaque():
    app = _ready_app()
    assert app.pixels.shape == (6, 8)
    alphas = sorted(set(np.asarray(app.pixels & 0xFF).ravel().tolist()))
    assert alphas == [0xFF]


def test_key_applies_action_and_requests_render():
    app = _ready_app()
    assert app.handle_key(pygame.K_RIGHT) is Action.PAN_RIGHT
    expected = create_view(_spec())
    expected.apply(Action.PAN_RIGHT)
    assert app.view.offset == expected.offset
    assert app.rendering is True
    assert app.tick(2.0) is True


def test_second_key_ignored_until_frame_done():
    app = _ready_app()
    app.handle_key(pygame.K_c)
    app.handle_key(pygame.K_c)
    expected = create_view(_spec())
    expected.apply(Action.SHIFT_ALL)
    assert app.view.shifts == expected.shifts


def test_scroll_zooms_toward_mouse():
    app = _ready_app(FractalKind.JULIA, complex(0.285, 0.01))
    assert app.handle_scroll(1.0, 100, 50) is True
    expected = create_view(_spec(FractalKind.JULIA, complex(0.285, 0.01)))
    expected.zoom_toward(True, 100, 50)
    assert app.view.zoom_level == pytest.approx(expected.zoom_level)
    assert app.view.offset == expected.offset
    assert app.view.zoom_level < app.view.zoom_init


def test_zero_scroll_does_nothing():
    app = _ready_app()
    before = app.view.zoom_level
    assert app.handle_scroll(0.0, 10, 10) is False
    assert app.view.zoom_level == before
    assert app.rendering is False


def test_scroll_ignored_while_rendering():
    app = FractolApp(create_view(_spec()), "title")
    assert app.handle_scroll(1.0, 10, 10) is False


def test_main_rejects_unknown_fractal(capsys):
    assert main(["sierpinski"]) == 1
    captured = capsys.readouterr()
    assert "Invalid Fractal" in captured.err
    assert "FRACTOL GUIDE" in captured.out


def test_main_rejects_julia_constant_out_of_range(capsys):
    assert main(["julia", "5", "0"]) == 1
    assert "Invalid constant real." in capsys.readouterr().err