import pytest

from fractol.config import (
    ZOOM_INIT,
    ZOOM_TRICORN_INIT,
    FractalKind,
    fractal_kind,
    initial_zoom,
)


@pytest.mark.parametrize(
    "name, kind",
    [
        ("julia", FractalKind.JULIA),
        ("mandelbrot", FractalKind.MANDELBROT),
        ("tricorn", FractalKind.TRICORN),
        ("mandelbrot_extra", FractalKind.MANDELBROT),
        ("juliaset", FractalKind.JULIA),
    ],
)
def test_fractal_kind_matches_prefix(name, kind):
    assert fractal_kind(name) is kind


@pytest.mark.parametrize("name", ["juli", "", "Mandelbrot", "burningship"])
def test_fractal_kind_rejects_unknown(name):
    with pytest.raises(ValueError):
        fractal_kind(name)


def test_initial_zoom_for_tricorn():
    assert initial_zoom(FractalKind.TRICORN) == 0.911


@pytest.mark.parametrize("kind", [FractalKind.JULIA, FractalKind.MANDELBROT])
def test_initial_zoom_for_others(kind):
    assert initial_zoom(kind) == 0.618


def test_initial_zoom_matches_constants():
    assert initial_zoom(FractalKind.TRICORN) == ZOOM_TRICORN_INIT
    assert initial_zoom(FractalKind.MANDELBROT) == ZOOM_INIT