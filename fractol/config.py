"""Window geometry, iteration limits, navigation constants and fractal kinds."""

from enum import Enum

WIDTH = 1920
HEIGHT = 995
WINDOW_TITLE_PREFIX = "fract-ol | type of fractal - "

BOUND_MAX = 2.0
BOUND_MIN = -2.0

MAX_ITERATIONS = 120
MAX_COLOR_DEFINITION = 250
ESCAPE_RADIUS_SQUARED = 4

SPEED = 10
ZOOM_INIT = 0.618
ZOOM_TRICORN_INIT = 0.911
ZOOM_MAX = 0.000000000000005642

COLOR_STEP = 0.03
ZOOM_OFFSET_FACTOR = 0.01
PAN_DIVISOR = 20

RENDER_DELAY = 0.03

DEFAULT_SHIFTS = (10.9, 0.0, 0.0)


class FractalKind(Enum):
    """The fractals that can be drawn."""

    JULIA = "julia"
    MANDELBROT = "mandelbrot"
    TRICORN = "tricorn"


def fractal_kind(name):
    """Return the fractal kind whose name begins ``name``.

    A name matches a kind when it starts with the kind's name, so
    ``"mandelbrot2"`` selects the Mandelbrot set. Raises ``ValueError``
    when no kind matches.
    """
    for kind in (FractalKind.JULIA, FractalKind.MANDELBROT, FractalKind.TRICORN):
        if name.startswith(kind.value):
            return kind
    raise ValueError(f"unknown fractal: {name!r}")


def initial_zoom(kind):
    """Return the zoom a view of ``kind`` starts at (and resets to)."""
    if kind is FractalKind.TRICORN:
        return ZOOM_TRICORN_INIT
    return ZOOM_INIT