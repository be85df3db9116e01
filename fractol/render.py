"""Escape-time iteration of the fractals and conversion to pixel colours."""

import numpy as np

from .color import bernstein_colors
from .config import (
    BOUND_MAX,
    BOUND_MIN,
    ESCAPE_RADIUS_SQUARED,
    MAX_ITERATIONS,
    FractalKind,
)
from .mathops import square, starting_point

OPAQUE = 0xFF


def _factor(kind):
    """Tricorn squares the conjugate; the other kinds square the point."""
    return BOUND_MIN if kind is FractalKind.TRICORN else BOUND_MAX


def iterate_point(kind, z, c):
    """Return the escape iteration of one point.

    The result is the index of the step at which ``|z|^2`` first exceeds
    the escape radius, or ``MAX_ITERATIONS`` when the point never escapes.
    """
    factor = _factor(kind)
    z = complex(z)
    c = complex(c)
    for step in range(MAX_ITERATIONS):
        z = square(z, factor) + c
        if z.real * z.real + z.imag * z.imag > ESCAPE_RADIUS_SQUARED:
            return step
    return MAX_ITERATIONS


def escape_counts(view, width, height):
    """Return a ``(height, width)`` array of escape iterations for ``view``."""
    xs = np.arange(width)[np.newaxis, :]
    ys = np.arange(height)[:, np.newaxis]
    z, c = starting_point(view.kind, xs, ys, view.zoom_level, view.offset, view.constant)
    z = np.array(np.broadcast_to(z, (height, width)), dtype=complex)
    c = np.array(np.broadcast_to(c, (height, width)), dtype=complex)
    factor = _factor(view.kind)

    counts = np.full((height, width), MAX_ITERATIONS, dtype=np.int64)
    active = np.ones((height, width), dtype=bool)
    for step in range(MAX_ITERATIONS):
        if not active.any():
            break
        current = square(z[active], factor) + c[active]
        z[active] = current
        escaped_now = current.real * current.real + current.imag * current.imag > ESCAPE_RADIUS_SQUARED
        escaped = np.zeros_like(active)
        escaped[active] = escaped_now
        counts[escaped] = step
        active &= ~escaped
    return counts


def render_pixels(view, width, height):
    """Return a ``(height, width)`` array of packed ``0xRRGGBBAA`` colours."""
    return bernstein_colors(escape_counts(view, width, height), OPAQUE, view.shifts)